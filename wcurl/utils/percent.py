"""
The narrow slice of percent-encoding wcurl needs: encoding whitespace in URLs
and decoding the filename derived from one.
"""

import string

_HEX_DIGITS = frozenset(string.hexdigits)

# Decoding these would put a path separator into the filename.
_UNSAFE_ESCAPES = frozenset({"2F", "5C"})


def encode_whitespace(url: str) -> str:
    """Replaces every literal space in a URL with `%20`."""
    return url.replace(" ", "%20")


def _decode_run(data: bytearray) -> str:
    """
    Decodes consecutive escapes as UTF-8, falling back to one character per
    byte when the run is not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def percent_decode(value: str) -> str:
    """
    Decodes `%XX` escapes in a filename.

    Escapes for control characters (below 0x20), `/` (`%2F`) and `\\` (`%5C`)
    are left untouched, as is any `%` not followed by two hex digits.

    >>> percent_decode("na%C3%AFve%20file%2Fname.txt")
    'naïve file%2Fname.txt'
    """
    result: list[str] = []
    data = bytearray()

    def flush() -> None:
        if data:
            result.append(_decode_run(data))
            data.clear()

    i = 0
    while i < len(value):
        char = value[i]
        if char != "%":
            flush()
            result.append(char)
            i += 1
            continue

        escape = value[i : i + 3]
        hex_pair = escape[1:]
        if len(hex_pair) == 2 and all(c in _HEX_DIGITS for c in hex_pair):
            byte = int(hex_pair, 16)
            if byte >= 0x20 and hex_pair.upper() not in _UNSAFE_ESCAPES:
                data.append(byte)
                i += 3
                continue

        flush()
        result.append(escape)
        i += len(escape)

    flush()
    return "".join(result)
