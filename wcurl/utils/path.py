"""
Derives the default output filename for a URL.
"""

from .percent import percent_decode

DEFAULT_FILENAME = "index.html"


def url_filename(url: str, decode: bool = True) -> str:
    """
    Returns the last path segment of a URL, ignoring its scheme, query string
    and fragment. Falls back to `index.html` when the URL has no path or ends
    with a slash.

    >>> url_filename("https://example.com/path/file.txt?x=1")
    'file.txt'
    >>> url_filename("https://example.com/")
    'index.html'
    """
    _, scheme_sep, rest = url.partition("://")
    if not scheme_sep:
        rest = url

    for delimiter in ("?", "#"):
        rest = rest.split(delimiter, 1)[0]

    _, slash, filename = rest.rpartition("/")
    if not slash or not filename:
        return DEFAULT_FILENAME

    return percent_decode(filename) if decode else filename
