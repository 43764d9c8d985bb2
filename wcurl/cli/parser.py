"""
Parses the wcurl command line.

The grammar is scanned strictly left to right: options may be interleaved
with URLs, `-o<PATH>` may be glued, and a lone `--` turns every remaining
token into a URL.
"""

import logging

import typer

from wcurl.exceptions import UsageError
from wcurl.models.config import Configuration
from wcurl.utils.percent import encode_whitespace

from .formatters import print_usage, print_version

log = logging.getLogger(__name__)

OUTPUT_FLAGS = ("-o", "-O", "--output")
CURL_OPTIONS_FLAG = "--curl-options"


def parse_args(args: list[str]) -> Configuration:
    """
    Converts the process arguments (without the program name) into a
    Configuration.

    `-h/--help` and `-V/--version` print their text and raise `typer.Exit`.

    Raises:
        UsageError: On an unknown option, a missing option value or when no
        URL is given.
    """
    extra_options: list[str] = []
    urls: list[str] = []
    output_path: str | None = None
    decode_filename = True
    dry_run = False
    reading_urls = False

    tokens = iter(args)
    for arg in tokens:
        if reading_urls:
            urls.append(encode_whitespace(arg))
            continue

        if arg in ("-h", "--help"):
            print_usage()
            raise typer.Exit()
        elif arg in ("-V", "--version"):
            print_version()
            raise typer.Exit()
        elif arg == "--dry-run":
            dry_run = True
        elif arg == "--no-decode-filename":
            decode_filename = False
        elif arg == CURL_OPTIONS_FLAG:
            value = next(tokens, None)
            if value is None:
                raise UsageError(f"{CURL_OPTIONS_FLAG} requires an argument")
            extra_options.append(value)
        elif arg in OUTPUT_FLAGS:
            value = next(tokens, None)
            if value is None:
                raise UsageError(f"{arg} requires an argument")
            output_path = value
        elif arg == "--":
            reading_urls = True
        elif arg.startswith(f"{CURL_OPTIONS_FLAG}="):
            extra_options.append(arg.split("=", 1)[1])
        elif arg.startswith("--output="):
            output_path = arg.split("=", 1)[1]
        elif arg.startswith(("-o", "-O")):
            output_path = arg[2:]
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: '{arg}'")
        else:
            urls.append(encode_whitespace(arg))

    if not urls:
        raise UsageError("You must provide at least one URL to download.")

    config = Configuration(
        extra_options=tuple(extra_options),
        urls=tuple(urls),
        output_path=output_path,
        decode_filename=decode_filename,
        dry_run=dry_run,
    )
    log.debug(f"Parsed command line: {config!r}")
    return config
