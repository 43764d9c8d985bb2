"""
Functions for writing usage, version, command and error text to the console
using Rich.
"""

from rich.console import Console
from rich.markup import escape

from wcurl import PROGRAM_NAME, __version__

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)

USAGE = f"""\
{PROGRAM_NAME} -- a simple wrapper around curl to easily download files.

Usage: {PROGRAM_NAME} <URL>...
       {PROGRAM_NAME} [--curl-options <CURL_OPTIONS>]... [--no-decode-filename] [-o|-O|--output <PATH>] [--dry-run] [--] <URL>...
       {PROGRAM_NAME} [--curl-options=<CURL_OPTIONS>]... [--no-decode-filename] [--output=<PATH>] [--dry-run] [--] <URL>...
       {PROGRAM_NAME} -h|--help
       {PROGRAM_NAME} -V|--version

Options:

  --curl-options <CURL_OPTIONS>: Specify extra options to be passed when invoking curl. May be
                                 specified more than once.

  -o, -O, --output <PATH>: Use the provided output path instead of getting it from the URL. If
                           multiple URLs are provided, resulting files share the same name with a
                           number appended to the end (curl >= 7.83.0). If this option is provided
                           multiple times, only the last value is considered.

  --no-decode-filename: Don't percent-decode the output filename, even if the percent-encoding in
                        the URL was done by {PROGRAM_NAME}, e.g.: The URL contained whitespace.

  --dry-run: Don't actually execute curl, just print what would be invoked.

  -V, --version: Print version information.

  -h, --help: Print this usage message.

  <CURL_OPTIONS>: Any option supported by curl can be set here. This is not used by {PROGRAM_NAME}; it is
                  instead forwarded to the curl invocation.

  <URL>: URL to be downloaded. Anything that is not a parameter is considered
         an URL. Whitespace is percent-encoded and the URL is passed to curl, which
         then performs the parsing. May be specified more than once."""


def print_usage() -> None:
    console.print(USAGE, markup=False, soft_wrap=True)


def print_version() -> None:
    console.print(__version__, markup=False)


def print_command(line: str) -> None:
    """Prints a dry-run command line exactly as given."""
    console.print(line, markup=False, soft_wrap=True)


def print_error(error: Exception | str) -> None:
    """Reports an error on stderr with the `Error: ` prefix."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True
    )
