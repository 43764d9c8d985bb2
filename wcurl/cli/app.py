"""
Defines the command-line interface for the application using Typer.
"""

import logging

import typer
from rich.logging import RichHandler
from typer.core import TyperCommand

from wcurl import PROGRAM_NAME
from wcurl.core.command import build_curl_args
from wcurl.core.invoker import format_command, run_curl
from wcurl.core.probe import get_curl_version
from wcurl.exceptions import WcurlError
from wcurl.storage.config_manager import ConfigManager, get_config_file

from .formatters import err_console, print_command, print_error, print_usage
from .parser import parse_args

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=err_console,
            rich_tracebacks=True,
            show_path=False,
        )
    ],
)
log = logging.getLogger("wcurl")

RAW_ARGS_KEY = "wcurl.raw_args"


class RawArgsCommand(TyperCommand):
    """
    A command that leaves its arguments unparsed.

    Click would drop `--` and reject glued `-o<PATH>` values, so the raw list
    is stored in `ctx.meta` for the wcurl parser instead.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return []


app = typer.Typer(
    name=PROGRAM_NAME,
    help="A simple wrapper around curl to easily download files.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@app.command(cls=RawArgsCommand, add_help_option=False)
def download(ctx: typer.Context) -> None:
    """Download one or more URLs with curl."""
    args = ctx.meta.get(RAW_ARGS_KEY, [])
    if not args:
        print_usage()
        raise typer.Exit(code=1)

    try:
        config = parse_args(args)

        settings = ConfigManager(get_config_file()).load_settings()
        log.setLevel(settings.log_level)

        version = get_curl_version(settings.curl_binary)
        curl_args = build_curl_args(config, version)

        if config.dry_run:
            print_command(format_command(settings.curl_binary, curl_args))
        else:
            run_curl(settings.curl_binary, curl_args)
    except WcurlError as e:
        print_error(e)
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        raise typer.Exit(code=1) from None
