"""
Runs the assembled curl command, or shows it when doing a dry run.
"""

import logging
import shlex
import subprocess
from collections.abc import Sequence

from wcurl.exceptions import ExecutionError

log = logging.getLogger(__name__)


def format_command(curl_binary: str, args: Sequence[str]) -> str:
    """Renders the invocation as a single shell-quoted line."""
    return shlex.join([curl_binary, *args])


def run_curl(curl_binary: str, args: Sequence[str]) -> None:
    """
    Executes curl with `args` and waits for it to finish.

    Raises:
        ExecutionError: If curl cannot be started or exits with a non-zero status.
    """
    command = [curl_binary, *args]
    log.debug(f"Running: {shlex.join(command)}")
    try:
        completed = subprocess.run(command, check=False)
    except OSError as e:
        raise ExecutionError(f"Failed to execute {curl_binary}: {e}") from e

    code = completed.returncode
    if code < 0:
        raise ExecutionError(f"{curl_binary} was terminated by signal {-code}", code)
    if code != 0:
        raise ExecutionError(f"{curl_binary} exited with status: {code}", code)
