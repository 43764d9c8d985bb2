"""
Detects the version of the installed curl.
"""

import logging
import re
import subprocess

from wcurl.exceptions import ProbeError
from wcurl.models.version import ToolVersion

log = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+", re.ASCII)


def parse_curl_version(output: str) -> ToolVersion:
    """
    Parses the output of `curl --version`.

    The first line looks like `curl 8.5.0 (x86_64-pc-linux-gnu) libcurl/8.5.0 ...`;
    the second token holds the dotted version.
    """
    lines = output.splitlines()
    if not lines:
        raise ProbeError("No version output")

    parts = lines[0].split()
    if len(parts) < 2:
        raise ProbeError("Could not parse curl version")

    version_parts = parts[1].split(".")
    if len(version_parts) < 2:
        raise ProbeError("Invalid version format")

    major, minor = version_parts[:2]
    if not _NUMBER.fullmatch(major):
        raise ProbeError("Invalid major version")
    if not _NUMBER.fullmatch(minor):
        raise ProbeError("Invalid minor version")

    return ToolVersion(int(major), int(minor))


def get_curl_version(curl_binary: str = "curl") -> ToolVersion:
    """
    Runs `<curl_binary> --version` and returns the reported (major, minor).

    Raises:
        ProbeError: If curl cannot be started or its output cannot be parsed.
    """
    try:
        completed = subprocess.run(
            [curl_binary, "--version"],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        raise ProbeError(f"Failed to execute {curl_binary}: {e}") from e

    if completed.returncode != 0:
        log.debug(
            f"'{curl_binary} --version' exited with status {completed.returncode}"
        )

    version = parse_curl_version(completed.stdout)
    log.debug(f"Detected curl version {version}")
    return version
