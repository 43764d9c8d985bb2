"""
The (major, minor) version of the installed curl.
"""

from typing import NamedTuple


class ToolVersion(NamedTuple):
    """
    A curl release as reported by `curl --version`.

    Instances compare as tuples, so `version >= ToolVersion(7, 66)` holds for
    7.66, 7.88 and 8.0 alike.
    """

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"
