"""
Data Models Layer.

This package contains the models that describe a single wcurl run: the parsed
command line, the user's settings and the detected curl version.
"""

from .config import Configuration, WcurlSettings
from .version import ToolVersion

__all__ = ["Configuration", "ToolVersion", "WcurlSettings"]
