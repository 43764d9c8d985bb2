"""
Helpers for turning user-supplied URLs into safe curl arguments.
"""

from .path import DEFAULT_FILENAME, url_filename
from .percent import encode_whitespace, percent_decode

__all__ = ["DEFAULT_FILENAME", "encode_whitespace", "percent_decode", "url_filename"]
