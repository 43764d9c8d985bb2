"""
wcurl: a simple wrapper around curl to easily download files.
"""

__version__ = "2025.11.09"

PROGRAM_NAME = "wcurl"
