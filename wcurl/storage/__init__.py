"""
Storage Layer.

This package handles the optional settings file.
"""

from .config_manager import ConfigManager, get_config_file

__all__ = ["ConfigManager", "get_config_file"]
