"""
Manages locating, loading and validating the INI settings file.
"""

import configparser
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from wcurl import PROGRAM_NAME
from wcurl.exceptions import ConfigurationError
from wcurl.models.config import WcurlSettings

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WCURL_CONFIG"


def get_config_dir() -> Path:
    """
    Returns the directory holding wcurl's settings: `%APPDATA%\\wcurl` on
    Windows, `$XDG_CONFIG_HOME/wcurl` (default `~/.config/wcurl`) elsewhere.
    """
    if os.name == "nt":
        env_var, fallback = "APPDATA", "~/AppData/Roaming"
    else:
        env_var, fallback = "XDG_CONFIG_HOME", "~/.config"
    return Path(os.getenv(env_var) or fallback).expanduser() / PROGRAM_NAME


def get_config_file() -> Path:
    """Returns the settings file path, honouring `$WCURL_CONFIG`."""
    if override := os.getenv(CONFIG_ENV_VAR):
        return Path(override).expanduser()
    return get_config_dir() / "config.ini"


class ConfigManager:
    """Handles reading the application's INI settings file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_settings(self) -> WcurlSettings:
        """
        Loads settings from the INI file and validates them.

        A missing file is not an error; the defaults are returned instead.

        Raises:
            ConfigurationError: If the file cannot be parsed or fails validation.
        """
        if not self.config_file_path.is_file():
            log.debug(f"No settings file at '{self.config_file_path}', using defaults")
            return WcurlSettings()

        try:
            self._parser.read(self.config_file_path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Error parsing settings file: {e}") from e

        try:
            settings = WcurlSettings(**self._get_settings_as_dict())
        except ValidationError as e:
            raise ConfigurationError(
                f"Settings in '{self.config_file_path}' are invalid:\n{e}"
            ) from e

        log.debug(f"Loaded settings from '{self.config_file_path}'")
        return settings

    def _get_settings_as_dict(self) -> dict[str, str]:
        """Reads the known keys of the 'DEFAULT' section into a dictionary."""
        section = self._parser["DEFAULT"]
        return {
            key: section[key] for key in WcurlSettings.model_fields if key in section
        }
