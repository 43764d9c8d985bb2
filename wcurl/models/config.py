"""
Pydantic models for the parsed command line and the user's settings file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Configuration(BaseModel):
    """The options of one wcurl run, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    # Forwarded to curl verbatim, in the order given
    extra_options: tuple[str, ...] = ()
    # Whitespace already percent-encoded
    urls: tuple[str, ...] = Field(..., min_length=1)
    output_path: str | None = None
    decode_filename: bool = True
    dry_run: bool = False

    @property
    def has_user_set_output(self) -> bool:
        return self.output_path is not None


class WcurlSettings(BaseModel):
    """A validated model for the optional settings file."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    curl_binary: str = "curl"
    log_level: str = "WARNING"

    @field_validator("curl_binary")
    @classmethod
    def validate_curl_binary(cls, v: str) -> str:
        """Ensures the curl executable is named."""
        if not v:
            raise ValueError("curl_binary cannot be empty.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalizes the log level name and rejects unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        return level
