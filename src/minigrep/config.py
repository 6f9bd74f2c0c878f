"""Configuration management for minigrep."""

import codecs
import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings read from ``MINIGREP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MINIGREP_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Search configuration
    case_insensitive: bool = Field(
        default=False, description="Ignore case when matching, same as the -i flag"
    )
    encoding: str = Field(default="utf-8", description="Text encoding of the searched file")

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Reject encodings Python does not know about."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        """Reject format strings logging cannot use."""
        try:
            logging.Formatter(value)
        except ValueError as e:
            raise ValueError(f"invalid log format: {e}") from e
        return value

    def setup_logging(self) -> None:
        """Configure application logging.

        Records go to stderr so they never interleave with matched lines.
        """
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format=self.log_format,
        )
