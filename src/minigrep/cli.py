"""Command-line entry point for minigrep."""

import logging
import sys

from pydantic import ValidationError as SettingsValidationError

from .config import Settings
from .exceptions import ConfigurationError, MinigrepError
from .resolver import resolve_config
from .runner import run

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        return Settings()
    except SettingsValidationError as exc:
        error = exc.errors()[0]
        setting = "MINIGREP_" + str(error["loc"][0]).upper() if error["loc"] else "MINIGREP"
        raise ConfigurationError(setting, error["msg"]) from exc


def main(argv: list[str] | None = None) -> int:
    """
    Run one search and return the process exit status.

    Args:
        argv: Argument tokens without the program name (defaults to sys.argv[1:])

    Returns:
        0 on success, otherwise the failing error's exit code
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        settings = load_settings()
        settings.setup_logging()
        config = resolve_config(args, case_insensitive=settings.case_insensitive)
        run(config, encoding=settings.encoding)
    except MinigrepError as exc:
        logger.debug("Aborting with %s: %s", exc.error_code, exc.details)
        print(f"minigrep: {exc.message}", file=sys.stderr)
        return exc.exit_code

    return 0


__all__ = ["load_settings", "main"]
