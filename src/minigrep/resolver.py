"""Turn command line tokens into a validated ``Config``."""

import argparse
import logging
from collections.abc import Sequence
from typing import NoReturn

from . import __version__
from .exceptions import InvalidArgumentError, MissingArgumentError
from .models import Config

logger = logging.getLogger(__name__)

# Positional fields in the order they are consumed.
REQUIRED_FIELDS = ("query", "file_path")


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the parser for ``minigrep [-i] QUERY FILE_PATH``."""
    parser = _ArgumentParser(
        prog="minigrep",
        allow_abbrev=False,
        description="Print every line of a file that contains a query string.",
    )
    # Both positionals are optional here so that absence surfaces as
    # MissingArgumentError naming the field.
    parser.add_argument("query", nargs="?", help="Substring to search for.")
    parser.add_argument("file_path", nargs="?", help="File to search.")
    parser.add_argument(
        "-i",
        "--case-insensitive",
        action="store_true",
        help="Ignore case when matching (also enabled by MINIGREP_CASE_INSENSITIVE).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: Sequence[str], case_insensitive: bool = False) -> Config:
    """
    Resolve a search configuration from argument tokens.

    Args:
        args: Argument tokens, without the program name
        case_insensitive: Override from the environment; either this or the
            ``-i`` flag turns on case-insensitive matching

    Returns:
        Immutable Config

    Raises:
        MissingArgumentError: If the query or the file path is absent
        InvalidArgumentError: For unknown options or extra arguments
    """
    namespace = build_parser().parse_args(list(args))

    for field in REQUIRED_FIELDS:
        if getattr(namespace, field) is None:
            raise MissingArgumentError(field)

    config = Config(
        query=namespace.query,
        file_path=namespace.file_path,
        case_insensitive=namespace.case_insensitive or case_insensitive,
    )
    logger.debug("Resolved configuration: %s", config)
    return config
