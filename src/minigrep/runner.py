"""Read the target file, search it and emit the matching lines."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from .exceptions import FileReadError, OutputWriteError
from .models import Config
from .search import search

logger = logging.getLogger(__name__)


def read_contents(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    Line endings are left untranslated so ``\\r`` handling stays with the
    search engine.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        File content as string

    Raises:
        FileReadError: If the path is unusable, or the file is missing, unreadable
            or not valid text
    """
    try:
        with open(path, encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise FileReadError(str(path), e) from e

    logger.debug(f"Read file: {path} ({len(content)} characters)")
    return content


def run(config: Config, out: TextIO | None = None, encoding: str = "utf-8") -> list[str]:
    """
    Search ``config.file_path`` and write each match to ``out``.

    Output starts only after the file has been read and searched in full, and
    all matches go out in a single write so an encoding failure emits nothing.

    Args:
        config: Resolved search configuration
        out: Destination stream (defaults to stdout)
        encoding: Text encoding of the file

    Returns:
        The lines that were written, in file order

    Raises:
        FileReadError: If the file cannot be read
        OutputWriteError: If the matches cannot be encoded or written
    """
    contents = read_contents(config.file_path, encoding=encoding)
    results = search(config.query, contents, case_sensitive=config.case_sensitive)

    stream = out if out is not None else sys.stdout
    output = "".join(f"{line}\n" for line in results)
    try:
        stream.write(output)
        stream.flush()
    except (UnicodeEncodeError, BrokenPipeError) as e:
        raise OutputWriteError(e) from e

    return results
