"""Line-oriented substring search."""

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of ``contents`` in order.

    Lines end at ``\\n``; one ``\\r`` directly before the ``\\n`` is dropped.
    A final line without a trailing newline is still yielded, while a
    trailing newline does not start an empty extra line. No other character
    is treated as a line break.

    Args:
        contents: Full text buffer

    Yields:
        Each line without its terminator
    """
    start = 0
    length = len(contents)
    while start < length:
        end = contents.find("\n", start)
        if end == -1:
            yield contents[start:]
            return
        line_end = end - 1 if end > start and contents[end - 1] == "\r" else end
        yield contents[start:line_end]
        start = end + 1


def search(query: str, contents: str, case_sensitive: bool = True) -> list[str]:
    """
    Return every line of ``contents`` that contains ``query``.

    In case-insensitive mode both the query and each line are lowercased
    before the containment test, but the original line is returned.

    Args:
        query: Substring to look for; an empty query matches every line
        contents: Full text buffer
        case_sensitive: Compare characters exactly when True

    Returns:
        Matching lines in their original order
    """
    if case_sensitive:
        results = [line for line in iter_lines(contents) if query in line]
    else:
        lowered = query.lower()
        results = [line for line in iter_lines(contents) if lowered in line.lower()]

    logger.debug(
        "Query %r matched %d line(s) (case_sensitive=%s)", query, len(results), case_sensitive
    )
    return results


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Shorthand for ``search(query, contents, case_sensitive=False)``."""
    return search(query, contents, case_sensitive=False)


__all__ = ["iter_lines", "search", "search_case_insensitive"]
