"""Pytest configuration and fixtures for the minigrep tests."""

from pathlib import Path

import pytest

POEM = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape."""

TRUST_POEM = """\
Rust:
safe, fast, productive.
Pick three.
Trust me."""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep MINIGREP_* variables from the outer environment out of tests."""
    for name in (
        "MINIGREP_CASE_INSENSITIVE",
        "MINIGREP_ENCODING",
        "MINIGREP_LOG_LEVEL",
        "MINIGREP_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def poem() -> str:
    """Provide the four-line sample text ending in 'Duct tape.'."""
    return POEM


@pytest.fixture
def trust_poem() -> str:
    """Provide the four-line sample text ending in 'Trust me.'."""
    return TRUST_POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample text to a temporary file."""
    path = tmp_path / "poem.txt"
    path.write_text(TRUST_POEM + "\n", encoding="utf-8")
    return path
