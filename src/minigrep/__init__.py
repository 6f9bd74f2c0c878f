"""minigrep.

A small line-oriented search tool: it prints every line of a file that
contains a query string, optionally ignoring case.
"""

__version__ = "0.1.0"

# Re-export main classes/functions for easier imports
from .models import Config
from .resolver import resolve_config
from .runner import run
from .search import search, search_case_insensitive

__all__ = [
    "Config",
    "resolve_config",
    "run",
    "search",
    "search_case_insensitive",
    "__version__",
]
