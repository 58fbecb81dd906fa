"""Minimal line-oriented text search."""

from .exceptions import FileReadError, MinigrepError, MissingArgumentError
from .models import Config
from .runner import read_contents, run
from .search import search, search_case_insensitive

__all__ = [
    "Config",
    "search",
    "search_case_insensitive",
    "read_contents",
    "run",
    "MinigrepError",
    "MissingArgumentError",
    "FileReadError",
]
