"""Read the target file, search it and print the matches."""

import logging
import sys
from typing import TextIO

from .exceptions import FileReadError
from .models import Config
from .search import search, search_case_insensitive

logger = logging.getLogger(__name__)


def read_contents(path: str) -> str:
    """Read a whole UTF-8 text file into memory.

    Raises:
        FileReadError: If the file can't be opened, read or decoded
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(e), path=path) from e
    logger.debug(f"Read {len(contents)} characters from {path}")
    return contents


def run(config: Config, out: TextIO | None = None) -> None:
    """Search ``config.file_path`` for ``config.query`` and print each match.

    Args:
        config: Validated search configuration
        out: Stream to write matches to (defaults to stdout)

    Raises:
        FileReadError: If the file can't be read
    """
    if out is None:
        out = sys.stdout

    contents = read_contents(config.file_path)

    if config.ignore_case:
        results = search_case_insensitive(config.query, contents)
    else:
        results = search(config.query, contents)

    logger.info(f"{len(results)} matching lines in {config.file_path}")
    for line in results:
        print(line, file=out)
