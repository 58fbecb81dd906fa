"""Command-line entry point for minigrep."""

import logging
import sys
from collections.abc import Sequence

from .exceptions import FileReadError, MissingArgumentError
from .models import Config
from .runner import run
from .settings import settings

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single search.

    Usage: minigrep <query> <file_path>

    Returns:
        0 when the search completed (even with no matches), 1 on any error
    """
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        stream=sys.stderr,
    )

    if argv is None:
        argv = sys.argv

    try:
        config = Config.build(argv)
    except MissingArgumentError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except FileReadError as e:
        logger.debug(f"Failed to read {e.path}", exc_info=True)
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0
