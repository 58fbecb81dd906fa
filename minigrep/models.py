"""Shared data models for the minigrep package."""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .exceptions import MissingArgumentError

logger = logging.getLogger(__name__)

IGNORE_CASE_ENV = "IGNORE_CASE"


@dataclass(frozen=True)
class Config:
    """Validated search configuration, built once per invocation."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(
        cls,
        args: Iterable[str],
        environ: Mapping[str, str] | None = None,
    ) -> "Config":
        """Build a Config from positional arguments and the environment.

        Args:
            args: Argument sequence; the first element is the program name
                and is skipped. Arguments after the file path are ignored.
            environ: Environment to consult (defaults to ``os.environ``)

        Returns:
            The validated Config

        Raises:
            MissingArgumentError: If the query or file path is absent
        """
        if environ is None:
            environ = os.environ

        it = iter(args)
        next(it, None)  # program name

        query = next(it, None)
        if query is None:
            raise MissingArgumentError("Didn't get a query string")

        file_path = next(it, None)
        if file_path is None:
            raise MissingArgumentError("Didn't get a file path")

        ignore_case = IGNORE_CASE_ENV in environ
        logger.debug(f"Config built: file_path={file_path!r}, ignore_case={ignore_case}")
        return cls(query=query, file_path=file_path, ignore_case=ignore_case)
