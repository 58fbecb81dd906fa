"""Custom exceptions for minigrep."""


class MinigrepError(Exception):
    """Base exception for minigrep errors."""
    pass


class MissingArgumentError(MinigrepError):
    """A required positional argument was not supplied."""
    pass


class FileReadError(MinigrepError):
    """Error reading or decoding the file being searched."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
