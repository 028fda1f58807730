"""Exceptions raised while reading or writing tags."""

from pathlib import Path
from typing import Union


class TagError(Exception):
    """Base error for tag operations."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        super().__init__(f"{message}: {self.path}")


class TagReadError(TagError):
    """Raised when a file cannot be opened or its tags cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        message = "Could not read tags"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class UnsupportedContainerError(TagError):
    """Raised when a file is not in the container its extension promises."""

    def __init__(self, path: Union[str, Path], expected: str):
        self.expected = expected
        super().__init__(path, f"Not a valid {expected} file")


class TagWriteError(TagError):
    """Raised when tags cannot be saved back to the file."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        message = "Could not write tags"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class OutputIsSourceError(TagError):
    """Raised when the output path points at the source file."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "Output path must differ from the source file")
