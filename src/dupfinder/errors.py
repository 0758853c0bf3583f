"""Exceptions raised while classifying files."""

from __future__ import annotations

import pathlib


class DupfinderError(Exception):
    """Base class for errors that abort a scan.

    The underlying OSError, chained with `raise ... from`, is part of the
    message.
    """

    def __init__(self, path: pathlib.Path, message: str) -> None:
        super().__init__(path, message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        text = f"{self.message}: {self.path}"
        cause = self.__cause__
        if cause is not None:
            reason = getattr(cause, "strerror", None) or str(cause)
            text += f" ({reason})"
        return text


class MetadataError(DupfinderError):
    """The size of a file could not be read."""


class HashError(DupfinderError):
    """The content of a file could not be opened or read."""
