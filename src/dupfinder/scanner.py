"""Depth-first file discovery below a root directory."""

from __future__ import annotations

from collections.abc import Iterator
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from typing import BinaryIO

from dupfinder.errors import MetadataError

import fnmatch
import logging
import os
import pathlib


logger = logging.getLogger(__name__)


@dataclass
class FileEntry:
    """A file found by the walker.

    The size is read on first access and cached; the content is only opened
    when a caller asks for it.
    """

    path: pathlib.Path
    _size: int | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        if self._size is None:
            try:
                self._size = self.path.stat().st_size
            except OSError as exc:
                raise MetadataError(self.path, "cannot read size") from exc
        return self._size

    def open(self) -> BinaryIO:
        return self.path.open("rb")


def _matches_any(name: str, patterns: Sequence[str]) -> bool:
    """Check if name matches any of the glob patterns (case-insensitive)."""
    name_lower = name.lower()
    return any(fnmatch.fnmatch(name_lower, p.lower()) for p in patterns)


def _log_walk_error(exc: OSError) -> None:
    logger.debug(f"skipping unreadable directory: {exc}")


def iter_entries(
    root: pathlib.Path,
    exclude: Sequence[str] = (),
    exclude_dir: Sequence[str] = (),
) -> Iterator[FileEntry]:
    """Yield every non-directory entry below root, depth-first.

    Subdirectories are visited in sorted order after the files of their
    parent. Symlinked directories are not followed and directories that
    cannot be listed are skipped. A root that does not exist yields nothing;
    a root that is a file yields that file.
    """
    if not root.exists():
        logger.warning(f"Directory not found: {root}")
        return
    if not root.is_dir():
        yield FileEntry(root)
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        if exclude_dir:
            dirnames[:] = [d for d in dirnames if not _matches_any(d, exclude_dir)]
        current = pathlib.Path(dirpath)
        for name in sorted(filenames):
            if exclude and _matches_any(name, exclude):
                continue
            yield FileEntry(current / name)
