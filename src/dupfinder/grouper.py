"""Accumulate entries by comparison key and pick out the duplicate groups."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from dupfinder.keys import ComparisonKey
from dupfinder.scanner import FileEntry

import pathlib


@dataclass(frozen=True)
class DuplicateGroup:
    """Two or more files sharing one comparison key."""

    key: ComparisonKey
    entries: tuple[FileEntry, ...]

    @property
    def name(self) -> str:
        return self.key.name

    @property
    def paths(self) -> list[pathlib.Path]:
        return [e.path for e in self.entries]


class GroupTable:
    """Append-only mapping from comparison key to the entries sharing it.

    Members of a group keep the order in which they were inserted.
    """

    def __init__(self) -> None:
        self._groups: dict[ComparisonKey, list[FileEntry]] = defaultdict(list)
        self.entry_count = 0

    def insert(self, key: ComparisonKey, entry: FileEntry) -> None:
        self._groups[key].append(entry)
        self.entry_count += 1

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __getitem__(self, key: ComparisonKey) -> list[FileEntry]:
        if key not in self._groups:
            raise KeyError(key)
        return list(self._groups[key])

    def keys(self) -> list[ComparisonKey]:
        return list(self._groups)

    def duplicates(self) -> list[DuplicateGroup]:
        """Return every group with at least two members."""
        return [
            DuplicateGroup(key=key, entries=tuple(entries))
            for key, entries in self._groups.items()
            if len(entries) >= 2
        ]
