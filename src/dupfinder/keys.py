"""Comparison keys and the strategy that derives them from a file."""

from __future__ import annotations

from dataclasses import dataclass

from dupfinder.errors import HashError
from dupfinder.hasher import CHUNK_SIZE
from dupfinder.hasher import hash_stream
from dupfinder.policy import SizePolicy
from dupfinder.scanner import FileEntry

import enum


class Strategy(enum.Enum):
    """How strictly two files must match to count as duplicates."""

    NAME = "n"
    NAME_SIZE = "s"
    HASH = "h"


@dataclass(frozen=True)
class NameKey:
    name: str


@dataclass(frozen=True)
class NameSizeKey:
    name: str
    size: int


@dataclass(frozen=True)
class NameSizeHashKey:
    name: str
    size: int
    digest: bytes


ComparisonKey = NameKey | NameSizeKey | NameSizeHashKey


def extract_key(
    entry: FileEntry,
    strategy: Strategy,
    policy: SizePolicy | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> ComparisonKey | None:
    """Derive the comparison key of an entry for the given strategy.

    Returns None when the size policy excludes the entry from hashing.
    Raises MetadataError if the size cannot be read and HashError if the
    content cannot be opened or read.
    """
    if strategy is Strategy.NAME:
        return NameKey(entry.name)

    size = entry.size
    if strategy is Strategy.NAME_SIZE:
        return NameSizeKey(entry.name, size)

    if policy is not None and policy.should_skip(size):
        return None
    try:
        with entry.open() as f:
            digest = hash_stream(f, chunk_size)
    except OSError as exc:
        raise HashError(entry.path, "cannot hash content") from exc
    return NameSizeHashKey(entry.name, size, digest)
