"""Drive a stream of file entries through key extraction into groups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from dupfinder.errors import DupfinderError
from dupfinder.grouper import DuplicateGroup
from dupfinder.grouper import GroupTable
from dupfinder.hasher import CHUNK_SIZE
from dupfinder.keys import extract_key
from dupfinder.keys import Strategy
from dupfinder.policy import SizePolicy
from dupfinder.scanner import FileEntry
from tqdm import tqdm

import logging


logger = logging.getLogger(__name__)

_PROGRESS_LABELS = {
    Strategy.NAME: "Scanning",
    Strategy.NAME_SIZE: "Scanning",
    Strategy.HASH: "Hashing",
}


@dataclass
class ScanStats:
    """Counters collected during one classification run."""

    seen: int = 0
    skipped: int = 0
    errors: list[DupfinderError] = field(default_factory=list)


def classify(
    entries: Iterable[FileEntry],
    strategy: Strategy,
    policy: SizePolicy | None = None,
    *,
    chunk_size: int = CHUNK_SIZE,
    keep_going: bool = False,
    progress: bool = False,
    stats: ScanStats | None = None,
) -> GroupTable:
    """Group entries by the key the strategy derives for them.

    Entries are processed in the order they arrive. By default the first
    MetadataError or HashError propagates and aborts the run. With
    keep_going the failing entry is logged, recorded in stats and left out.
    """
    if stats is None:
        stats = ScanStats()
    table = GroupTable()
    bar = tqdm(entries, desc=_PROGRESS_LABELS[strategy], unit="file", disable=not progress)
    for entry in bar:
        stats.seen += 1
        try:
            key = extract_key(entry, strategy, policy, chunk_size)
        except DupfinderError as exc:
            if not keep_going:
                raise
            logger.warning(f"skipping: {exc}")
            stats.errors.append(exc)
            continue
        if key is None:
            logger.debug(f"skipped by size policy: {entry.path}")
            stats.skipped += 1
            continue
        logger.debug(f"  {key} {entry.path}")
        table.insert(key, entry)
    return table


def find_duplicates(
    entries: Iterable[FileEntry],
    strategy: Strategy,
    policy: SizePolicy | None = None,
    *,
    stats: ScanStats | None = None,
    **kwargs,
) -> list[DuplicateGroup]:
    """Classify entries and return the groups with more than one member.

    Keyword arguments are passed on to classify().
    """
    if stats is None:
        stats = ScanStats()
    table = classify(entries, strategy, policy, stats=stats, **kwargs)
    groups = table.duplicates()
    logger.info(
        f"Scanned {stats.seen} file(s), {stats.skipped} skipped by size, "
        f"{len(groups)} duplicate group(s)"
    )
    return groups
