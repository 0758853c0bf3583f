"""Size thresholds that exclude files from content hashing."""

from __future__ import annotations

from dataclasses import dataclass

SMALL_FILE_SIZE = 1024 * 1024 * 8  # 8 MiB
BIG_FILE_SIZE = 1024 * SMALL_FILE_SIZE  # 8 GiB


@dataclass(frozen=True)
class SizePolicy:
    """Which files the hash strategy leaves out, by byte size."""

    skip_big: bool = False
    skip_small: bool = False
    big_threshold: int = BIG_FILE_SIZE
    small_threshold: int = SMALL_FILE_SIZE

    def should_skip(self, size: int) -> bool:
        if self.skip_big and size > self.big_threshold:
            return True
        return self.skip_small and size < self.small_threshold
