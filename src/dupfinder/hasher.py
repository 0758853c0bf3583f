"""Streaming SHA256 digests of file content."""

from __future__ import annotations

from typing import BinaryIO

import hashlib
import pathlib

CHUNK_SIZE = 1024
DIGEST_SIZE = hashlib.sha256().digest_size


def hash_stream(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> bytes:
    """Compute the SHA256 digest of a binary stream, reading it in chunks.

    Reading stops at the first empty or short read.
    """
    sha = hashlib.sha256()
    while True:
        chunk = stream.read(chunk_size)
        sha.update(chunk)
        if len(chunk) < chunk_size:
            break
    return sha.digest()


def hash_file(path: pathlib.Path, chunk_size: int = CHUNK_SIZE) -> bytes:
    """Compute the SHA256 digest of a file."""
    with path.open("rb") as f:
        return hash_stream(f, chunk_size)
