"""Render duplicate groups as text or JSON."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from dupfinder.grouper import DuplicateGroup

import json


def write_text(groups: Sequence[DuplicateGroup], stream: TextIO) -> None:
    """Write each group as a `name:` header followed by tab-indented paths."""
    for group in groups:
        stream.write(f"{group.name}:\n")
        for path in group.paths:
            stream.write(f"\t{path}\n")


def group_to_dict(group: DuplicateGroup) -> dict:
    digest = getattr(group.key, "digest", None)
    return {
        "name": group.name,
        "size": getattr(group.key, "size", None),
        "digest": digest.hex() if digest is not None else None,
        "paths": [str(p) for p in group.paths],
    }


def write_json(groups: Sequence[DuplicateGroup], stream: TextIO) -> None:
    json.dump([group_to_dict(g) for g in groups], stream, indent=2)
    stream.write("\n")
