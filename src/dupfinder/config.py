"""Configuration loading and merging into parsed arguments."""

from __future__ import annotations

from dupfinder.hasher import CHUNK_SIZE
from dupfinder.policy import BIG_FILE_SIZE
from dupfinder.policy import SMALL_FILE_SIZE

import logging
import os
import pathlib
import tomllib


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.toml"

_DEFAULTS: dict[str, object] = {
    "big_threshold": BIG_FILE_SIZE,
    "small_threshold": SMALL_FILE_SIZE,
    "chunk_size": CHUNK_SIZE,
    "exclude": [],
    "exclude_dir": [],
}

_INT_KEYS = {"big_threshold", "small_threshold", "chunk_size"}
_LIST_KEYS = {"exclude", "exclude_dir"}


def config_dir() -> pathlib.Path:
    """Return the dupfinder config directory (not created)."""
    base = pathlib.Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
    return base / "dupfinder"


def load_config(directory: pathlib.Path | None = None) -> dict:
    """Load config.toml and return its contents as a dict.

    Returns {} if no file exists or on parse error.
    """
    if directory is None:
        directory = config_dir()
    path = directory / CONFIG_FILENAME
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning(f"ignoring unreadable config {path}: {exc}")
        return {}


def _valid_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def merge_config_into_args(args, config: dict) -> None:
    """Three-layer merge: CLI > config > hardcoded defaults.

    Mutates *args* in place. Options the CLI left unset must be None.
    The error policy and the report format are command-line only.
    """
    for key in _INT_KEYS:
        if getattr(args, key, None) is not None:
            continue
        cfg_val = config.get(key)
        if cfg_val is None:
            setattr(args, key, _DEFAULTS[key])
        elif _valid_int(cfg_val):
            setattr(args, key, cfg_val)
        else:
            logger.warning(f"invalid {key} in config: {cfg_val!r}, using {_DEFAULTS[key]}")
            setattr(args, key, _DEFAULTS[key])

    # List fields — merge CLI + config
    for key in _LIST_KEYS:
        cli_val = getattr(args, key, None) or []
        cfg_val = config.get(key) or []
        setattr(args, key, cli_val + [v for v in cfg_val if v not in cli_val])
