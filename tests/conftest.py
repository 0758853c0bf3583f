"""Shared fixtures for dupfinder tests."""

import logging
import pathlib

import pytest


@pytest.fixture
def tmp_source(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty root directory to scan."""
    source = tmp_path / "source"
    source.mkdir()
    return source


@pytest.fixture
def same_name_same_content(tmp_source: pathlib.Path) -> tuple[pathlib.Path, pathlib.Path]:
    """a/x.txt and b/x.txt, both containing 'foo'."""
    (tmp_source / "a").mkdir()
    (tmp_source / "b").mkdir()
    first = tmp_source / "a" / "x.txt"
    second = tmp_source / "b" / "x.txt"
    first.write_bytes(b"foo")
    second.write_bytes(b"foo")
    return first, second


@pytest.fixture
def same_name_other_content(tmp_source: pathlib.Path) -> tuple[pathlib.Path, pathlib.Path]:
    """a/x.txt containing 'foo' and b/x.txt containing 'bar'."""
    (tmp_source / "a").mkdir()
    (tmp_source / "b").mkdir()
    first = tmp_source / "a" / "x.txt"
    second = tmp_source / "b" / "x.txt"
    first.write_bytes(b"foo")
    second.write_bytes(b"bar")
    return first, second


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: pathlib.Path, monkeypatch) -> pathlib.Path:
    """Point XDG_CONFIG_HOME at an empty directory."""
    cfg = tmp_path / "cfg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(cfg))
    return cfg


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging() during a test."""
    yield
    logger = logging.getLogger("dupfinder")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
