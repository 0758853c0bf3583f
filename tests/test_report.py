"""Tests for dupfinder.report — text and JSON rendering."""

import io
import json
import pathlib

from dupfinder.grouper import DuplicateGroup
from dupfinder.keys import NameKey, NameSizeHashKey, NameSizeKey
from dupfinder.report import group_to_dict, write_json, write_text
from dupfinder.scanner import FileEntry


def _group(key, *paths):
    return DuplicateGroup(key=key, entries=tuple(FileEntry(pathlib.Path(p)) for p in paths))


class TestWriteText:
    def test_header_and_indented_paths(self):
        out = io.StringIO()
        write_text([_group(NameKey("x.txt"), "/r/a/x.txt", "/r/b/x.txt")], out)
        assert out.getvalue() == "x.txt:\n\t/r/a/x.txt\n\t/r/b/x.txt\n"

    def test_hash_key_prints_name_only(self):
        out = io.StringIO()
        key = NameSizeHashKey("x.txt", 3, bytes(range(32)))
        write_text([_group(key, "/a/x.txt", "/b/x.txt")], out)
        assert out.getvalue().splitlines()[0] == "x.txt:"

    def test_no_groups_prints_nothing(self):
        out = io.StringIO()
        write_text([], out)
        assert out.getvalue() == ""


class TestWriteJson:
    def test_name_key_has_null_size_and_digest(self):
        assert group_to_dict(_group(NameKey("x"), "/a/x", "/b/x")) == {
            "name": "x",
            "size": None,
            "digest": None,
            "paths": ["/a/x", "/b/x"],
        }

    def test_size_key(self):
        assert group_to_dict(_group(NameSizeKey("x", 7), "/a/x", "/b/x"))["size"] == 7

    def test_digest_is_hex(self):
        key = NameSizeHashKey("x", 3, b"\xab" * 32)
        assert group_to_dict(_group(key, "/a/x", "/b/x"))["digest"] == "ab" * 32

    def test_output_is_valid_json(self):
        out = io.StringIO()
        write_json([_group(NameKey("x"), "/a/x", "/b/x"), _group(NameKey("y"), "/a/y", "/c/y")], out)
        data = json.loads(out.getvalue())
        assert [g["name"] for g in data] == ["x", "y"]

    def test_empty_list(self):
        out = io.StringIO()
        write_json([], out)
        assert json.loads(out.getvalue()) == []
