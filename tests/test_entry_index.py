import os
import pathlib

import pytest

from conftest import build_tree, scan_entries
from entry_index import EntryKind, entry_of, identity_of
from permissions_helper import apply_permissions, format_permissions


def test_identity_is_stable_and_distinct(tmp_path: pathlib.Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()

    assert identity_of(tmp_path / "a") == identity_of(str(tmp_path / "a"))
    assert identity_of(tmp_path / "a") != identity_of(tmp_path / "b")
    assert identity_of(tmp_path / "a") == identity_of(tmp_path / "b" / ".." / "a")


def test_hardlinks_share_identity(tmp_path: pathlib.Path) -> None:
    (tmp_path / "file").write_text("x", encoding="utf-8")
    os.link(tmp_path / "file", tmp_path / "link")

    assert identity_of(tmp_path / "file") == identity_of(tmp_path / "link")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_identity_follows_only_on_request(tmp_path: pathlib.Path) -> None:
    (tmp_path / "dir").mkdir()
    os.symlink("dir", tmp_path / "alias")

    assert identity_of(tmp_path / "alias") != identity_of(tmp_path / "dir")
    assert identity_of(tmp_path / "alias", follow_symlinks=True) == identity_of(tmp_path / "dir")
    assert entry_of(tmp_path / "alias").kind is EntryKind.SYMLINK


def test_entry_of_kinds_and_mode(tmp_path: pathlib.Path) -> None:
    (tmp_path / "file").write_text("x", encoding="utf-8")
    os.chmod(tmp_path / "file", 0o640)

    entry = entry_of(tmp_path / "file")

    assert entry.kind is EntryKind.FILE
    assert entry.mode == 0o640
    assert not entry.is_dir
    assert entry_of(tmp_path).is_dir


def test_entry_of_missing_path(tmp_path: pathlib.Path) -> None:
    with pytest.raises(FileNotFoundError):
        entry_of(tmp_path / "missing")


def test_tree_scan_is_sorted_by_relative_path(tmp_path: pathlib.Path) -> None:
    build_tree(tmp_path, {"b": {"y": "1"}, "a.txt": "2", "c": {}})

    relative = [e.path.relative_to(tmp_path).as_posix() for e in scan_entries(tmp_path)]

    assert relative == ["a.txt", "b", "b/y", "c"]


def test_permission_helpers(tmp_path: pathlib.Path) -> None:
    target = tmp_path / "file"
    target.write_text("x", encoding="utf-8")

    apply_permissions(target, 0o754)

    assert entry_of(target).mode == 0o754
    assert format_permissions(0o754) == "rwxr-xr--"
    assert format_permissions(0o4755) == "rwsr-xr-x"
