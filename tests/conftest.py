import os
import pathlib

import pytest

from entry_index import EntryKind, entry_of


def build_tree(base: pathlib.Path, layout: dict) -> None:
    """Create files (str values) and directories (dict values) under base."""
    base.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        path = base / name
        if isinstance(content, dict):
            build_tree(path, content)
        else:
            path.write_text(content, encoding="utf-8")


def scan_entries(base: pathlib.Path):
    """Every entry under base, sorted by path relative to base."""
    entries = []
    for root, dirs, files in os.walk(base):
        for name in dirs + files:
            entries.append(entry_of(pathlib.Path(root) / name))
    entries.sort(key=lambda e: e.path.relative_to(base).parts)
    return entries


def tree_shape(base: pathlib.Path):
    """Relative path, kind and (for files) bytes of every entry under base."""
    shape = []
    for entry in scan_entries(base):
        relative = entry.path.relative_to(base)
        data = entry.path.read_bytes() if entry.kind is EntryKind.FILE else None
        shape.append((relative, entry.kind, data))
    return shape


@pytest.fixture
def foo_tree(tmp_path: pathlib.Path) -> pathlib.Path:
    source = tmp_path / "foo"
    build_tree(source, {"bar": "hello", "baz": {"quux": "world", "fobe": "again"}})
    return source
