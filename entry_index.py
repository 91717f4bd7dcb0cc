#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Entry and identity model for filesystem objects visited during a copy."""

import enum
import os
import pathlib
import stat
from dataclasses import dataclass
from typing import Tuple

# (st_dev, st_ino): unique within one running system
Identity = Tuple[int, int]


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass
class Entry:
    path: pathlib.Path
    kind: EntryKind
    mode: int  # permission bits only
    identity: Identity

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def _kind_of(st_mode: int) -> EntryKind:
    if stat.S_ISLNK(st_mode):
        return EntryKind.SYMLINK
    if stat.S_ISREG(st_mode):
        return EntryKind.FILE
    if stat.S_ISDIR(st_mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def identity_of(path, follow_symlinks: bool = False) -> Identity:
    """
    Return the identity of the object at path. A final symlink is not followed
    unless follow_symlinks is set.

    os.stat reports a device and file index on every platform Python supports,
    so a single implementation covers POSIX and Windows.
    """
    st = os.stat(path, follow_symlinks=follow_symlinks)
    return (st.st_dev, st.st_ino)


def entry_of(path) -> Entry:
    """Query the filesystem for path. Raises OSError if it cannot be stat'ed."""
    st = os.lstat(path)
    return Entry(
        path=pathlib.Path(path),
        kind=_kind_of(st.st_mode),
        mode=stat.S_IMODE(st.st_mode),
        identity=(st.st_dev, st.st_ino),
    )

