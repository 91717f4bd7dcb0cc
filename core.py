#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Core recursive copy logic, including the guard against copying a directory into itself."""

import os
import pathlib
import shutil
from typing import List, Optional

from entry_index import EntryKind, Identity, entry_of, identity_of
from errors import (
    CopyError,
    CopyIOError,
    DestinationExists,
    SourceDoesNotExist,
    SourceIsDestinationRoot,
    UnsupportedEntryKind,
)
from logger_utils import get_logger
from permissions_helper import apply_permissions
from policy import CollectErrors, ErrorPolicy, IgnoreErrors
from resolver import resolve_destination

logger = get_logger("treecopy.core")


def copy_entry(source: pathlib.Path, destination: pathlib.Path, root_identity: Optional[Identity], policy: ErrorPolicy):
    """
    Copy one entry, and everything below it if it is a directory, to destination.

    Every failure is handed to policy and ends the branch it happened in; sibling
    branches carry on.

    Args:
        source: The file, directory or symlink to copy.
        destination: Where the copy is written. Existing files are overwritten.
        root_identity: Identity of the top directory written by this copy, or None
                       when source is the top of the copy.
        policy: Receives every error met during the walk.
    """
    try:
        entry = entry_of(source)
    except OSError as e:
        policy.report(CopyIOError(e, source, destination))
        return

    if entry.kind is EntryKind.FILE:
        try:
            # an existing directory at destination must fail, never receive the file
            shutil.copyfile(source, destination, follow_symlinks=False)
            shutil.copymode(source, destination, follow_symlinks=False)
            logger.debug(f"Copied file: '{source}' -> '{destination}'")
        except OSError as e:
            policy.report(CopyIOError(e, source, destination))
        return

    if entry.kind is EntryKind.SYMLINK:
        # Links are reproduced, never followed
        try:
            os.symlink(os.readlink(source), destination)
            logger.debug(f"Copied symlink: '{source}' -> '{destination}'")
        except OSError as e:
            policy.report(CopyIOError(e, source, destination))
        return

    if entry.kind is not EntryKind.DIRECTORY:
        policy.report(UnsupportedEntryKind(source, destination))
        return

    if root_identity is not None and entry.identity == root_identity:
        # We are about to walk into the copy we are writing
        policy.report(SourceIsDestinationRoot(source, destination))
        return

    try:
        destination.mkdir(parents=True, exist_ok=True)
        if root_identity is None:
            root_identity = identity_of(destination, follow_symlinks=True)
    except OSError as e:
        policy.report(CopyIOError(e, source, destination))
        return

    try:
        with os.scandir(source) as it:
            names = [child.name for child in it]
    except OSError as e:
        policy.report(CopyIOError(e, source, destination))
        return

    for name in names:
        copy_entry(source / name, destination / name, root_identity, policy)

    # Last, so a read-only source directory does not block writing its children
    try:
        apply_permissions(destination, entry.mode)
    except OSError as e:
        policy.report(CopyIOError(e, source, destination))


def _check_strict(source: pathlib.Path, destination: pathlib.Path):
    if not os.path.lexists(source):
        raise SourceDoesNotExist(source, destination)
    if os.path.lexists(destination):
        raise DestinationExists(source, destination)


def copy_tree(source, destination):
    """
    Copy a file or a directory and its contents to destination.

    The destination must not exist. Errors met on individual entries during the
    copy are discarded; use copy_tree_with_policy() or copy_tree_collect() to see them.

    Raises:
        SourceDoesNotExist: nothing exists at source.
        DestinationExists: something already exists at destination. It is left untouched.

    Caveats:
        * Copying a directory into itself (copy_tree('.', './foo')) copies everything
          except the new copy, which is reported as SourceIsDestinationRoot.
        * Hard links are not preserved; linked files are copied once per link.
        * Filesystem boundaries may be crossed.
        * Symbolic links are copied as links, not followed.
    """
    copy_tree_with_policy(source, destination, IgnoreErrors())


def copy_tree_with_policy(source, destination, policy: ErrorPolicy):
    """Same as copy_tree(), but every per-entry error is reported to policy."""
    source = pathlib.Path(source)
    destination = pathlib.Path(destination)
    _check_strict(source, destination)
    logger.info(f"Copying '{source}' -> '{destination}'")
    copy_entry(source, destination, None, policy)


def copy_tree_collect(source, destination) -> List[CopyError]:
    """Same as copy_tree(), but return the per-entry errors in the order they occurred."""
    policy = CollectErrors()
    copy_tree_with_policy(source, destination, policy)
    return policy.errors


def copy_tree_merge(source, destination) -> List[CopyError]:
    """
    Copy source the way `cp -r source destination` would.

    If destination is an existing directory the copy is written to
    destination/<name of source>, merging into it if that directory already exists.
    Otherwise it is written to destination itself.

    Returns:
        The per-entry errors met during the copy, in order.

    Raises:
        SourceDoesNotExist: nothing exists at source.
        DestinationExists: destination exists and is not a directory.
        TargetNotADirectory: destination/<name of source> exists and is not a directory.
        CannotDetermineBasename: source has no name to nest under destination.
        CopyIOError: source could not be queried or the target directory not created.
    """
    source = pathlib.Path(source)
    destination = pathlib.Path(destination)
    if not os.path.lexists(source):
        raise SourceDoesNotExist(source, destination)
    try:
        create_missing = entry_of(source).is_dir
    except OSError as e:
        raise CopyIOError(e, source, destination) from e

    target = resolve_destination(source, destination, create_missing)
    logger.info(f"Merging '{source}' -> '{target}'")
    policy = CollectErrors()
    copy_entry(source, target, None, policy)
    if policy.errors:
        logger.warning(f"Merge of '{source}' finished with {len(policy.errors)} error(s).")
    return policy.errors
