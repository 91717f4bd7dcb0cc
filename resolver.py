# -*- coding: utf-8 -*-

"""Target naming for merge copies, following the rules of `cp -r`."""

import os
import pathlib

from errors import CannotDetermineBasename, CopyIOError, DestinationExists, TargetNotADirectory
from logger_utils import get_logger

logger = get_logger("treecopy.resolver")


def _mkdir(path: pathlib.Path, source: pathlib.Path):
    try:
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory: {path}")
    except OSError as e:
        raise CopyIOError(e, source, path) from e


def _is_dir(path: pathlib.Path, source: pathlib.Path) -> bool:
    try:
        return path.is_dir()
    except OSError as e:
        raise CopyIOError(e, source, path) from e


def resolve_destination(source: pathlib.Path, nominal_destination: pathlib.Path, create_missing: bool) -> pathlib.Path:
    """
    Decide where a copy of source lands when asked to copy it to nominal_destination.

    Args:
        source: The file or directory being copied.
        nominal_destination: The destination as given by the caller.
        create_missing: Create the resolved destination as a directory if nothing exists there.

    Returns:
        nominal_destination if nothing exists there, otherwise
        nominal_destination / source.name when nominal_destination is a directory.

    Raises:
        DestinationExists: nominal_destination exists and is not a directory.
        TargetNotADirectory: the nested target exists and is not a directory.
        CannotDetermineBasename: source has no final component (e.g. '/').
        CopyIOError: the filesystem could not be queried or the directory created.
    """
    source = pathlib.Path(source)
    nominal_destination = pathlib.Path(nominal_destination)

    if not os.path.lexists(nominal_destination):
        if create_missing:
            _mkdir(nominal_destination, source)
        return nominal_destination

    if not _is_dir(nominal_destination, source):
        raise DestinationExists(source, nominal_destination)

    name = source.name
    if not name or name == "..":
        raise CannotDetermineBasename(source, nominal_destination)

    target = nominal_destination / name
    if not os.path.lexists(target):
        if create_missing:
            _mkdir(target, source)
    elif not _is_dir(target, source):
        raise TargetNotADirectory(source, target)
    logger.debug(f"Resolved destination for '{source}': '{target}'")
    return target
