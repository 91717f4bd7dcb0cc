# -*- coding: utf-8 -*-
"""
Helper functions for applying and displaying permission bits of copied entries.
"""
import os
import pathlib
import stat

from logger_utils import get_logger

logger = get_logger("treecopy.permissions")


def apply_permissions(path: pathlib.Path, permissions: int):
    """
    Set the permission bits of a copied file or directory.
    Raises OSError on failure; the caller decides how to report it.
    """
    os.chmod(str(path), permissions)
    logger.debug(f"Set permissions for {path}: {permissions:o}")


def format_permissions(permissions: int) -> str:
    """Render permission bits like ls does, e.g. 0o755 -> 'rwxr-xr-x'."""
    # filemode() prefixes a type character; the bits alone have none
    return stat.filemode(permissions)[1:]
