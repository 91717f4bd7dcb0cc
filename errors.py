# -*- coding: utf-8 -*-
"""Error taxonomy for recursive tree copies."""

import pathlib
from typing import Optional


class CopyError(Exception):
    """Base class for every error raised or reported by a copy."""

    def __init__(self, source: Optional[pathlib.Path] = None, destination: Optional[pathlib.Path] = None):
        self.source = source
        self.destination = destination
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"copy failed: '{self.source}' -> '{self.destination}'"


class SourceDoesNotExist(CopyError):
    def describe(self):
        return f"Source path '{self.source}' does not exist."


class DestinationExists(CopyError):
    def describe(self):
        return f"Destination '{self.destination}' already exists (source '{self.source}')."


class SourceIsDestinationRoot(CopyError):
    """A directory inside the source is the root of the copy being written."""

    def describe(self):
        return f"Refusing to copy '{self.source}' into itself at '{self.destination}'."


class TargetNotADirectory(CopyError):
    def describe(self):
        return f"Target '{self.destination}' exists and is not a directory."


class CannotDetermineBasename(CopyError):
    def describe(self):
        return f"Cannot determine a file name for source '{self.source}'."


class UnsupportedEntryKind(CopyError):
    def describe(self):
        return f"Source '{self.source}' is not a file, directory or symlink. Type not supported."


class CopyIOError(CopyError):
    """Wraps an underlying OSError raised while handling one entry."""

    def __init__(self, error: OSError, source=None, destination=None):
        self.error = error
        super().__init__(source, destination)
        self.__cause__ = error

    def describe(self):
        return f"I/O error on '{self.source}' -> '{self.destination}': {self.error}"
