# -*- coding: utf-8 -*-

from core import copy_tree, copy_tree_with_policy, copy_tree_collect, copy_tree_merge
from errors import (
    CopyError,
    SourceDoesNotExist,
    DestinationExists,
    SourceIsDestinationRoot,
    TargetNotADirectory,
    CannotDetermineBasename,
    UnsupportedEntryKind,
    CopyIOError,
)
from policy import ErrorPolicy, CollectErrors, LogErrors, IgnoreErrors
from logger_utils import get_logger

__all__ = [
    'copy_tree', 'copy_tree_with_policy', 'copy_tree_collect', 'copy_tree_merge',
    'CopyError', 'SourceDoesNotExist', 'DestinationExists', 'SourceIsDestinationRoot',
    'TargetNotADirectory', 'CannotDetermineBasename', 'UnsupportedEntryKind', 'CopyIOError',
    'ErrorPolicy', 'CollectErrors', 'LogErrors', 'IgnoreErrors', 'get_logger',
]
