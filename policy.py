# -*- coding: utf-8 -*-
"""
Error policies for recursive copies.

A policy receives every non-fatal error met while walking a tree. It decides
whether to keep, log or drop the error; it never stops the walk.
"""

import logging
from typing import List, Optional

from errors import CopyError
from logger_utils import get_logger


class ErrorPolicy:
    """Sink for per-entry copy errors. Subclasses override report()."""

    def report(self, error: CopyError) -> None:
        raise NotImplementedError


class CollectErrors(ErrorPolicy):
    """Append every error, in the order met, to a list the caller can inspect."""

    def __init__(self, errors: Optional[List[CopyError]] = None):
        self.errors = errors if errors is not None else []

    def report(self, error):
        self.errors.append(error)

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)


class LogErrors(ErrorPolicy):
    """Log every error at ERROR level. Nothing is retained."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger is not None else get_logger("treecopy.policy")

    def report(self, error):
        self.logger.error(str(error))


class IgnoreErrors(ErrorPolicy):
    def report(self, error):
        pass


_POLICIES = {
    "collect": CollectErrors,
    "log": LogErrors,
    "ignore": IgnoreErrors,
}


def policy_for(name: str) -> ErrorPolicy:
    """Build a fresh policy from its configured name ('collect', 'log' or 'ignore')."""
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown error policy '{name}'. Expected one of: {', '.join(_POLICIES)}") from None
