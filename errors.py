#!/usr/bin/env python3
"""
Fatal error types for duq

Only conditions on the user-supplied target surface as errors. Anything
that goes wrong below that (an unreadable entry, an unopenable
subdirectory) contributes zero size and is never raised.
"""


class DuqError(Exception):
    """Base class for errors that end a duq run"""


class TargetUnresolvableError(DuqError):
    """The target path does not exist or cannot be inspected"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"'{path}' does not exist.")


class DirectoryUnopenableError(DuqError):
    """The target is a directory but it cannot be listed"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open directory '{path}': {reason}")
