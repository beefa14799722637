"""Shared fixtures for building small directory trees on disk."""

from __future__ import annotations

import contextlib
import errno
import os
from collections.abc import Iterator
from pathlib import Path
from unittest import mock


def write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


def make_sample_tree(root: Path) -> Path:
    """Create ``D`` with ``a`` (500 bytes), ``b`` (2048 bytes) and empty ``c/``."""
    target = root / "D"
    target.mkdir()
    write_file(target / "a", 500)
    write_file(target / "b", 2048)
    (target / "c").mkdir()
    return target


@contextlib.contextmanager
def deny_listing(*paths: Path) -> Iterator[None]:
    """Make ``os.scandir`` fail with EACCES for *paths*, even when running as root."""
    real_scandir = os.scandir
    denied = {os.fspath(path) for path in paths}

    def scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), os.fspath(path))
        return real_scandir(path)

    with mock.patch("os.scandir", side_effect=scandir):
        yield
