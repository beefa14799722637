#!/usr/bin/env python3
"""
Entry Collection Module

Turns a target path into a ResultSet: one sized Record per direct child
of a directory target (or a single Record for a file or symlink target),
filtered by type and minimum size, with a running grand total.
"""

import logging
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from auxiliary import format_size
from duq_config import ReportConfig
from errors import DirectoryUnopenableError, TargetUnresolvableError
from size_aggregator import SizeAggregator

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """Type of a filesystem entry, judged without following links"""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Record:
    """One reportable entry"""

    size_bytes: int
    display_label: str
    formatted_size: str


@dataclass
class ResultSet:
    """Records that survived filtering plus running totals"""

    unit_mode: bool = False
    records: list[Record] = field(default_factory=list)
    grand_total_bytes: int = 0
    max_size_length: int = 0

    def add(self, size_bytes: int, display_label: str) -> Record:
        """Create a record and fold it into the total and column width"""
        record = Record(size_bytes, display_label, format_size(size_bytes, self.unit_mode))
        self.records.append(record)
        self.grand_total_bytes += size_bytes
        self.max_size_length = max(self.max_size_length, len(record.formatted_size))
        return record

    @property
    def formatted_total(self) -> str:
        return format_size(self.grand_total_bytes, self.unit_mode)

    @property
    def column_width(self) -> int:
        return max(self.max_size_length, len(self.formatted_total))

    def __len__(self) -> int:
        return len(self.records)


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def classify(path: str) -> EntryKind:
    """Classify *path* from its own attributes

    Raises:
        OSError: If path cannot be lstat'ed
    """
    return _kind_from_mode(os.lstat(path).st_mode)


def _read_link(path: str) -> str:
    """Return the text a symlink points to, or "" if it can't be read"""
    try:
        return os.readlink(path)
    except OSError as e:
        logger.debug("Cannot read link %s: %s", path, e)
        return ""


class EntryCollector:
    """Collects sized, filtered entries for a target"""

    def __init__(self, aggregator: Optional[SizeAggregator] = None):
        self.aggregator = aggregator or SizeAggregator()

    def collect(self, target_path: str, config: ReportConfig) -> ResultSet:
        """Collect records for *target_path*

        Args:
            target_path: Directory to list, or a single file/symlink to report
            config: Filtering and formatting options

        Returns:
            ResultSet in discovery order

        Raises:
            TargetUnresolvableError: If target_path can't be lstat'ed
            DirectoryUnopenableError: If target_path is a directory that can't be listed
        """
        result = ResultSet(unit_mode=config.unit_mode)

        try:
            st = os.lstat(target_path)
        except OSError as e:
            raise TargetUnresolvableError(target_path) from e

        if _kind_from_mode(st.st_mode) is EntryKind.DIRECTORY:
            self._collect_directory(target_path, config, result)
        else:
            self._process_entry(target_path, os.path.basename(target_path), config, result)

        return result

    def _collect_directory(self, path: str, config: ReportConfig, result: ResultSet):
        """Process every direct child of *path*"""
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    self._process_entry(entry.path, entry.name, config, result)
        except OSError as e:
            raise DirectoryUnopenableError(path, e.strerror or str(e)) from e

    def _process_entry(self, path: str, name: str, config: ReportConfig, result: ResultSet):
        """Size, label and filter one entry, adding it to *result* if it survives"""
        try:
            kind = classify(path)
        except OSError as e:
            logger.debug("Skipping %s: %s", path, e)
            return

        # Type filtering
        if config.files_only and kind is EntryKind.DIRECTORY:
            return
        if config.directories_only and kind is not EntryKind.DIRECTORY:
            return

        if kind is EntryKind.SYMLINK:
            size = self.aggregator.compute_size(path)
            label = f"{name} -> {_read_link(path)}"
        elif kind is EntryKind.DIRECTORY:
            size = self.aggregator.compute_size(path)
            label = f"{name}/"
        elif kind is EntryKind.FILE:
            size = self.aggregator.compute_size(path)
            label = name
        else:
            logger.debug("Skipping special file %s", path)
            return

        if size < config.min_size_threshold:
            return

        result.add(size, label)
