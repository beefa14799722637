#!/usr/bin/env python3
"""
Configuration for duq

ReportConfig is the validated, immutable set of options for one run.
DuqSettings holds user defaults read from ~/.duq/config.json; the file is
only ever read, duq never writes it.
"""

import json
import pathlib
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReportConfig:
    """Options for a single report"""

    unit_mode: bool = False
    reverse_sort: bool = False
    files_only: bool = False
    directories_only: bool = False
    min_size_threshold: int = 0
    target_path: str = "."

    def __post_init__(self):
        if self.files_only and self.directories_only:
            raise ValueError("Cannot combine files-only and directories-only filtering")
        if self.min_size_threshold < 0:
            raise ValueError(f"Minimum size threshold must be non-negative, got {self.min_size_threshold}")

    @classmethod
    def from_args(cls, args, settings: Optional["DuqSettings"] = None) -> "ReportConfig":
        """Build from parsed command-line arguments merged with user settings"""
        settings = settings or DuqSettings()
        return cls(
            unit_mode=bool(args.units or settings.units),
            reverse_sort=bool(args.reverse or settings.reverse),
            files_only=bool(args.files_only),
            directories_only=bool(args.directories_only),
            min_size_threshold=args.min_size_threshold,
            target_path=args.target,
        )


@dataclass
class DuqSettings:
    """User defaults applied before command-line flags"""

    units: bool = False
    reverse: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "DuqSettings":
        """Create from dictionary"""
        return cls(
            units=bool(data.get("units", False)),
            reverse=bool(data.get("reverse", False)),
        )


class ConfigManager:
    """Loads user settings from the duq config file"""

    def __init__(self, config_file: Optional[pathlib.Path] = None):
        """Initialize configuration manager

        Args:
            config_file: Override default ~/.duq/config.json location
        """
        if config_file:
            self.config_file = config_file
        else:
            self.config_file = pathlib.Path.home() / ".duq" / "config.json"

    def load(self) -> DuqSettings:
        """Load settings from file"""
        if not self.config_file.is_file():
            return DuqSettings()
        try:
            with self.config_file.open(encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError):
            # Corrupted or unreadable config, return default
            return DuqSettings()
        if not isinstance(data, dict):
            return DuqSettings()
        return DuqSettings.from_dict(data)
