#!/usr/bin/env python3
"""
Console UI Module using Rich

Report lines go to stdout byte for byte, without Rich rendering;
diagnostics go to stderr with colors.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


class ConsoleUI:
    """Console output handler for duq"""

    def __init__(
        self,
        force_terminal: Optional[bool] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        """Initialize consoles with optional terminal forcing"""
        self.console = console or Console(force_terminal=force_terminal, highlight=False)
        self.error_console = error_console or Console(stderr=True, force_terminal=force_terminal, highlight=False)

    def print_line(self, line: str):
        """Print a report line exactly as given

        Bypasses Rich rendering so tabs and control characters in file names
        survive. Names that are not valid in the filesystem encoding arrive as
        surrogate escapes and are written back as their original bytes.
        """
        stream = self.console.file
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(line + "\n")
            return
        stream.flush()
        buffer.write(os.fsencode(line) + b"\n")
        buffer.flush()

    def print_lines(self, lines: list[str]):
        """Print report lines exactly as given"""
        for line in lines:
            self.print_line(line)

    def print_error(self, message: str):
        """Print error message in red to stderr"""
        self.error_console.print(f"Error: {message}", style="red bold", markup=False, soft_wrap=True)

    def create_log_handler(self, level: int = logging.DEBUG) -> logging.Handler:
        """Create a Rich logging handler writing to stderr"""
        handler = RichHandler(console=self.error_console, show_path=False, markup=False)
        handler.setLevel(level)
        return handler
