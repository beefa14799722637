#!/usr/bin/env python3
"""
Auxiliary utility functions for duq

Size formatting shared by the collector (column width measurement)
and the reporter (total line).
"""

UNIT_SYMBOLS = ("B", "K", "M", "G", "T", "P", "E", "Z", "Y")


def format_decimal(value: float) -> str:
    """Format a number with up to 3 decimal places, dropping trailing zeros

    Args:
        value: Number to format

    Returns:
        String like "2.488", "1.5" or "1"
    """
    text = f"{value:.3f}"
    return text.rstrip("0").rstrip(".")


def format_size(size_bytes: int, unit_mode: bool = False) -> str:
    """Format byte size for the report

    Args:
        size_bytes: Size in bytes to format
        unit_mode: Scale into B/K/M/G/... instead of printing raw bytes

    Returns:
        Raw byte count like "2548", or a scaled string like "2.488K", "1K", "500B"
    """
    if not unit_mode:
        return str(size_bytes)

    value = float(size_bytes)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(UNIT_SYMBOLS) - 1:
        value /= 1024.0
        unit_index += 1

    return f"{format_decimal(value)}{UNIT_SYMBOLS[unit_index]}"
