#!/usr/bin/env python3
"""
Report Rendering Module

Sorts collected records by size and renders them as aligned text lines,
followed by a total line.
"""

from duq_config import ReportConfig
from entry_collector import Record, ResultSet


def sort_records(records: list[Record], reverse: bool = False) -> list[Record]:
    """Return records ordered by size, largest first when *reverse*"""
    return sorted(records, key=lambda r: r.size_bytes, reverse=reverse)


def render(result: ResultSet, config: ReportConfig) -> list[str]:
    """Render a result set as report lines

    Args:
        result: Collected records and totals
        config: Report options (sort direction)

    Returns:
        One "<size> <label>" line per record and a final "<size> total"
        line, sizes right-aligned to a common width. Empty for an empty result.
    """
    if not result.records:
        return []

    width = result.column_width
    lines = [
        f"{record.formatted_size:>{width}} {record.display_label}"
        for record in sort_records(result.records, reverse=config.reverse_sort)
    ]
    lines.append(f"{result.formatted_total:>{width}} total")
    return lines
