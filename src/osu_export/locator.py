"""
Row lookup in the reference (message size) column.
"""
from __future__ import annotations

from typing import Any, Optional

from osu_export.coordinates import KEY_COLUMN, Coordinate, read_cell
from osu_export.errors import InvalidArgumentError, ParseError, RowNotFoundError


def parse_key(value: Any, coordinate: Coordinate) -> float:
    """Read a reference cell as a float; empty, boolean and text cells fail."""
    if isinstance(value, bool) or value is None:
        raise ParseError(f"unable to parse {value!r} in {coordinate.ref}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"unable to parse {value!r} in {coordinate.ref}") from exc


def find_row(
    worksheet,
    key: float,
    start_row: int,
    reference_column: int = KEY_COLUMN,
    max_scan: Optional[int] = None,
) -> int:
    """
    Find the row holding `key` in the reference column.

    Scans down from `start_row` and returns the first row whose value equals
    `key` exactly. The key is expected to exist at or below `start_row`.
    The scan never goes past the last populated row of the worksheet, nor
    past `max_scan` rows when given.

    Args:
        worksheet: openpyxl worksheet to scan
        key: Message size to look for
        start_row: 1-based row where the scan starts
        reference_column: 0-based column holding the keys (A by default)
        max_scan: Optional cap on the number of rows read

    Returns:
        1-based row index of the match

    Raises:
        ParseError: If a scanned cell is not a number before the key is found
        RowNotFoundError: If the scan is exhausted without a match
    """
    if start_row < 1:
        raise InvalidArgumentError(f"invalid start row (must be > 0): {start_row}")

    last_row = worksheet.max_row
    if max_scan is not None:
        last_row = min(last_row, start_row + max_scan - 1)

    for row in range(start_row, last_row + 1):
        coordinate = Coordinate(row, reference_column)
        if parse_key(read_cell(worksheet, coordinate), coordinate) == key:
            return row

    start = Coordinate(start_row, reference_column)
    raise RowNotFoundError(f"size {key!r} not found in column from {start.ref} to row {last_row}")
