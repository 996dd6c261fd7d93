"""
Grid Writer

Lays out a key column of message sizes, an optional label row and one value
column per series. Rows of every series are aligned on the key column with
find_row(), so a series may skip sizes without shifting the others.
"""
from __future__ import annotations

import logging
from typing import Optional

from openpyxl import Workbook

from osu_export.coordinates import HEADER_ROW, KEY_COLUMN, Coordinate, write_cell
from osu_export.errors import InvalidArgumentError, ParseError, RowNotFoundError
from osu_export.locator import find_row
from osu_export.models import DataPoint, Results, SpreadsheetData
from osu_export.sheets import prepare_sheet
from osu_export.validation import validate_results


logger = logging.getLogger(__name__)

FIRST_VALUE_COLUMN = 1


def write_values(worksheet, column: int, start_row: int, data_points: list[DataPoint]) -> int:
    """
    Write the values of one series into `column`.

    Each value goes on the row whose key matches the point's size, searching
    from the row after the previous value.

    Returns:
        The row following the last value written
    """
    row = start_row
    for dp in data_points:
        row = find_row(worksheet, dp.size, row)
        write_cell(worksheet, Coordinate(row, column), dp.value)
        row += 1
    return row


def write_sizes(worksheet, sizes: list[float], start_row: int) -> None:
    for offset, size in enumerate(sizes):
        write_cell(worksheet, Coordinate(start_row + offset, KEY_COLUMN), size)


def write_labels(worksheet, labels: list[str]) -> None:
    cursor = Coordinate(HEADER_ROW, FIRST_VALUE_COLUMN)
    for label in labels:
        write_cell(worksheet, cursor, label)
        cursor = cursor.right()


def write_grid(worksheet, results: Results, labels: Optional[list[str]] = None) -> None:
    """
    Write all series of `results` into `worksheet`.

    Without labels, sizes and values start on row 1. With labels, row 1 holds
    the labels (A1 stays blank) and the data starts on row 2. Sizes always
    come from the first series.

    Raises:
        InvalidArgumentError: If there is no series to write
        ParseError, RowNotFoundError: If a value cannot be aligned on a size
    """
    validate_results(results)

    first_row = HEADER_ROW
    if labels is not None:
        if len(labels) != len(results.results):
            logger.warning(
                "Got %d labels for %d series in %s",
                len(labels), len(results.results), worksheet.title,
            )
        write_labels(worksheet, labels)
        first_row = HEADER_ROW + 1

    write_sizes(worksheet, results.sizes, first_row)

    for idx, result in enumerate(results.results):
        column = FIRST_VALUE_COLUMN + idx
        try:
            write_values(worksheet, column, first_row, result.data_points)
        except (ParseError, RowNotFoundError) as exc:
            name = labels[idx] if labels is not None and idx < len(labels) else f"#{idx}"
            raise type(exc)(f"series {name}: {exc}") from exc

    logger.debug(
        "Wrote %d series x %d sizes into %s",
        len(results.results), len(results.sizes), worksheet.title,
    )


def add_data_to_spreadsheet(wb: Workbook, spreadsheet_data: SpreadsheetData) -> str:
    """
    Write labeled data on sheet `spreadsheet_data.sheet_start`.

    Returns:
        Name of the sheet that received the data
    """
    if wb is None:
        raise InvalidArgumentError("undefined workbook")
    if spreadsheet_data is None:
        raise InvalidArgumentError("undefined data")

    sheet_id = prepare_sheet(wb, spreadsheet_data.sheet_start)
    write_grid(wb[sheet_id], spreadsheet_data.data, labels=list(spreadsheet_data.labels))
    return sheet_id
