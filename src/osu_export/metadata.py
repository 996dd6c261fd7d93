"""Metadata sheet writer."""
from __future__ import annotations

from openpyxl import Workbook

from osu_export.coordinates import HEADER_ROW, KEY_COLUMN, Coordinate, write_cell
from osu_export.errors import InvalidArgumentError
from osu_export.models import SpreadsheetMetadata
from osu_export.sheets import prepare_sheet


def add_metadata_to_spreadsheet(wb: Workbook, metadata: SpreadsheetMetadata) -> str:
    """
    Write the time stamp in A1 and one content line per row below it.

    Returns:
        Name of the sheet that received the metadata
    """
    if wb is None:
        raise InvalidArgumentError("undefined workbook")
    if metadata is None:
        raise InvalidArgumentError("undefined metadata")

    sheet_id = prepare_sheet(wb, metadata.sheet_id)
    ws = wb[sheet_id]

    cursor = Coordinate(HEADER_ROW, KEY_COLUMN)
    write_cell(ws, cursor, metadata.timestamp)
    for line in metadata.content:
        cursor = cursor.below()
        write_cell(ws, cursor, line)

    return sheet_id
