"""
Workbook and sheet provisioning.

Sheets are referenced by number and named "Sheet<N>". Sheet1 is the default
sheet every new workbook comes with.
"""
from __future__ import annotations

import logging

from openpyxl import Workbook

from osu_export.errors import InvalidArgumentError


logger = logging.getLogger(__name__)

DEFAULT_SHEET = "Sheet1"


def sheet_name(sheet_number: int) -> str:
    return f"Sheet{sheet_number}"


def new_workbook() -> Workbook:
    """Create an empty workbook whose default sheet is named Sheet1."""
    wb = Workbook()
    wb.active.title = DEFAULT_SHEET
    return wb


def prepare_sheet(wb: Workbook, sheet_number: int) -> str:
    """
    Return the name of sheet number `sheet_number`, creating it if needed.

    Sheet1 reuses the default sheet; any other sheet is created unless the
    workbook already has it.

    Raises:
        InvalidArgumentError: If the workbook is missing or the number is < 1
    """
    if wb is None:
        raise InvalidArgumentError("undefined workbook")
    if sheet_number < 1:
        raise InvalidArgumentError(f"invalid sheet number (must be > 0): {sheet_number}")

    sheet_id = sheet_name(sheet_number)
    if sheet_id not in wb.sheetnames:
        wb.create_sheet(title=sheet_id)
        logger.debug("Created sheet %s", sheet_id)
    return sheet_id
