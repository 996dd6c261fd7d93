"""
OSU Export Orchestrator

Builds workbooks from benchmark results and saves them as .xlsx files.
The workbook is mutated in place by each step; nothing is rolled back if a
later step fails.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from openpyxl import Workbook

from osu_export.grid import add_data_to_spreadsheet, write_grid
from osu_export.metadata import add_metadata_to_spreadsheet
from osu_export.models import Results, SpreadsheetData, SpreadsheetMetadata
from osu_export.sheets import DEFAULT_SHEET, new_workbook
from osu_export.validation import validate_results, validate_spreadsheet_data


logger = logging.getLogger(__name__)


def save_workbook(wb: Workbook, path: str | Path) -> Path:
    """Save a workbook, creating missing parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.info("Saved workbook %s", path)
    return path


def export_results(path: str | Path, results: Results) -> Path:
    """
    Export raw results to a single-sheet workbook.

    Sizes go in column A and each series in the next column, from row 1.

    Args:
        path: Output .xlsx path
        results: Series to export

    Returns:
        Path of the saved workbook
    """
    validate_results(results)

    wb = new_workbook()
    write_grid(wb[DEFAULT_SHEET], results)
    return save_workbook(wb, path)


def build_labeled_workbook(
    spreadsheet_data: SpreadsheetData,
    spreadsheet_metadata: Optional[SpreadsheetMetadata] = None,
) -> Workbook:
    """
    Build a workbook holding labeled data and, optionally, its metadata.

    The metadata is written first, on its own sheet, so that it captures the
    details needed to understand how the data was gathered. Labels are
    expected in the same order as the series. Sheet references are 1-based.
    """
    validate_spreadsheet_data(spreadsheet_data)

    wb = new_workbook()

    if spreadsheet_metadata is not None:
        sheet_id = add_metadata_to_spreadsheet(wb, spreadsheet_metadata)
        logger.debug("Metadata written to %s", sheet_id)

    sheet_id = add_data_to_spreadsheet(wb, spreadsheet_data)
    logger.debug("Data written to %s", sheet_id)

    return wb


def export_labeled(
    path: str | Path,
    spreadsheet_data: SpreadsheetData,
    spreadsheet_metadata: Optional[SpreadsheetMetadata] = None,
) -> Path:
    """Build a labeled workbook and save it to `path`."""
    wb = build_labeled_workbook(spreadsheet_data, spreadsheet_metadata)
    return save_workbook(wb, path)
