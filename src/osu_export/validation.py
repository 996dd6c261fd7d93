"""
Export Input Validation

Fail-fast checks run before a labeled workbook is built. The order of the
checks is part of the contract: each one reports a distinct problem.
"""
from __future__ import annotations

from osu_export.errors import InvalidArgumentError
from osu_export.models import Results, SpreadsheetData


def validate_results(results: Results) -> None:
    """Ensure there is at least one series to export."""
    if results is None:
        raise InvalidArgumentError("undefined results")
    if not results.results:
        raise InvalidArgumentError("empty result dataset")


def validate_spreadsheet_data(spreadsheet_data: SpreadsheetData) -> None:
    """
    Validate labeled export inputs.

    Raises InvalidArgumentError with a precise message on failure.
    """
    if spreadsheet_data is None:
        raise InvalidArgumentError("undefined spreadsheet data")

    if spreadsheet_data.sheet_start <= 0:
        raise InvalidArgumentError(
            f"invalid sheet start index (must be > 0): {spreadsheet_data.sheet_start}"
        )

    validate_results(spreadsheet_data.data)
