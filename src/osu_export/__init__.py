"""
OSU Results Export

Lays out OSU microbenchmark results in .xlsx workbooks:
- Message sizes as a key column, one column per series
- Optional label row and metadata sheet
- Row alignment on the key column for sparse series
"""
from osu_export.models import DataPoint, Result, Results, SpreadsheetData, SpreadsheetMetadata
from osu_export.errors import ExportError, InvalidArgumentError, ParseError, RowNotFoundError
from osu_export.exporter import build_labeled_workbook, export_labeled, export_results

__all__ = [
    "DataPoint",
    "Result",
    "Results",
    "SpreadsheetData",
    "SpreadsheetMetadata",
    "ExportError",
    "InvalidArgumentError",
    "ParseError",
    "RowNotFoundError",
    "build_labeled_workbook",
    "export_labeled",
    "export_results",
]
