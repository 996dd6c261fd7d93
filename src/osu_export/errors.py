"""
OSU Export Errors

Error kinds raised while laying out benchmark results in a workbook.
Save failures are not wrapped: the underlying OSError propagates unchanged.
"""
from __future__ import annotations


class ExportError(Exception):
    """Base class for spreadsheet export failures."""
    pass


class InvalidArgumentError(ExportError, ValueError):
    """Raised when a required handle is missing or an argument is out of range."""
    pass


class ParseError(ExportError, ValueError):
    """Raised when a cell or an input line cannot be read as a number."""
    pass


class RowNotFoundError(ExportError, LookupError):
    """Raised when the reference column runs out before the key is found."""
    pass
