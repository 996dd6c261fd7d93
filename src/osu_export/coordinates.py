"""
Cell coordinates.

Rows are 1-based to match spreadsheet semantics, columns are 0-based so that
they can be turned into letters with column_name().
"""
from __future__ import annotations

from dataclasses import dataclass

from openpyxl.utils import get_column_letter

from osu_export.errors import InvalidArgumentError


KEY_COLUMN = 0
HEADER_ROW = 1


def column_name(index: int) -> str:
    """Convert a 0-based column index to letters: 0 -> A, 25 -> Z, 26 -> AA."""
    if index < 0:
        raise InvalidArgumentError(f"column index must be >= 0, got {index}")
    return get_column_letter(index + 1)


@dataclass(frozen=True)
class Coordinate:
    """A (row, column) address within a sheet."""
    row: int
    column: int

    @property
    def ref(self) -> str:
        return f"{column_name(self.column)}{self.row}"

    def below(self, rows: int = 1) -> "Coordinate":
        return Coordinate(self.row + rows, self.column)

    def right(self, columns: int = 1) -> "Coordinate":
        return Coordinate(self.row, self.column + columns)


def read_cell(worksheet, coordinate: Coordinate):
    return worksheet.cell(row=coordinate.row, column=coordinate.column + 1).value


def write_cell(worksheet, coordinate: Coordinate, value) -> None:
    worksheet.cell(row=coordinate.row, column=coordinate.column + 1, value=value)
