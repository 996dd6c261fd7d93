"""
Unit Tests for Sheet Provisioning
"""
import pytest

from osu_export.errors import InvalidArgumentError
from osu_export.sheets import DEFAULT_SHEET, new_workbook, prepare_sheet


class TestPrepareSheet:
    """Tests for prepare_sheet."""

    def test_new_workbook_default_sheet(self):
        wb = new_workbook()
        assert wb.sheetnames == [DEFAULT_SHEET]

    def test_first_sheet_reuses_default(self):
        wb = new_workbook()
        assert prepare_sheet(wb, 1) == "Sheet1"
        assert wb.sheetnames == ["Sheet1"]

    def test_second_sheet_created(self):
        wb = new_workbook()
        assert prepare_sheet(wb, 2) == "Sheet2"
        assert wb.sheetnames == ["Sheet1", "Sheet2"]

    def test_existing_sheet_not_duplicated(self):
        wb = new_workbook()
        prepare_sheet(wb, 3)
        prepare_sheet(wb, 3)
        assert wb.sheetnames == ["Sheet1", "Sheet3"]

    def test_missing_workbook(self):
        with pytest.raises(InvalidArgumentError, match="undefined workbook"):
            prepare_sheet(None, 1)

    def test_invalid_sheet_number(self):
        with pytest.raises(InvalidArgumentError):
            prepare_sheet(new_workbook(), 0)
