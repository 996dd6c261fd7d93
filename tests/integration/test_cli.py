"""
Integration Tests for the CLI
"""
from pathlib import Path

import yaml
from openpyxl import load_workbook
from typer.testing import CliRunner

from osu_ui_cli.cli import app


CASE_DIR = Path(__file__).parent.parent.parent / "case_files"

runner = CliRunner()


class TestRawCommand:
    """Tests for `osu-xlsx raw`."""

    def test_raw_export(self, tmp_path: Path):
        out_path = tmp_path / "raw.xlsx"
        result = runner.invoke(
            app,
            [
                "raw",
                str(CASE_DIR / "osu_latency.out"),
                str(CASE_DIR / "osu_latency_ucx.out"),
                "--output", str(out_path),
                "--quiet",
            ],
        )

        assert result.exit_code == 0, result.output
        ws = load_workbook(out_path)["Sheet1"]
        assert ws["A1"].value == 1
        assert ws["B1"].value == 1.52
        assert ws["C5"].value == 1.27

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["raw", str(tmp_path / "nope.out"), "-o", str(tmp_path / "x.xlsx")])
        assert result.exit_code == 1
        assert not (tmp_path / "x.xlsx").exists()

    def test_error_text_with_brackets(self, tmp_path: Path):
        result = runner.invoke(app, ["raw", str(tmp_path / "[/red]run.out"), "-o", str(tmp_path / "x.xlsx")])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

class TestExportCommand:
    """Tests for `osu-xlsx export`."""

    def test_example_case(self, tmp_path: Path):
        out_path = tmp_path / "latency.xlsx"
        result = runner.invoke(app, ["export", str(CASE_DIR / "latency_case.yaml"), "-o", str(out_path)])

        assert result.exit_code == 0, result.output
        wb = load_workbook(out_path)
        assert wb.sheetnames == ["Sheet1", "Sheet2"]
        assert wb["Sheet1"]["B1"].value == "ob1"
        assert wb["Sheet1"]["C1"].value == "ucx"
        assert wb["Sheet1"]["A6"].value == 16
        assert wb["Sheet2"]["A1"].value == "2026-10-16T09:30:00"

    def test_output_from_case_file(self, tmp_path: Path):
        case_path = tmp_path / "case.yaml"
        case_path.write_text(yaml.safe_dump({
            "output": "out/result.xlsx",
            "series": [{"label": "run1", "points": [[1, 10], [2, 20]]}],
        }))

        result = runner.invoke(app, ["export", str(case_path), "--quiet"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "result.xlsx").exists()

    def test_missing_output(self, tmp_path: Path):
        case_path = tmp_path / "case.yaml"
        case_path.write_text(yaml.safe_dump({"series": [{"label": "run1", "points": [[1, 10]]}]}))

        result = runner.invoke(app, ["export", str(case_path)])

        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for `osu-xlsx validate`."""

    def test_valid_case(self):
        result = runner.invoke(app, ["validate", str(CASE_DIR / "latency_case.yaml")])
        assert result.exit_code == 0, result.output
        assert "valid" in result.output

    def test_invalid_case(self, tmp_path: Path):
        case_path = tmp_path / "case.yaml"
        case_path.write_text(yaml.safe_dump({"series": [{"label": "run1"}]}))

        result = runner.invoke(app, ["validate", str(case_path)])

        assert result.exit_code == 1
