"""
OSU Export CLI Application

Typer-based command-line interface for exporting OSU results to Excel.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from osu_export.exporter import export_labeled, export_results
from osu_io.readers import load_case, read_case_file, read_results
from osu_ui_cli.display import display_metadata, display_results
from osu_ui_cli.log_config import setup_logging


app = typer.Typer(
    name="osu-xlsx",
    help="Export OSU microbenchmark results to Excel workbooks",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show debug logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write debug logging to this file",
    ),
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file)


def _check_input_file(path: Path) -> Path:
    if not path.exists():
        raise typer.BadParameter(f"Input file not found: {path}")
    if not path.is_file():
        raise typer.BadParameter(f"Input path is not a file: {path}")
    return path


@app.command()
def raw(
    files: list[Path] = typer.Argument(
        ...,
        help="OSU output files, one series per file",
    ),
    output: Path = typer.Option(
        ...,
        "--output", "-o",
        help="Output Excel file path",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Suppress table output",
    ),
) -> None:
    """
    Export raw OSU output files without labels.

    Sizes go in column A and each file in the next column.
    """
    try:
        for f in files:
            _check_input_file(f)
        results = read_results(files)

        if not quiet:
            display_results(results, labels=[f.name for f in files])

        export_results(output, results)
        console.print(f"[green]✓ Exported to {output}[/green]")

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def export(
    case_file: Path = typer.Argument(
        ...,
        help="Path to export case file (YAML or JSON)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output Excel file path (overrides the case file)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Suppress table output",
    ),
) -> None:
    """
    Export labeled OSU results described by a case file.

    Metadata, when present, is saved on its own sheet.
    """
    try:
        _check_input_file(case_file)
        console.print(f"[dim]Reading case file: {case_file}[/dim]")
        case = read_case_file(case_file)

        target = output or case.output
        if target is None:
            raise typer.BadParameter("Missing output path. Provide --output or set 'output' in the case file.")
        if output is None and not target.is_absolute():
            target = case_file.parent / target

        data, metadata = load_case(case, base_dir=case_file.parent)

        if not quiet:
            display_results(data.data, labels=data.labels, title=f"Sheet{data.sheet_start}")
            if metadata is not None:
                display_metadata(metadata)

        export_labeled(target, data, metadata)
        console.print(f"[green]✓ Exported to {target}[/green]")

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def validate(
    case_file: Path = typer.Argument(
        ...,
        help="Path to export case file (YAML or JSON)",
    ),
) -> None:
    """
    Validate a case file and the series it references without exporting.
    """
    try:
        _check_input_file(case_file)
        console.print(f"[dim]Validating: {case_file}[/dim]")
        case = read_case_file(case_file)
        data, metadata = load_case(case, base_dir=case_file.parent)

        console.print("[green]✓ Case file is valid[/green]")

        console.print(f"\n  Data sheet: Sheet{data.sheet_start}")
        console.print(f"  Series: {', '.join(data.labels)}")
        console.print(f"  Sizes: {len(data.data.sizes)}")
        if metadata is not None:
            console.print(f"  Metadata sheet: Sheet{metadata.sheet_id} ({len(metadata.content)} lines)")

    except Exception as e:
        console.print(f"[red]Validation failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
