"""
OSU I/O Readers

Parsing of OSU benchmark output and of YAML/JSON export case files.
"""
from __future__ import annotations

import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
import yaml

from osu_export.errors import ParseError
from osu_export.models import Result, Results, SpreadsheetData, SpreadsheetMetadata
from osu_io.schema import ExportCase, SeriesInputs


logger = logging.getLogger(__name__)


def parse_osu_output(text: str) -> Result:
    """
    Parse the table printed by an OSU benchmark.

    Lines starting with '#' are headers. Every other non-blank line holds
    the message size in its first column and the measured value in its
    second; extra columns (min/max latency, iterations) are ignored.

    Raises:
        ParseError: If there is no data row or a row is not numeric
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            sep=r"\s+",
            comment="#",
            header=None,
            usecols=[0, 1],
        )
        df = df.apply(pd.to_numeric, errors="raise").astype(float)
    except ValueError as exc:
        raise ParseError(f"unable to parse OSU output: {exc}") from exc

    if df.empty:
        raise ParseError("OSU output has no data rows")

    incomplete = df.index[df.isna().any(axis=1)].tolist()
    if incomplete:
        raise ParseError(f"OSU output has incomplete data rows: {[i + 1 for i in incomplete]}")

    return Result.from_pairs(zip(df[0].tolist(), df[1].tolist()))


def read_osu_output(path: str | Path) -> Result:
    """Read one OSU output file."""
    path = Path(path)
    with open(path, "r") as f:
        text = f.read()
    try:
        result = parse_osu_output(text)
    except ParseError as exc:
        raise ParseError(f"{path}: {exc}") from exc
    logger.debug("Read %d data points from %s", len(result.data_points), path)
    return result


def read_results(paths: Iterable[str | Path]) -> Results:
    """Read several OSU output files, one series per file."""
    return Results(results=[read_osu_output(p) for p in paths])


def read_case_file(path: str | Path) -> ExportCase:
    """
    Read an export case from a file (auto-detects format).

    Args:
        path: Path to a YAML or JSON case file

    Returns:
        Validated ExportCase
    """
    path = Path(path)
    suffix = path.suffix.lower()

    with open(path, "r") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {suffix}")

    return ExportCase.model_validate(data)


def _load_series(series: SeriesInputs, base_dir: Path) -> Result:
    if series.points is not None:
        return Result.from_pairs(series.points)
    file = series.file if series.file.is_absolute() else base_dir / series.file
    return read_osu_output(file)


def load_case(
    case: ExportCase,
    base_dir: str | Path = ".",
) -> tuple[SpreadsheetData, Optional[SpreadsheetMetadata]]:
    """
    Turn an export case into the objects consumed by the exporter.

    Series files are resolved relative to `base_dir`. A metadata block
    without a time stamp gets the current local time.
    """
    base_dir = Path(base_dir)
    results = Results(results=[_load_series(s, base_dir) for s in case.series])
    data = SpreadsheetData(sheet_start=case.sheet_start, data=results, labels=case.labels)

    metadata = None
    if case.metadata is not None:
        timestamp = case.metadata.timestamp or datetime.now().isoformat(timespec="seconds")
        metadata = SpreadsheetMetadata(
            sheet_id=case.metadata.sheet_id,
            timestamp=timestamp,
            content=case.metadata.content,
        )

    return data, metadata
