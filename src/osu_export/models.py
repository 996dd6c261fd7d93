"""
OSU Export Data Models

Pydantic models for benchmark results and the instructions describing
where they go in a workbook.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# MEASUREMENTS
# ============================================================================

class DataPoint(BaseModel):
    """One benchmark measurement."""
    model_config = ConfigDict(frozen=True)

    size: float = Field(..., description="Message size in bytes")
    value: float = Field(..., description="Measured value (latency, bandwidth, ...)")


class Result(BaseModel):
    """One benchmark run, i.e. one series of measurements."""
    model_config = ConfigDict(frozen=True)

    data_points: list[DataPoint] = Field(default_factory=list)

    @property
    def sizes(self) -> list[float]:
        return [dp.size for dp in self.data_points]

    @classmethod
    def from_pairs(cls, pairs) -> "Result":
        """Build a series from (size, value) pairs."""
        return cls(data_points=[DataPoint(size=size, value=value) for size, value in pairs])


class Results(BaseModel):
    """
    Multiple series.

    All series are expected to share the same ascending sequence of sizes;
    this is not checked.
    """
    model_config = ConfigDict(frozen=True)

    results: list[Result] = Field(default_factory=list)

    @property
    def sizes(self) -> list[float]:
        """Sizes of the first series, used as the key column."""
        if not self.results:
            return []
        return self.results[0].sizes


# ============================================================================
# SPREADSHEET INSTRUCTIONS
# ============================================================================

class SpreadsheetData(BaseModel):
    """
    The data to save in a spreadsheet and where to save it.

    Sheet references are 1-based. sheet_start is deliberately unbounded here;
    it is checked when the workbook is built.
    """
    model_config = ConfigDict(frozen=True)

    sheet_start: int = Field(..., description="Sheet number where the data is written")
    data: Optional[Results] = Field(None, description="Benchmark results to save")
    labels: list[str] = Field(default_factory=list, description="One label per series, same order as data")


class SpreadsheetMetadata(BaseModel):
    """Metadata describing an experiment, saved on its own sheet."""
    model_config = ConfigDict(frozen=True)

    sheet_id: int = Field(..., description="Sheet number where the metadata is written")
    timestamp: str = Field(..., description="Time stamp of the whole experiment")
    content: list[str] = Field(default_factory=list, description="One line per row, first column only")
