"""
Export Case Schema

Pydantic models describing a labeled export: which series go in the
workbook, under which labels, and the metadata saved next to them.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class SeriesInputs(BaseModel):
    """One series, read from an OSU output file or given inline."""
    label: str = Field(..., min_length=1, description="Column header for the series")
    file: Optional[Path] = Field(None, description="OSU output file, relative to the case file")
    points: Optional[list[tuple[float, float]]] = Field(None, description="Inline [size, value] pairs")

    @model_validator(mode="after")
    def validate_source(self) -> "SeriesInputs":
        if (self.file is None) == (self.points is None):
            raise ValueError(f"Series '{self.label}' needs exactly one of 'file' or 'points'")
        return self

    @field_validator("points")
    @classmethod
    def validate_points(cls, v: Optional[list[tuple[float, float]]]) -> Optional[list[tuple[float, float]]]:
        if v is not None and not v:
            raise ValueError("points must not be empty")
        return v


class MetadataInputs(BaseModel):
    """Experiment description saved on its own sheet."""
    sheet_id: int = Field(2, ge=1, description="Sheet number for the metadata")
    timestamp: Optional[str] = Field(None, description="Experiment time stamp (defaults to load time)")
    content: list[str] = Field(default_factory=list, description="Free text, one line per row")


class ExportCase(BaseModel):
    """Complete description of a labeled export."""
    sheet_start: int = Field(1, ge=1, description="Sheet number for the data")
    output: Optional[Path] = Field(None, description="Default output .xlsx path")
    series: list[SeriesInputs] = Field(..., min_length=1)
    metadata: Optional[MetadataInputs] = None

    @model_validator(mode="after")
    def validate_sheets(self) -> "ExportCase":
        if self.metadata is not None and self.metadata.sheet_id == self.sheet_start:
            raise ValueError(
                f"Metadata and data cannot share sheet {self.sheet_start}"
            )
        return self

    @property
    def labels(self) -> list[str]:
        return [s.label for s in self.series]
