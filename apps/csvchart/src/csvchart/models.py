"""Request schemas for chart generation."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ChartMode(str, Enum):
    """Supported chart types."""

    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    RADAR = "radar"
    PIE = "pie"
    DOUGHNUT = "doughnut"

    @property
    def is_aggregated(self) -> bool:
        return self in {ChartMode.PIE, ChartMode.DOUGHNUT}


class SelectionError(ValueError):
    """The chosen columns do not fit the loaded dataset."""


class ChartRequest(BaseModel):
    x_column: str = Field(..., description="Column providing the axis labels")
    y_columns: list[str] = Field(..., description="Columns plotted as series, in legend order")
    mode: ChartMode = Field(ChartMode.BAR, description="Chart type")

    @field_validator("x_column")
    @classmethod
    def _x_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please select an X-axis column.")
        return value

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("y_columns")
    @classmethod
    def _dedupe_y(cls, value: list[str]) -> list[str]:
        columns = list(dict.fromkeys(item for item in value if item.strip()))
        if not columns:
            raise ValueError("Please select at least one Y-axis parameter.")
        return columns

    def check_columns(self, headers: Iterable[str]) -> None:
        known = set(headers)
        missing = [name for name in [self.x_column, *self.y_columns] if name not in known]
        if missing:
            raise SelectionError(f"Unknown column(s): {', '.join(missing)}")
