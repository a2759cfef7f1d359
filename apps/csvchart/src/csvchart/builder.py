"""Series and summary derivation for one chart request."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .classify import Category, ClassifierState, classify
from .config import LOCATE_ROW, ChartConfig
from .utils import finite_or_zero, format_value, is_number, is_rgb_hex, log_debug

Record = Mapping[str, Any]

PLACEHOLDER_LABEL = "-"


@dataclass(frozen=True, slots=True)
class Series:
    name: str
    data: tuple[Any, ...]
    category: Category
    border_color: str
    fill_color: str
    palette_index: int | None = None


@dataclass(frozen=True, slots=True)
class SummaryFacts:
    """Extremes of the plotted values. ``None`` means no numeric value was found."""

    max_value: float | None
    min_value: float | None
    max_label: str = PLACEHOLDER_LABEL
    min_label: str = PLACEHOLDER_LABEL

    @property
    def has_values(self) -> bool:
        return self.max_value is not None


@dataclass(frozen=True, slots=True)
class ChartBuild:
    x_column: str
    mode: str
    labels: tuple[str, ...]
    series: tuple[Series, ...]
    facts: SummaryFacts
    aggregated: bool = False
    slice_labels: tuple[str, ...] = ()
    slice_values: tuple[float, ...] = ()


def _mode_name(mode: Any) -> str:
    return str(getattr(mode, "value", mode)).strip().lower()


def axis_label(value: Any) -> str:
    if value is None:
        return ""
    return format_value(value)


def fill_color(color: str, suffix: str) -> str:
    """Append the opacity *suffix* to ``#RRGGBB`` colors only."""

    return color + suffix if is_rgb_hex(color) else color


def column_total(values: Sequence[Any]) -> float:
    return sum((finite_or_zero(value) for value in values), 0)


def _build_series(
    rows: Sequence[Record],
    y_columns: Sequence[str],
    config: ChartConfig,
) -> tuple[Series, ...]:
    state = ClassifierState()
    built = []
    for column in y_columns:
        data = tuple(row.get(column) for row in rows)
        assignment = classify(column, state, config.fallback_palette)
        log_debug(f"Column {column!r} -> {assignment.category.value} {assignment.color}")
        built.append(
            Series(
                name=column,
                data=data,
                category=assignment.category,
                border_color=assignment.color,
                fill_color=fill_color(assignment.color, config.fill_alpha_suffix),
                palette_index=assignment.palette_index,
            )
        )
    return tuple(built)


def _aggregated_facts(series: Sequence[Series], totals: Sequence[float]) -> SummaryFacts:
    # zero totals from columns without a finite number are not readings
    if not any(is_number(value) and math.isfinite(value) for item in series for value in item.data):
        return SummaryFacts(None, None)
    names = [item.name for item in series]
    high = max(totals)
    low = min(totals)
    # list.index keeps the first column on ties
    return SummaryFacts(high, low, names[list(totals).index(high)], names[list(totals).index(low)])


def _flattened_label(series: Sequence[Series], labels: Sequence[str], target: float) -> str:
    """Label at the target's first index in all series' raw data laid end to end.

    The index runs over the concatenated sequences, so a hit in the second
    or later series points past the row labels and yields the placeholder.
    """

    position = 0
    for item in series:
        for value in item.data:
            if is_number(value) and value == target:
                return labels[position] if position < len(labels) else PLACEHOLDER_LABEL
            position += 1
    return PLACEHOLDER_LABEL


def _row_label(series: Sequence[Series], labels: Sequence[str], target: float) -> str:
    for item in series:
        for row, value in enumerate(item.data):
            if is_number(value) and value == target:
                return labels[row] if row < len(labels) else PLACEHOLDER_LABEL
    return PLACEHOLDER_LABEL


def _point_facts(series: Sequence[Series], labels: Sequence[str], locate: str) -> SummaryFacts:
    pool = [value for item in series for value in item.data if is_number(value)]
    if not pool:
        return SummaryFacts(None, None)
    high = max(pool)
    low = min(pool)
    find = _row_label if locate == LOCATE_ROW else _flattened_label
    return SummaryFacts(high, low, find(series, labels, high), find(series, labels, low))


def build_chart(
    rows: Sequence[Record],
    x_column: str,
    y_columns: Sequence[str],
    mode: Any = "bar",
    config: ChartConfig | None = None,
) -> ChartBuild:
    """Derive labels, styled series and summary facts for one chart.

    Callers validate the selection beforehand (see :class:`~csvchart.models.ChartRequest`);
    any row content is accepted here and non-numeric cells only drop out of
    the arithmetic.
    """

    config = config or ChartConfig()
    mode_name = _mode_name(mode)
    labels = tuple(axis_label(row.get(x_column)) for row in rows)
    series = _build_series(rows, y_columns, config)

    if config.is_aggregated(mode_name):
        names = tuple(item.name for item in series)
        totals = tuple(column_total(item.data) for item in series)
        facts = _aggregated_facts(series, totals)
        return ChartBuild(
            x_column=x_column,
            mode=mode_name,
            labels=labels,
            series=series,
            facts=facts,
            aggregated=True,
            slice_labels=names,
            slice_values=totals,
        )

    facts = _point_facts(series, labels, config.locate_extrema)
    return ChartBuild(x_column=x_column, mode=mode_name, labels=labels, series=series, facts=facts)


__all__ = [
    "PLACEHOLDER_LABEL",
    "ChartBuild",
    "Series",
    "SummaryFacts",
    "axis_label",
    "build_chart",
    "column_total",
    "fill_color",
]
