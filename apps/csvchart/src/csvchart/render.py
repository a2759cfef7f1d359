"""Plotly rendering for chart builds."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import plotly.graph_objects as go

from .builder import ChartBuild, Series
from .config import ChartConfig
from .utils import hex_to_rgba, is_number, log_info


class UnsupportedChartError(ValueError):
    """Raised when no trace style exists for a chart mode."""


def _plot_values(data: tuple[Any, ...]) -> list[Any]:
    # Text cells would turn a numeric axis categorical; plot them as gaps.
    return [value if is_number(value) else None for value in data]


def _line_trace(series: Series, labels: list[str], config: ChartConfig) -> go.Scatter:
    return go.Scatter(
        x=labels,
        y=_plot_values(series.data),
        name=series.name,
        mode="lines+markers",
        line={"color": series.border_color, "width": config.border_width, "shape": "spline",
              "smoothing": config.line_smoothing},
        marker={"color": hex_to_rgba(series.fill_color), "size": config.point_size,
                "line": {"color": series.border_color, "width": 1}},
    )


def _bar_trace(series: Series, labels: list[str], config: ChartConfig) -> go.Bar:
    return go.Bar(
        x=labels,
        y=_plot_values(series.data),
        name=series.name,
        marker={"color": hex_to_rgba(series.fill_color),
                "line": {"color": series.border_color, "width": config.border_width}},
    )


def _scatter_trace(series: Series, labels: list[str], config: ChartConfig) -> go.Scatter:
    return go.Scatter(
        x=labels,
        y=_plot_values(series.data),
        name=series.name,
        mode="markers",
        marker={"color": hex_to_rgba(series.fill_color), "size": config.point_size,
                "line": {"color": series.border_color, "width": 1}},
    )


def _radar_trace(series: Series, labels: list[str], config: ChartConfig) -> go.Scatterpolar:
    return go.Scatterpolar(
        theta=labels,
        r=_plot_values(series.data),
        name=series.name,
        fill="toself",
        fillcolor=hex_to_rgba(series.fill_color),
        line={"color": series.border_color, "width": config.border_width},
    )


_TRACE_BUILDERS = {
    "line": _line_trace,
    "bar": _bar_trace,
    "scatter": _scatter_trace,
    "radar": _radar_trace,
}


def _pie_figure(chart: ChartBuild, config: ChartConfig) -> go.Figure:
    colors = [series.border_color for series in chart.series]
    trace = go.Pie(
        labels=list(chart.slice_labels),
        values=list(chart.slice_values),
        name="Slices",
        hole=config.doughnut_hole if chart.mode == "doughnut" else 0.0,
        sort=False,
        marker={"colors": colors, "line": {"color": colors, "width": config.slice_border_width}},
    )
    fig = go.Figure(data=[trace])
    _apply_theme(fig, config, config.aggregated_title)
    return fig


def _apply_theme(fig: go.Figure, config: ChartConfig, title: str) -> None:
    fig.update_layout(
        template="plotly_dark",
        title={"text": title, "font": {"color": config.title_color}},
        legend={"font": {"color": config.legend_color}},
    )


def build_figure(chart: ChartBuild, config: ChartConfig | None = None) -> go.Figure:
    """Turn a :class:`ChartBuild` into a themed plotly figure."""

    config = config or ChartConfig()
    if chart.aggregated:
        return _pie_figure(chart, config)

    builder = _TRACE_BUILDERS.get(chart.mode)
    if builder is None:
        raise UnsupportedChartError(f"No renderer for chart type '{chart.mode}'")

    labels = list(chart.labels)
    fig = go.Figure(data=[builder(series, labels, config) for series in chart.series])
    _apply_theme(fig, config, config.title)
    if chart.mode == "radar":
        fig.update_layout(polar={"angularaxis": {"tickfont": {"color": config.tick_color}},
                                 "radialaxis": {"tickfont": {"color": config.tick_color}}})
        return fig

    # Row labels stay categorical even when the x column is numeric.
    fig.update_xaxes(
        type="category",
        tickfont={"color": config.tick_color},
        title={"text": chart.x_column, "font": {"color": config.title_color}},
    )
    fig.update_yaxes(
        tickfont={"color": config.tick_color},
        title={"text": config.y_axis_title, "font": {"color": config.title_color}},
    )
    if chart.mode == "bar":
        fig.update_layout(barmode="group")
    return fig


def save_figure(fig: go.Figure, out_path: Path, scale: float = 2.0) -> Path:
    """Write *fig* to *out_path*: ``.html`` stays interactive, other suffixes go through kaleido."""

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.suffix.lower() in {".html", ".htm"}:
        fig.write_html(str(out_path), include_plotlyjs="cdn")
    else:
        fig.write_image(str(out_path), scale=scale)
    log_info(f"Saved chart → {out_path}")
    return out_path


__all__ = ["UnsupportedChartError", "build_figure", "save_figure"]
