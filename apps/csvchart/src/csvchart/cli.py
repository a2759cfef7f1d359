"""Typer CLI entrypoint for csvchart."""

from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError

from .builder import ChartBuild, build_chart
from .classify import ClassifierState, classify
from .config import ChartConfig
from .conclusion import format_conclusion
from .loader import DatasetError, column_names, load_records
from .models import ChartMode, ChartRequest, SelectionError
from .render import UnsupportedChartError, build_figure, save_figure
from .utils import configure_logging, log_info

app = typer.Typer(add_completion=False, help="Chart CSV columns with marker-based colors.")


def build_config(**kwargs) -> ChartConfig:
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    try:
        config = ChartConfig.from_env()
        config.update_from_cli(overrides)
    except (AttributeError, ValueError) as exc:
        _fail(str(exc))
    configure_logging(config.log_level)
    return config


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def prepare_chart(
    csv_path: Path,
    x: str,
    y: List[str],
    mode: ChartMode,
    config: ChartConfig,
) -> ChartBuild:
    try:
        request = ChartRequest(x_column=x, y_columns=y, mode=mode)
    except ValidationError:
        _fail("Please select X-axis and at least one Y-axis parameter.")
    try:
        records = load_records(csv_path)
        request.check_columns(column_names(records))
    except (DatasetError, SelectionError) as exc:
        _fail(str(exc))
    log_info(f"Building {request.mode.value} chart of {', '.join(request.y_columns)} by {request.x_column}")
    return build_chart(records, request.x_column, request.y_columns, request.mode, config)


@app.command()
def columns(csv_path: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """List the columns of a CSV file in header order."""

    build_config()
    try:
        records = load_records(csv_path)
    except DatasetError as exc:
        _fail(str(exc))
    for name in column_names(records):
        typer.echo(name)


@app.command("classify")
def classify_cmd(names: List[str] = typer.Argument(..., help="Column names to classify")) -> None:
    """Show the category and color each column name would get, in order."""

    config = build_config()
    state = ClassifierState()
    for name in names:
        assignment = classify(name, state, config.fallback_palette)
        typer.echo(f"{name}\t{assignment.category.value}\t{assignment.color}")


@app.command()
def summary(
    csv_path: Path = typer.Argument(..., exists=True, readable=True),
    x: str = typer.Option(..., "--x", "-x", help="X-axis column"),
    y: List[str] = typer.Option(..., "--y", "-y", help="Y-axis column (repeatable)"),
    mode: ChartMode = typer.Option(ChartMode.BAR, "--mode", "-m", help="Chart type"),
    locate_extrema: Optional[str] = typer.Option(None, "--locate", help="flattened or row"),
) -> None:
    """Print the highest/lowest reading sentence for a selection."""

    config = build_config(locate_extrema=locate_extrema)
    chart = prepare_chart(csv_path, x, y, mode, config)
    for series in chart.series:
        typer.echo(f"{series.name}: {series.category.value} {series.border_color}")
    typer.echo(format_conclusion(chart.facts))


@app.command()
def render(
    csv_path: Path = typer.Argument(..., exists=True, readable=True),
    out: Path = typer.Option(..., "--out", "-o", help="Output path (.html, .png, .pdf, .svg)"),
    x: str = typer.Option(..., "--x", "-x", help="X-axis column"),
    y: List[str] = typer.Option(..., "--y", "-y", help="Y-axis column (repeatable)"),
    mode: ChartMode = typer.Option(ChartMode.BAR, "--mode", "-m", help="Chart type"),
    locate_extrema: Optional[str] = typer.Option(None, "--locate", help="flattened or row"),
) -> None:
    """Render the chart to a file and print the conclusion."""

    config = build_config(locate_extrema=locate_extrema)
    chart = prepare_chart(csv_path, x, y, mode, config)
    try:
        fig = build_figure(chart, config)
    except UnsupportedChartError as exc:
        _fail(str(exc))
    save_figure(fig, out)
    typer.echo(format_conclusion(chart.facts))


if __name__ == "__main__":
    app()
