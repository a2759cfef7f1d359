from pathlib import Path

import pytest

from csvchart.builder import build_chart
from csvchart.render import UnsupportedChartError, build_figure, save_figure
from csvchart.utils import hex_to_rgba

ROWS = [
    {"time": 1, "pressure": 5, "flow (R)": 2},
    {"time": 2, "pressure": "n/a", "flow (R)": 1},
]


def test_bar_figure_styles_series() -> None:
    chart = build_chart(ROWS, "time", ["pressure", "flow (R)"], "bar")
    fig = build_figure(chart)

    assert [trace.type for trace in fig.data] == ["bar", "bar"]
    flow = fig.data[1]
    assert flow.name == "flow (R)"
    assert flow.marker.color == hex_to_rgba("#ff000066")
    assert flow.marker.line.color == "#ff0000"
    assert list(fig.data[0].y) == [5, None]
    assert list(fig.data[0].x) == ["1", "2"]
    assert fig.layout.xaxis.title.text == "time"
    assert fig.layout.yaxis.title.text == "Values"
    assert fig.layout.title.text == "CSV Data Visualization"


def test_line_and_radar_figures() -> None:
    line = build_figure(build_chart(ROWS, "time", ["pressure"], "line"))
    assert line.data[0].type == "scatter"
    assert line.data[0].line.shape == "spline"

    radar = build_figure(build_chart(ROWS, "time", ["pressure"], "radar"))
    assert radar.data[0].type == "scatterpolar"
    assert list(radar.data[0].theta) == ["1", "2"]


@pytest.mark.parametrize(("mode", "hole"), [("pie", 0.0), ("doughnut", 0.5)])
def test_aggregated_figures_use_one_slice_per_column(mode: str, hole: float) -> None:
    chart = build_chart(ROWS, "time", ["pressure", "flow (R)"], mode)
    fig = build_figure(chart)

    assert len(fig.data) == 1
    pie = fig.data[0]
    assert pie.type == "pie"
    assert list(pie.labels) == ["pressure", "flow (R)"]
    assert list(pie.values) == [5, 3]
    assert list(pie.marker.colors) == [chart.series[0].border_color, "#ff0000"]
    assert pie.hole == hole
    assert fig.layout.title.text == "CSV Data Visualization (Pie/Doughnut)"


def test_unknown_point_mode_is_rejected() -> None:
    chart = build_chart(ROWS, "time", ["pressure"], "polarArea")

    with pytest.raises(UnsupportedChartError):
        build_figure(chart)


def test_save_figure_writes_html(tmp_path: Path) -> None:
    fig = build_figure(build_chart(ROWS, "time", ["pressure"], "bar"))

    out = save_figure(fig, tmp_path / "nested" / "chart.html")

    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_hex_to_rgba() -> None:
    assert hex_to_rgba("#ff000066") == "rgba(255,0,0,0.400)"
    assert hex_to_rgba("#ff0000") == "#ff0000"
    assert hex_to_rgba("#zz000066") == "#zz000066"
