import io
from pathlib import Path

import pytest

from csvchart.builder import build_chart
from csvchart.loader import (
    DatasetParseError,
    EmptyDatasetError,
    column_names,
    load_records,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_records_types_cells(tmp_path: Path) -> None:
    path = _write(tmp_path, "time,pressure,label\n1,5.5,a\n2,,b\n\n3,7.25,\n")

    records = load_records(path)

    assert records == [
        {"time": 1, "pressure": 5.5, "label": "a"},
        {"time": 2, "pressure": None, "label": "b"},
        {"time": 3, "pressure": 7.25, "label": None},
    ]
    assert type(records[0]["time"]) is int
    assert type(records[0]["pressure"]) is float


def test_load_records_accepts_bytes_and_file_objects() -> None:
    raw = b"x,y\n1,2\n3,4\n"

    assert load_records(raw) == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
    assert load_records(io.BytesIO(raw)) == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
    assert load_records(io.StringIO(raw.decode())) == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]


def test_rows_without_values_are_dropped() -> None:
    records = load_records(b"x,y\n1,2\n,\n3,4\n")

    assert [record["x"] for record in records] == [1, 3]


def test_column_names_follow_header_order() -> None:
    records = load_records(b"time,flow (R),temp_B\n1,2,3\n")

    assert column_names(records) == ["time", "flow (R)", "temp_B"]
    assert column_names([]) == []


@pytest.mark.parametrize("raw", [b"", b"x,y\n", b"only\n1\n2\n"])
def test_empty_datasets_raise(raw: bytes) -> None:
    with pytest.raises(EmptyDatasetError, match="No data found in CSV!"):
        load_records(raw)


def test_malformed_csv_raises_parse_error() -> None:
    with pytest.raises(DatasetParseError):
        load_records(b'x,y\n1,"unterminated\n')


def test_cells_are_typed_one_by_one() -> None:
    records = load_records(b"t,A,B\na,1,10\nb,2,\nc,x,5\n")

    assert [record["A"] for record in records] == [1, 2, "x"]
    assert [record["B"] for record in records] == [10, None, 5]


def test_mixed_columns_keep_their_numbers_for_pie_totals() -> None:
    records = load_records(b"t,A,B\na,1,10\nb,2,\nc,x,5\n")

    chart = build_chart(records, "t", ["A", "B"], "pie")

    assert chart.slice_values == (3, 15)
    assert (chart.facts.max_value, chart.facts.max_label) == (15, "B")
    assert (chart.facts.min_value, chart.facts.min_label) == (3, "A")


def test_missing_value_words_stay_text() -> None:
    records = load_records(b"site,level\nNA,1\nnull,2\nn/a,3\nNone,4\n")

    assert [record["site"] for record in records] == ["NA", "null", "n/a", "None"]


def test_number_and_boolean_forms() -> None:
    records = load_records(b"k,v\na,-3\nb,.5\nc,1e3\nd,TRUE\ne,false\nf,nan\ng,inf\nh, 7 \n")
    values = [record["v"] for record in records]

    assert values[:5] == [-3, 0.5, 1000.0, True, False]
    assert type(values[2]) is float
    assert values[5:7] == ["nan", "inf"]
    assert values[7] == 7


def test_short_rows_are_padded_with_none() -> None:
    records = load_records(b"x,y,z\n1,2,3\n4,5\n")

    assert records[1] == {"x": 4, "y": 5, "z": None}
