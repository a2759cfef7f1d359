"""CSV loading helpers."""

from __future__ import annotations

import io
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO, Any

import pandas as pd

from .utils import log_info

CsvSource = str | Path | bytes | IO[bytes] | IO[str]


class DatasetError(ValueError):
    """Base class for problems with the uploaded dataset."""


class DatasetParseError(DatasetError):
    """The file could not be read as delimited text."""


class EmptyDatasetError(DatasetError):
    """The file parsed but holds no usable rows."""

    def __init__(self, message: str = "No data found in CSV!") -> None:
        super().__init__(message)


_INT_CELL = re.compile(r"^\s*-?\d+\s*$")
_FLOAT_CELL = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")


def _typed_cell(text: Any) -> Any:
    """Type one raw cell: empty -> None, then int, float, bool, else the text."""

    # short rows are padded with NaN rather than ""
    if not isinstance(text, str) or text == "":
        return None
    if _INT_CELL.match(text):
        return int(text)
    if _FLOAT_CELL.match(text):
        return float(text)
    if text.strip().lower() in {"true", "false"}:
        return text.strip().lower() == "true"
    return text


def _populated(value: Any) -> bool:
    return value is not None and value != ""


def read_frame(source: CsvSource) -> pd.DataFrame:
    """Parse *source* into an all-text DataFrame.

    Only empty fields are missing (as ``""``); strings such as ``NA`` or
    ``null`` stay text. Typing happens per cell in :func:`frame_to_records`.
    """

    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        return pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise EmptyDatasetError() from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DatasetParseError(f"Could not parse CSV: {exc}") from exc


def frame_to_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert *frame* into plain-Python records.

    Cells are typed one by one, so a column may mix numbers and text.
    Empty cells become ``None`` and rows without any populated cell are
    dropped. A single-column frame yields no records.
    """

    columns = [str(column) for column in frame.columns]
    if len(columns) < 2:
        return []
    records: list[dict[str, Any]] = []
    for row in frame.itertuples(index=False, name=None):
        record = {column: _typed_cell(value) for column, value in zip(columns, row)}
        if any(_populated(value) for value in record.values()):
            records.append(record)
    return records


def load_records(source: CsvSource) -> list[dict[str, Any]]:
    """Load *source* (path, bytes or file object) into an ordered list of records."""

    records = frame_to_records(read_frame(source))
    if not records:
        raise EmptyDatasetError()
    name = source if isinstance(source, (str, Path)) else type(source).__name__
    log_info(f"Loaded {len(records)} rows x {len(records[0])} columns from {name}")
    return records


def column_names(records: Sequence[Mapping[str, Any]]) -> list[str]:
    """Column order as established by the first record."""

    if not records:
        return []
    return list(records[0].keys())


__all__ = [
    "DatasetError",
    "DatasetParseError",
    "EmptyDatasetError",
    "column_names",
    "frame_to_records",
    "load_records",
    "read_frame",
]
