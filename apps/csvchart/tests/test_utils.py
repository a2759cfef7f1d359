import io
import logging
import math

import pytest

from csvchart.utils import LOGGER, configure_logging, format_value, log_info


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.0, "2"),
        (1.5, "1.5"),
        (-0.25, "-0.25"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (1e-7, "1e-7"),
        (2.5e-8, "2.5e-8"),
        (0.000001, "0.000001"),
        (-0.0, "0"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
        (12, "12"),
        (10**22, "1e+22"),
        (True, "true"),
        (None, "null"),
        ("text", "text"),
    ],
)
def test_format_value_matches_browser_output(value: object, expected: str) -> None:
    assert format_value(value) == expected


def test_configure_logging_follows_current_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    first, second = io.StringIO(), io.StringIO()
    try:
        monkeypatch.setattr("sys.stderr", first)
        configure_logging("info")
        log_info("first message")

        monkeypatch.setattr("sys.stderr", second)
        configure_logging("debug")
        log_info("second message")

        assert len(LOGGER.handlers) == 1
        assert LOGGER.level == logging.DEBUG
        assert "first message" in first.getvalue()
        assert "second message" in second.getvalue()
        assert "second message" not in first.getvalue()
    finally:
        for handler in list(LOGGER.handlers):
            LOGGER.removeHandler(handler)
