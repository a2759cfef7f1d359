"""Utility helpers shared across the csvchart package."""

from __future__ import annotations

import logging
import math
import sys
from typing import Any

import numpy as np

LOGGER = logging.getLogger("csvchart")


def configure_logging(level: str | int = "INFO") -> None:
    """Point the package logger at a console handler on the current ``sys.stderr``.

    Calling it again swaps the handler, so a replaced ``sys.stderr`` is picked up.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[csvchart] %(levelname)s %(message)s"))
    LOGGER.addHandler(handler)
    LOGGER.setLevel(level)


def log_info(message: str) -> None:
    LOGGER.info(message)


def log_debug(message: str) -> None:
    LOGGER.debug(message)


def is_number(value: Any) -> bool:
    """True for real numbers a chart can plot. Booleans and NaN are excluded."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def finite_or_zero(value: Any) -> float:
    if is_number(value) and math.isfinite(value):
        return value
    return 0


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def format_value(value: Any) -> str:
    """Stringify a cell the way a browser chart shows it.

    Numbers use the shortest round-tripping digits: positional between
    ``1e-6`` and ``1e21`` with no trailing ``.0`` (``2.0`` -> ``"2"``),
    exponent form outside it (``1e21`` -> ``"1e+21"``, ``1e-7`` -> ``"1e-7"``).
    Booleans are lower-case and ``None`` becomes ``"null"``.
    """

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    if isinstance(value, (int, float)):
        return _format_number(float(value))
    return str(value)


def is_rgb_hex(color: str) -> bool:
    if len(color) != 7 or not color.startswith("#"):
        return False
    try:
        int(color[1:], 16)
    except ValueError:
        return False
    return True


def hex_to_rgba(color: str) -> str:
    """Convert ``#RRGGBBAA`` into an ``rgba()`` string; other inputs pass through."""

    if len(color) != 9 or not color.startswith("#"):
        return color
    try:
        red, green, blue, alpha = (int(color[i : i + 2], 16) for i in (1, 3, 5, 7))
    except ValueError:
        return color
    return f"rgba({red},{green},{blue},{alpha / 255:.3f})"
