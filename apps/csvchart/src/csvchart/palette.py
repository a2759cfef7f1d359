"""Color presets for chart series."""

from __future__ import annotations

# Fixed colors for the marker categories. Kept as 7-character hex so an
# opacity suffix can be appended for fills.
NAMED_HEX: dict[str, str] = {
    "red": "#ff0000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "gray": "#808080",
}

# Columns without a marker walk this list in first-use order.
FALLBACK_PALETTE: tuple[str, ...] = (
    "#e6194b", "#3cb44b", "#ffe119", "#4363d8", "#f58231",
    "#911eb4", "#46f0f0", "#f032e6", "#bcf60c", "#fabebe",
    "#008080", "#e6beff", "#9a6324", "#fffac8", "#800000",
    "#aaffc3", "#808000", "#ffd8b1", "#000075", "#808080",
)

FILL_ALPHA_SUFFIX = "66"

__all__ = ["NAMED_HEX", "FALLBACK_PALETTE", "FILL_ALPHA_SUFFIX"]
