"""Configuration utilities for csvchart."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path

from dotenv import load_dotenv

from .palette import FALLBACK_PALETTE, FILL_ALPHA_SUFFIX

LOCATE_FLATTENED = "flattened"
LOCATE_ROW = "row"


@dataclass
class ChartConfig:
    """Chart building and rendering options.

    The dataclass stays flat so CLI overrides and environment variables map
    one-to-one onto fields.
    """

    # Classification
    fallback_palette: tuple[str, ...] = FALLBACK_PALETTE
    fill_alpha_suffix: str = FILL_ALPHA_SUFFIX

    # Summary
    aggregated_modes: frozenset[str] = frozenset({"pie", "doughnut"})
    locate_extrema: str = LOCATE_FLATTENED

    # Rendering
    title: str = "CSV Data Visualization"
    aggregated_title: str = "CSV Data Visualization (Pie/Doughnut)"
    title_color: str = "#00d1ff"
    legend_color: str = "#f8f9fa"
    tick_color: str = "#ddd"
    y_axis_title: str = "Values"
    line_smoothing: float = 0.4
    border_width: float = 2.0
    slice_border_width: float = 1.0
    point_size: float = 6.0
    doughnut_hole: float = 0.5

    log_level: str = "INFO"

    def as_dict(self) -> dict[str, object]:
        """Return a shallow dictionary suitable for serialization."""

        data = asdict(self)
        data["fallback_palette"] = list(self.fallback_palette)
        data["aggregated_modes"] = sorted(self.aggregated_modes)
        return data

    def is_aggregated(self, mode: str) -> bool:
        return str(getattr(mode, "value", mode)).strip().lower() in self.aggregated_modes

    def update_from_cli(self, overrides: dict[str, object]) -> None:
        """Apply CLI overrides to the configuration in place."""

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown configuration option: {key}")
            setattr(self, key, value)
        if self.locate_extrema not in {LOCATE_FLATTENED, LOCATE_ROW}:
            raise ValueError(f"locate_extrema must be '{LOCATE_FLATTENED}' or '{LOCATE_ROW}'")

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "ChartConfig":
        """Build a configuration from ``CSVCHART_*`` variables.

        A ``.env`` file in the working directory (or *env_file*) is loaded
        first without overriding variables that are already set.
        """

        load_dotenv(env_file or Path.cwd() / ".env", override=False)
        config = cls()
        overrides: dict[str, object] = {}
        locate = os.getenv("CSVCHART_LOCATE_EXTREMA")
        if locate:
            overrides["locate_extrema"] = locate.strip().lower()
        level = os.getenv("CSVCHART_LOG_LEVEL")
        if level:
            overrides["log_level"] = level.strip().upper()
        palette = os.getenv("CSVCHART_PALETTE")
        if palette:
            colors = tuple(item.strip() for item in palette.split(",") if item.strip())
            if colors:
                overrides["fallback_palette"] = colors
        suffix = os.getenv("CSVCHART_FILL_ALPHA")
        if suffix is not None and suffix.strip():
            overrides["fill_alpha_suffix"] = suffix.strip()
        config.update_from_cli(overrides)
        return config
