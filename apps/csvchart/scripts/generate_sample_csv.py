"""Utility script to write a synthetic sensor log for trying the CLI."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

DEFAULT_TARGET = Path(__file__).resolve().parents[1] / "assets" / "csv" / "generated.csv"


def generate(target: Path = DEFAULT_TARGET, rows: int = 48, seed: int = 7, overwrite: bool = False) -> Path:
    """Write a CSV with one column per marker style to *target* if needed."""

    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists() and not overwrite:
        return target
    rng = np.random.default_rng(seed)
    t = np.arange(rows)
    frame = pd.DataFrame(
        {
            "time": t,
            "pressure": np.round(101.0 + np.sin(t / 6.0) + rng.normal(0, 0.2, rows), 2),
            "flow (R)": np.round(2.0 + rng.normal(0, 0.5, rows), 2),
            "temp_B": np.round(20.0 + t * 0.1, 2),
            "Y-level": np.round(np.abs(np.cos(t / 4.0)), 3),
            "baseline grey": np.ones(rows),
        }
    )
    frame.to_csv(target, index=False)
    return target


def main(overwrite: bool = False) -> None:
    path = generate(overwrite=overwrite)
    print(f"Sample written to {path}")


if __name__ == "__main__":  # pragma: no cover - CLI utility
    main()
