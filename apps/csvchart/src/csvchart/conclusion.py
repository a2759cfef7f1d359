"""Human-readable summary sentence."""

from __future__ import annotations

from typing import Any

from .builder import SummaryFacts
from .utils import format_value

NO_VALUE_TEXT = "no value"
COLOR_LEGEND = "Colors assigned: R=Red, B=Blue, Y=Yellow, N=Gray, others unique."


def _reading(value: Any) -> str:
    return NO_VALUE_TEXT if value is None else format_value(value)


def format_conclusion(facts: SummaryFacts, legend: bool = True) -> str:
    text = (
        f"Highest reading = {_reading(facts.max_value)} at {facts.max_label}, "
        f"Lowest reading = {_reading(facts.min_value)} at {facts.min_label}."
    )
    if legend:
        text = f"{text} {COLOR_LEGEND}"
    return text


def conclusion_markdown(facts: SummaryFacts) -> str:
    """Markdown flavor used by the Streamlit page."""

    return (
        f"📈 **Conclusion:** Highest reading = **{_reading(facts.max_value)}** at "
        f"**{facts.max_label}**, Lowest reading = **{_reading(facts.min_value)}** at "
        f"**{facts.min_label}**. {COLOR_LEGEND}"
    )
