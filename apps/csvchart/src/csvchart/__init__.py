"""CSV charting with marker-based column colors."""

from .builder import ChartBuild, Series, SummaryFacts, build_chart
from .classify import Category, ClassifierState, classify
from .config import ChartConfig
from .conclusion import format_conclusion
from .loader import load_records

__all__ = [
    "Category",
    "ChartBuild",
    "ChartConfig",
    "ClassifierState",
    "Series",
    "SummaryFacts",
    "build_chart",
    "classify",
    "format_conclusion",
    "load_records",
]
