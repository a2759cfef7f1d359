"""Column name to color classification.

A column is colored by the marker its author put in the header. The checks
run in a fixed order and the first hit wins:

1. a bracketed letter at the end: ``"Pressure (R)"``, ``"X [y]"``
2. a letter joined by a delimiter at the end or start: ``"temp_B"``,
   ``"N-flow"``
3. a whole token naming the color: ``"red line"``, ``"grey.baseline"``
4. otherwise the next entry of the fallback palette

Letters glued to a word (``"TempR"``) and colors hidden inside a word
(``"Bright"``) are not markers; those columns get a palette color.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .palette import FALLBACK_PALETTE, NAMED_HEX


class Category(str, Enum):
    """Semantic color buckets."""

    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    NEUTRAL = "neutral"
    OTHER = "other"


CATEGORY_HEX: dict[Category, str] = {
    Category.RED: NAMED_HEX["red"],
    Category.BLUE: NAMED_HEX["blue"],
    Category.YELLOW: NAMED_HEX["yellow"],
    Category.NEUTRAL: NAMED_HEX["gray"],
}

_MARKER_LETTERS = {
    "R": Category.RED,
    "B": Category.BLUE,
    "Y": Category.YELLOW,
    "N": Category.NEUTRAL,
}

# Checked in this order; the first category with a matching token wins.
_CATEGORY_TOKENS: tuple[tuple[Category, frozenset[str]], ...] = (
    (Category.RED, frozenset({"red", "r"})),
    (Category.BLUE, frozenset({"blue", "b"})),
    (Category.YELLOW, frozenset({"yellow", "y"})),
    (Category.NEUTRAL, frozenset({"neutral", "n", "gray", "grey"})),
)

_BRACKET_PATTERNS = (
    re.compile(r"\(([RBYN])\)$", re.IGNORECASE),
    re.compile(r"\[([RBYN])\]$", re.IGNORECASE),
)
_DELIMITED_PATTERNS = (
    re.compile(r"[_\-.\s]([RBYN])$", re.IGNORECASE),
    re.compile(r"^([RBYN])[_\-.\s]", re.IGNORECASE),
)
_TOKEN_SPLIT = re.compile(r"[^A-Za-z0-9]+")


@dataclass
class ClassifierState:
    """Fallback palette cursor shared by every column of one chart build."""

    next_index: int = 0


@dataclass(frozen=True, slots=True)
class ColorAssignment:
    category: Category
    color: str
    palette_index: int | None = None


def _match_marker(text: str, patterns: Sequence[re.Pattern[str]]) -> Category | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return _MARKER_LETTERS[match.group(1).upper()]
    return None


def tokenize(name: str) -> list[str]:
    """Split *name* on non-alphanumeric runs into lower-case tokens."""

    return [token.lower() for token in _TOKEN_SPLIT.split(name) if token]


def marker_category(name: object) -> Category | None:
    """Return the category named by *name*'s marker or tokens, if any."""

    trimmed = ("" if name is None else str(name)).strip()

    category = _match_marker(trimmed, _BRACKET_PATTERNS)
    if category is not None:
        return category

    category = _match_marker(trimmed, _DELIMITED_PATTERNS)
    if category is not None:
        return category

    tokens = set(tokenize(trimmed))
    for category, words in _CATEGORY_TOKENS:
        if tokens & words:
            return category
    return None


def classify(
    name: object,
    state: ClassifierState,
    palette: Sequence[str] = FALLBACK_PALETTE,
) -> ColorAssignment:
    """Assign a category and color to the column called *name*.

    Only an OTHER result reads and advances ``state.next_index``; the index
    wraps around the palette when read.
    """

    category = marker_category(name)
    if category is not None:
        return ColorAssignment(category, CATEGORY_HEX[category])

    colors = palette or FALLBACK_PALETTE
    index = state.next_index % len(colors)
    state.next_index += 1
    return ColorAssignment(Category.OTHER, colors[index], index)


__all__ = [
    "Category",
    "CATEGORY_HEX",
    "ClassifierState",
    "ColorAssignment",
    "classify",
    "marker_category",
    "tokenize",
]
