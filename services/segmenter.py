"""Ingredient list extraction from OCR / typed label text.

Finds the ingredients section (if a marker word is present), splits it into
fragments and drops OCR noise. Fail-open: with no marker the whole text is
treated as the ingredient list.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

# Priority order. A marker that contains a shorter one must come first.
SECTION_MARKERS = (
    "içindekiler",
    "içerikler",
    "içerik",
    "icerik",
    "bileşenler",
    "bileşim",
    "malzemeler",
    "ingredients",
    "composition",
    "contents",
)

SEPARATOR_RE = re.compile(r"[,;:\n]")
BRACKETS_RE = re.compile(r"[()\[\]]")
WHITESPACE_RE = re.compile(r"\s+")

MAX_INGREDIENTS = 50
MAX_INGREDIENT_LENGTH = 100


def lower_tr(text: str) -> str:
    """Lower-case without turning 'İ' into 'i' + combining dot."""
    return text.replace("İ", "i").lower()


def fold(text: str) -> str:
    """Comparison form: lower-case with dotless 'ı' folded to 'i'."""
    return lower_tr(text).replace("ı", "i")


def _find_section_start(text: str) -> int:
    # lower_tr keeps string length, so indexes into the folded copy apply to text.
    folded = fold(text)
    for marker in SECTION_MARKERS:
        index = folded.find(fold(marker))
        if index != -1:
            return index + len(marker)
    return 0


def clean_fragments(
    fragments: Iterable[str],
    *,
    max_items: int = MAX_INGREDIENTS,
    max_length: int = MAX_INGREDIENT_LENGTH,
) -> list[str]:
    """Trim, drop empty or overlong fragments, cap the count."""
    items = []
    for part in fragments:
        if not isinstance(part, str):
            raise TypeError(f"ingredient must be a str, not {type(part).__name__}")
        part = part.strip()
        if 0 < len(part) < max_length:
            items.append(part)

    if len(items) > max_items:
        logger.debug(f"Dropping {len(items) - max_items} ingredients beyond cap of {max_items}")
    return items[:max_items]


def extract_ingredients(
    text: str,
    *,
    max_items: int = MAX_INGREDIENTS,
    max_length: int = MAX_INGREDIENT_LENGTH,
) -> list[str]:
    """
    Split label text into trimmed ingredient fragments.

    Args:
        text: raw OCR or user text
        max_items: cap on returned fragments (extra fragments are dropped)
        max_length: fragments this long or longer are treated as noise

    Returns:
        Ingredient strings in label order. Empty when nothing usable was found.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    if not text.strip():
        return []

    region = text[_find_section_start(text):]
    return clean_fragments(SEPARATOR_RE.split(region), max_items=max_items, max_length=max_length)


segment = extract_ingredients


def normalize_ingredient(ingredient: str) -> str:
    """Lower-case, strip brackets, collapse whitespace."""
    if not isinstance(ingredient, str):
        raise TypeError(f"ingredient must be a str, not {type(ingredient).__name__}")
    # Brackets become spaces so "renk(e150d)" keeps "e150d" a separate word.
    cleaned = BRACKETS_RE.sub(" ", lower_tr(ingredient))
    return WHITESPACE_RE.sub(" ", cleaned).strip()
