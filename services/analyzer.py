"""Label analysis pipeline: text -> ingredients -> additives -> verdict."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from services.additive_engine import DetectedAdditive, iter_additives, match_additives
from services.knowledge_base import Category, KnowledgeBase
from services.segmenter import (
    MAX_INGREDIENT_LENGTH,
    MAX_INGREDIENTS,
    clean_fragments,
    extract_ingredients,
    normalize_ingredient,
)
from services.verdict import (
    DEFAULT_LOCALE,
    AdditiveCounts,
    Status,
    count_additives,
    get_recommendations,
    status_from_counts,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    status: Status
    additives: tuple[DetectedAdditive, ...]
    ingredients: tuple[str, ...]
    counts: AdditiveCounts
    recommendations: tuple[str, ...]
    # False when no ingredient list could be read; status is green then but means "unknown".
    ingredients_found: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "additives": [a.to_dict() for a in self.additives],
            "ingredients": list(self.ingredients),
            "counts": self.counts.to_dict(),
            "recommendations": list(self.recommendations),
            "ingredients_found": self.ingredients_found,
        }


def _normalize_all(ingredients: Iterable[str]) -> list[str]:
    normalized = []
    for item in ingredients:
        n = normalize_ingredient(item)
        if n:
            normalized.append(n)
    return normalized


def _build_result(normalized: list[str], kb: KnowledgeBase, locale: str) -> AnalysisResult:
    additives = match_additives(normalized, kb)
    counts = count_additives(additives)
    status = status_from_counts(counts)
    logger.debug(
        f"Analyzed {len(normalized)} ingredients: {counts.total} additives, status {status.value}"
    )
    return AnalysisResult(
        status=status,
        additives=tuple(additives),
        ingredients=tuple(normalized),
        counts=counts,
        recommendations=tuple(get_recommendations(status, locale)),
        ingredients_found=bool(normalized),
    )


def analyze_ingredients(
    ingredients: Sequence[str],
    kb: KnowledgeBase,
    *,
    locale: str = DEFAULT_LOCALE,
    max_items: int = MAX_INGREDIENTS,
    max_length: int = MAX_INGREDIENT_LENGTH,
) -> AnalysisResult:
    """Analyze an already segmented ingredient list (normalized here, same cap and noise filter)."""
    if isinstance(ingredients, (str, bytes)) or ingredients is None:
        raise TypeError("ingredients must be a sequence of strings")
    raw = clean_fragments(ingredients, max_items=max_items, max_length=max_length)
    return _build_result(_normalize_all(raw), kb, locale)


def analyze_text(
    text: str,
    kb: KnowledgeBase,
    *,
    locale: str = DEFAULT_LOCALE,
    max_items: int = MAX_INGREDIENTS,
    max_length: int = MAX_INGREDIENT_LENGTH,
) -> AnalysisResult:
    """Full pipeline over raw OCR or typed label text."""
    raw = extract_ingredients(text, max_items=max_items, max_length=max_length)
    return _build_result(_normalize_all(raw), kb, locale)


def quick_status(ingredients: Sequence[str], kb: KnowledgeBase) -> Status:
    """Status only; stops at the first dangerous additive."""
    if isinstance(ingredients, (str, bytes)) or ingredients is None:
        raise TypeError("ingredients must be a sequence of strings")
    found_any = False
    for additive in iter_additives(_normalize_all(ingredients), kb):
        if additive.category is Category.AVOID:
            return Status.RED
        found_any = True
    return Status.YELLOW if found_any else Status.GREEN


def filter_healthy_products(products: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Keep products whose stored status is green."""
    healthy = []
    for p in products:
        status = p.get("status")
        value = status.value if isinstance(status, Status) else str(status or "").lower()
        if value == Status.GREEN.value:
            healthy.append(p)
    return healthy
