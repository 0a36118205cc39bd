"""Additive score (0-100) for ranking and comparing products.

Independent of the traffic-light verdict; use verdict.decide for status.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from services.additive_engine import DetectedAdditive
from services.knowledge_base import Category

PENALTIES = {
    Category.AVOID: 30,
    Category.CAUTION: 15,
    Category.SAFE: 5,
}


def _category_of(additive: DetectedAdditive | Mapping[str, Any]) -> Category:
    # Stored / API-shaped additives are dicts with a "category" string.
    raw = additive.get("category") if isinstance(additive, Mapping) else additive.category
    if isinstance(raw, Category):
        return raw
    return Category(str(raw or "").strip().lower())


def score_additives(additives: Iterable[DetectedAdditive | Mapping[str, Any]]) -> int:
    """
    Score a product by its additives (higher is better).

    Args:
        additives: detected additives, or their to_dict() form

    Returns:
        100 minus the per-category penalties, never below 0
    """
    score = 100
    for additive in additives:
        score -= PENALTIES[_category_of(additive)]
    return max(0, score)


def get_score_label(score):
    """Get label for score display."""
    if score >= 80:
        return 'excellent'
    elif score >= 60:
        return 'good'
    elif score >= 40:
        return 'moderate'
    else:
        return 'poor'


def _product_score(product: Mapping[str, Any]) -> int:
    return score_additives(product.get("additives") or [])


def compare_products(product1, product2):
    """
    Compare two products by additive score.

    Args:
        product1: mapping with 'name' and 'additives'
        product2: mapping with 'name' and 'additives'

    Returns:
        Comparison result dictionary
    """
    score1 = _product_score(product1)
    score2 = _product_score(product2)

    difference = abs(score1 - score2)
    better = None

    if score1 > score2:
        better = product1.get('name')
        message = f"{better} is better by {difference} points"
    elif score2 > score1:
        better = product2.get('name')
        message = f"{better} is better by {difference} points"
    else:
        message = "Both products are equally suitable"

    return {
        'better_product': better,
        'score_difference': difference,
        'message': message
    }


def rank_products(products: Iterable[Mapping[str, Any]], *, limit: int | None = None) -> list[dict[str, Any]]:
    """Best score first; ties keep input order."""
    ranked = []
    for p in products:
        score = _product_score(p)
        ranked.append({**p, "score": score, "label": get_score_label(score)})
    ranked.sort(key=lambda x: -x["score"])
    return ranked[:limit] if limit is not None else ranked
