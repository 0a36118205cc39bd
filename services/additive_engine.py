"""Additive detection engine.

Three passes over normalized ingredients, in this order:
  1. E-number pattern (known code -> table entry, unknown code -> caution placeholder)
  2. Alias names ("msg" -> E621), skipped when the code was already found
  3. Generic keywords ("koruyucu"), skipped when a detected name already mentions the keyword

Detections are deduplicated by code; the first pass to find a code wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from services.knowledge_base import AdditiveRecord, Category, KnowledgeBase
from services.segmenter import fold

# e / E at the start of a word, optional spaces, 3-4 digits (not 5), optional
# letter suffix that is not the start of a word: "e150d" -> E150D,
# "e471den" -> E471, "e 500gr" -> E500, "size 100g" -> nothing.
E_NUMBER_PATTERN = re.compile(r"(?<![^\W\d_])e\s*(\d{3,4})(?!\d)((?:[a-z](?![a-z]))?)", re.IGNORECASE)

GENERIC_CODE = "GENERIC"

UNKNOWN_NAME = "Bilinmeyen Katkı Maddesi"
UNKNOWN_DESCRIPTION = "Bu katkı maddesi hakkında bilgi bulunamadı."
GENERIC_NAME = "Genel Katkı Maddesi: {keyword}"
GENERIC_DESCRIPTION = "Spesifik katkı maddesi tespit edilemedi ancak genel anahtar kelime bulundu."


@dataclass(frozen=True)
class DetectedAdditive:
    code: str
    name: str
    category: Category
    description: str = ""
    health_impact: str | None = None

    @classmethod
    def from_record(cls, record: AdditiveRecord) -> "DetectedAdditive":
        return cls(
            code=record.code,
            name=record.name,
            category=record.category,
            description=record.description,
            health_impact=record.health_concern,
        )

    @classmethod
    def unknown(cls, code: str) -> "DetectedAdditive":
        return cls(code=code, name=UNKNOWN_NAME, category=Category.CAUTION, description=UNKNOWN_DESCRIPTION)

    @classmethod
    def generic(cls, keyword: str) -> "DetectedAdditive":
        return cls(
            code=GENERIC_CODE,
            name=GENERIC_NAME.format(keyword=keyword),
            category=Category.CAUTION,
            description=GENERIC_DESCRIPTION,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "health_impact": self.health_impact,
        }


def find_e_numbers(text: str) -> list[str]:
    """All distinct E-numbers in text, uppercased, in order of appearance."""
    codes: list[str] = []
    for m in E_NUMBER_PATTERN.finditer(text):
        code = f"E{m.group(1)}{m.group(2)}".upper()
        if code not in codes:
            codes.append(code)
    return codes


def iter_additives(ingredients: Iterable[str], kb: KnowledgeBase) -> Iterator[DetectedAdditive]:
    """
    Yield detections lazily in pass order.

    ``ingredients`` must already be normalized (see segmenter.normalize_ingredient).
    """
    ingredients = list(ingredients)
    folded = [fold(i) for i in ingredients]
    seen_codes: set[str] = set()
    seen_names: list[str] = []

    def emit(additive: DetectedAdditive) -> DetectedAdditive:
        seen_codes.add(additive.code)
        seen_names.append(fold(additive.name))
        return additive

    # Pass 1: E-numbers
    for ingredient in ingredients:
        for code in find_e_numbers(ingredient):
            if code in seen_codes:
                continue
            record = kb.get(code)
            yield emit(DetectedAdditive.from_record(record) if record else DetectedAdditive.unknown(code))

    # Pass 2: aliases
    for ingredient in folded:
        for alias, code in kb.aliases:
            if fold(alias) in ingredient and code not in seen_codes:
                record = kb.get(code)
                if record is not None:
                    yield emit(DetectedAdditive.from_record(record))

    # Pass 3: generic keywords
    for ingredient in folded:
        for keyword in kb.keywords:
            key = fold(keyword)
            if key in ingredient and not any(key in name for name in seen_names):
                yield emit(DetectedAdditive.generic(keyword))


def match_additives(ingredients: Iterable[str], kb: KnowledgeBase) -> list[DetectedAdditive]:
    return list(iter_additives(ingredients, kb))
