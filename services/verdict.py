"""Traffic-light verdict over detected additives.

Threshold policy, not a weighted score:
  no additives            -> green
  any avoid-category item -> red
  anything else           -> yellow
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Iterable

from services.additive_engine import DetectedAdditive
from services.knowledge_base import Category


class Status(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


RECOMMENDATIONS = {
    "tr": {
        Status.RED: (
            "Bu üründe tehlikeli katkı maddeleri tespit edildi.",
            "Sağlığınız için bu ürünü tüketmemenizi öneriyoruz.",
            "Harita üzerinden yakınınızdaki katkısız alternatiflere göz atın.",
        ),
        Status.YELLOW: (
            "Bu üründe orta düzey katkı maddeleri bulunmaktadır.",
            "Mümkünse daha doğal alternatifler tercih edin.",
        ),
        Status.GREEN: (
            "Harika! Bu ürün katkı maddesi içermiyor.",
            "Sağlıklı beslenme için doğru seçim yaptınız.",
        ),
    },
    "en": {
        Status.RED: (
            "Dangerous additives were detected in this product.",
            "We recommend not consuming this product.",
            "Check the map for additive-free alternatives near you.",
        ),
        Status.YELLOW: (
            "This product contains additives of moderate concern.",
            "Prefer more natural alternatives when possible.",
        ),
        Status.GREEN: (
            "Great! This product contains no additives.",
            "A good choice for healthy eating.",
        ),
    },
}

DEFAULT_LOCALE = "tr"


@dataclass(frozen=True)
class AdditiveCounts:
    total: int = 0
    dangerous: int = 0
    caution: int = 0
    safe: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def count_additives(additives: Iterable[DetectedAdditive]) -> AdditiveCounts:
    tally = {Category.AVOID: 0, Category.CAUTION: 0, Category.SAFE: 0}
    for additive in additives:
        tally[additive.category] += 1
    return AdditiveCounts(
        total=sum(tally.values()),
        dangerous=tally[Category.AVOID],
        caution=tally[Category.CAUTION],
        safe=tally[Category.SAFE],
    )


def status_from_counts(counts: AdditiveCounts) -> Status:
    if counts.total == 0:
        return Status.GREEN
    if counts.dangerous > 0:
        return Status.RED
    return Status.YELLOW


def get_recommendations(status: Status, locale: str = DEFAULT_LOCALE) -> list[str]:
    table = RECOMMENDATIONS.get(locale) or RECOMMENDATIONS[DEFAULT_LOCALE]
    return list(table[status])


def decide(additives: Iterable[DetectedAdditive], locale: str = DEFAULT_LOCALE) -> tuple[Status, list[str]]:
    status = status_from_counts(count_additives(additives))
    return status, get_recommendations(status, locale)
