"""Additive knowledge base.

The table is loaded once at process start and handed to the matcher and
verdict code explicitly. Nothing here mutates after construction.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from services.additive_data import (
    ADDITIVE_DATABASE,
    ADDITIVE_KEYWORDS,
    INGREDIENT_ALIASES,
    KB_VERSION,
)

logger = logging.getLogger(__name__)

CODE_PATTERN = re.compile(r"E\d{3,4}[A-Z]?")

DUPLICATE_POLICIES = ("severest", "error")


class KnowledgeBaseError(ValueError):
    """Raised when the additive table is malformed or self-contradictory."""


class Category(str, Enum):
    AVOID = "avoid"
    CAUTION = "caution"
    SAFE = "safe"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    Category.SAFE: 0,
    Category.CAUTION: 1,
    Category.AVOID: 2,
}


def normalize_code(raw: Any) -> str:
    """'e 150d' -> 'E150D'."""
    if raw is None:
        return ""
    return re.sub(r"\s+", "", str(raw)).upper()


@dataclass(frozen=True)
class AdditiveRecord:
    code: str
    name: str
    category: Category
    description: str = ""
    health_concern: str | None = None
    common_uses: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "health_concern": self.health_concern,
            "common_uses": self.common_uses,
        }


@dataclass(frozen=True)
class KnowledgeBase:
    version: str
    records: Mapping[str, AdditiveRecord] = field(repr=False)
    aliases: tuple[tuple[str, str], ...] = field(repr=False)
    keywords: tuple[str, ...] = field(repr=False)

    def get(self, code: str) -> AdditiveRecord | None:
        return self.records.get(normalize_code(code))

    def is_dangerous(self, code: str) -> bool:
        record = self.get(code)
        return record is not None and record.category is Category.AVOID

    def is_caution(self, code: str) -> bool:
        record = self.get(code)
        return record is not None and record.category is Category.CAUTION

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_code(code) in self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[AdditiveRecord]:
        return iter(self.records.values())


def _parse_record(entry: Mapping[str, Any]) -> AdditiveRecord:
    code = normalize_code(entry.get("code"))
    if not CODE_PATTERN.fullmatch(code):
        raise KnowledgeBaseError(f"Invalid additive code: {entry.get('code')!r}")

    name = (entry.get("name") or "").strip()
    if not name:
        raise KnowledgeBaseError(f"Additive {code} has no name")

    try:
        category = Category(str(entry.get("category", "")).strip().lower())
    except ValueError:
        raise KnowledgeBaseError(
            f"Additive {code} has unknown category {entry.get('category')!r}"
        ) from None

    return AdditiveRecord(
        code=code,
        name=name,
        category=category,
        description=(entry.get("description") or "").strip(),
        health_concern=entry.get("health_concerns") or entry.get("health_concern") or None,
        common_uses=entry.get("common_uses") or None,
    )


def build_knowledge_base(
    entries: Iterable[Mapping[str, Any]],
    aliases: Mapping[str, str],
    keywords: Iterable[str],
    *,
    version: str = KB_VERSION,
    duplicate_policy: str = "severest",
) -> KnowledgeBase:
    """
    Validate raw table data and freeze it into a KnowledgeBase.

    Duplicate codes are resolved by ``duplicate_policy``:
      severest -> the most severe category wins (first record on a tie)
      error    -> KnowledgeBaseError
    """
    if duplicate_policy not in DUPLICATE_POLICIES:
        raise KnowledgeBaseError(f"Unknown duplicate policy: {duplicate_policy!r}")

    records: dict[str, AdditiveRecord] = {}
    for entry in entries:
        record = _parse_record(entry)
        existing = records.get(record.code)
        if existing is None:
            records[record.code] = record
            continue

        if duplicate_policy == "error":
            raise KnowledgeBaseError(f"Duplicate additive code: {record.code}")

        if record.category.severity > existing.category.severity:
            records[record.code] = record
        kept = records[record.code]
        logger.warning(
            f"Duplicate additive code {record.code} "
            f"({existing.category.value} vs {record.category.value}); keeping {kept.category.value}"
        )

    alias_pairs = []
    for alias, target in aliases.items():
        alias_key = (alias or "").strip().lower()
        code = normalize_code(target)
        if not alias_key:
            raise KnowledgeBaseError("Empty alias in alias table")
        if code not in records:
            raise KnowledgeBaseError(f"Alias {alias!r} points to unknown code {target!r}")
        alias_pairs.append((alias_key, code))

    keyword_list = []
    for keyword in keywords:
        kw = (keyword or "").strip().lower()
        if not kw:
            raise KnowledgeBaseError("Empty keyword in keyword list")
        if kw not in keyword_list:
            keyword_list.append(kw)

    return KnowledgeBase(
        version=str(version),
        records=MappingProxyType(records),
        aliases=tuple(alias_pairs),
        keywords=tuple(keyword_list),
    )


def load_knowledge_base(path: str | None = None, *, duplicate_policy: str = "severest") -> KnowledgeBase:
    """
    Load the bundled table, or a JSON file shaped like:
      {"version": "...", "additives": [{"code": ..., ...}], "aliases": {...}, "keywords": [...]}
    """
    if not path:
        kb = build_knowledge_base(
            ({"code": code, **data} for code, data in ADDITIVE_DATABASE.items()),
            INGREDIENT_ALIASES,
            ADDITIVE_KEYWORDS,
            version=KB_VERSION,
            duplicate_policy=duplicate_policy,
        )
        logger.info(f"Loaded bundled additive table v{kb.version} ({len(kb)} additives)")
        return kb

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise KnowledgeBaseError(f"Cannot read additive table {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("additives"), list):
        raise KnowledgeBaseError(f"Additive table {path} has no 'additives' list")

    kb = build_knowledge_base(
        data["additives"],
        data.get("aliases") or {},
        data.get("keywords") or [],
        version=data.get("version", "custom"),
        duplicate_policy=duplicate_policy,
    )
    logger.info(f"Loaded additive table v{kb.version} from {path} ({len(kb)} additives)")
    return kb
