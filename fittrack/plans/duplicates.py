# -*- coding: utf-8 -*-
"""Name collision policy for plan writes and for plan and analysis imports."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from ..errors import DuplicateNameError
from ..i18n import translate

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s+")


def normalize_name(name: Optional[str]) -> str:
    return _WS_RE.sub(" ", (name or "").strip()).lower()


def _field(plan: Any, name: str) -> Any:
    if isinstance(plan, dict):
        return plan.get(name)
    return getattr(plan, name, None)


@dataclass(frozen=True)
class Resolution:
    allowed: bool
    conflict_id: Optional[str] = None


def resolve(existing: Iterable[Any], candidate_name: str, exclude_id: Optional[str] = None) -> Resolution:
    """Check ``candidate_name`` against ``existing`` plans (dicts or models).

    The plan being edited (``exclude_id``) never conflicts with itself.
    """
    wanted = normalize_name(candidate_name)
    for plan in existing:
        plan_id = _field(plan, "id")
        if exclude_id is not None and plan_id == exclude_id:
            continue
        if normalize_name(_field(plan, "name")) == wanted:
            return Resolution(allowed=False, conflict_id=plan_id)
    return Resolution(allowed=True)


def ensure_unique(existing: Iterable[Any], candidate_name: str, exclude_id: Optional[str] = None) -> None:
    resolution = resolve(existing, candidate_name, exclude_id)
    if not resolution.allowed:
        logger.info("Rejected duplicate plan name %r (conflicts with %s)", candidate_name, resolution.conflict_id)
        raise DuplicateNameError(candidate_name, resolution.conflict_id)


class DuplicateStrategy(str, Enum):
    reject = "reject"
    prefix = "prefix"
    replace = "replace"


@dataclass(frozen=True)
class ImportDecision:
    name: str
    replace_id: Optional[str] = None
    renamed: bool = False


def prefixed_name(name: str, attempt: int, locale: Optional[str] = None) -> str:
    """Name of the ``attempt``-th copy of ``name``.

    ``name`` is kept whole, earlier copy prefixes included, so importing
    "Copy - X" over an existing one yields "Copy - Copy - X".
    """
    prefix = translate("import.copy_prefix", locale)
    if attempt <= 1:
        return f"{prefix} - {name}"
    return f"{prefix} ({attempt}) - {name}"


def apply_import_strategy(
    existing: Iterable[Any],
    name: str,
    strategy: DuplicateStrategy,
    locale: Optional[str] = None,
    resource: str = "plan",
) -> ImportDecision:
    existing = list(existing)
    resolution = resolve(existing, name)
    if resolution.allowed:
        return ImportDecision(name=name)

    if strategy == DuplicateStrategy.reject:
        logger.info("Import rejected: %s name %r already used by %s", resource, name, resolution.conflict_id)
        raise DuplicateNameError(name, resolution.conflict_id, resource=resource)

    if strategy == DuplicateStrategy.replace:
        return ImportDecision(name=name, replace_id=resolution.conflict_id)

    attempt = 1
    while True:
        candidate = prefixed_name(name, attempt, locale)
        if resolve(existing, candidate).allowed:
            return ImportDecision(name=candidate, renamed=True)
        attempt += 1
