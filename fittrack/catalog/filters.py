# -*- coding: utf-8 -*-
"""Pure filters over a fetched exercise snapshot."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import CatalogExercise


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    seen = set()
    out: List[str] = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def body_parts(snapshot: Sequence[CatalogExercise]) -> List[str]:
    return _distinct(e.body_part for e in snapshot)


def equipment_list(snapshot: Sequence[CatalogExercise]) -> List[str]:
    return _distinct(e.equipment for e in snapshot)


def targets(snapshot: Sequence[CatalogExercise]) -> List[str]:
    return _distinct(e.target for e in snapshot)


def _matches(value: Optional[str], wanted: Optional[str]) -> bool:
    if not wanted:
        return True
    return (value or "").lower() == wanted.strip().lower()


def filter_exercises(
    snapshot: Sequence[CatalogExercise],
    *,
    body_part: Optional[str] = None,
    equipment: Optional[str] = None,
    target: Optional[str] = None,
    query: Optional[str] = None,
) -> List[CatalogExercise]:
    """Narrow the snapshot; every given criterion must match (case-insensitive)."""
    needle = (query or "").strip().lower()
    return [
        e
        for e in snapshot
        if _matches(e.body_part, body_part)
        and _matches(e.equipment, equipment)
        and _matches(e.target, target)
        and (not needle or needle in e.name.lower())
    ]
