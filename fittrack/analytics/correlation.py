# -*- coding: utf-8 -*-
"""Pearson correlation, strength bands and trend description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..errors import InsufficientDataError
from ..i18n import translate


class Band(str, Enum):
    strong = "strong"
    moderate = "moderate"
    weak = "weak"
    very_weak = "very_weak"


class Trend(str, Enum):
    both_increase = "both_increase"
    both_decrease = "both_decrease"
    health_increase_economic_decrease = "health_increase_economic_decrease"
    health_decrease_economic_increase = "health_decrease_economic_increase"


@dataclass(frozen=True)
class AlignedPoint:
    year: int
    health: float
    economic: float


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson's r of two equal-length series.

    Raises ``InsufficientDataError`` when either series is empty, the lengths
    differ, or there are fewer than two points. A constant series yields 0.0.
    """
    if len(x) == 0 or len(y) == 0 or len(x) != len(y):
        raise InsufficientDataError(points=min(len(x), len(y)))
    if len(x) < 2:
        raise InsufficientDataError(points=len(x))

    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    dx = xs - xs.mean()
    dy = ys - ys.mean()
    denom = np.sqrt((dx * dx).sum() * (dy * dy).sum())
    if denom == 0:
        return 0.0
    r = float((dx * dy).sum() / denom)
    return max(-1.0, min(1.0, r))


def classify(r: float) -> Band:
    magnitude = abs(r)
    if magnitude >= 0.7:
        return Band.strong
    if magnitude >= 0.5:
        return Band.moderate
    if magnitude >= 0.3:
        return Band.weak
    return Band.very_weak


def direction(r: float) -> Optional[str]:
    if r > 0:
        return "positive"
    if r < 0:
        return "negative"
    return None


def interpret(r: float, locale: Optional[str] = None) -> str:
    sign = direction(r)
    if sign is None:
        return translate("correlation.none", locale)
    band = translate(f"band.{classify(r).value}", locale)
    return translate(f"correlation.{sign}", locale, band=band)


def conclude(analysis_type: str, r: float, trend: Trend, locale: Optional[str] = None) -> str:
    """What the sign of ``r`` means for this indicator pair, given the trend.

    Zero counts as positive.
    """
    sign = "negative" if r < 0 else "positive"
    return translate(f"interpretation.{analysis_type}.{sign}.{trend.value}", locale)


def merge_by_year(health: Dict[int, float], economic: Dict[int, float]) -> List[AlignedPoint]:
    """Pair the two series on the years they share, oldest first."""
    return [AlignedPoint(year, health[year], economic[year]) for year in sorted(set(health) & set(economic))]


def describe_trend(points: Sequence[AlignedPoint]) -> Trend:
    """Compare first and last aligned values of each series."""
    if len(points) < 2:
        raise InsufficientDataError(points=len(points))
    first, last = points[0], points[-1]
    health_up = last.health > first.health
    economic_up = last.economic > first.economic
    if health_up and economic_up:
        return Trend.both_increase
    if not health_up and not economic_up:
        return Trend.both_decrease
    if health_up:
        return Trend.health_increase_economic_decrease
    return Trend.health_decrease_economic_increase
