# -*- coding: utf-8 -*-
"""Health (WHO GHO) and economic (World Bank) indicator sources.

Series are returned as ``{year: value}``. Responses are cached in-process for
``settings.dataset_cache_ttl`` seconds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

import httpx

from ..cache import cache_get_or_load
from ..config import settings
from ..http import get_json

logger = logging.getLogger(__name__)

Series = Dict[int, float]

_WHO_SEXES = {None, "SEX_BTSX"}
_WHO_AGE_GROUPS = {None, "AGEGROUP_YEARS18-PLUS", "AGEGROUP_YEARS30-69"}


class AnalysisType(str, Enum):
    obesity_vs_health_expenditure = "obesity_vs_health_expenditure"
    gdp_vs_physical_activity = "gdp_vs_physical_activity"
    death_probability_vs_urbanization = "death_probability_vs_urbanization"
    diabetes_vs_gini_index = "diabetes_vs_gini_index"


@dataclass(frozen=True)
class IndicatorPair:
    health: str  # WHO GHO indicator code
    economic: str  # World Bank indicator code


INDICATORS: Dict[AnalysisType, IndicatorPair] = {
    # Obesity among adults (BMI >= 30) vs current health expenditure (% of GDP)
    AnalysisType.obesity_vs_health_expenditure: IndicatorPair("NCD_BMI_30A", "SH.XPD.CHEX.GD.ZS"),
    # Insufficient physical activity among adults vs GDP per capita (USD)
    AnalysisType.gdp_vs_physical_activity: IndicatorPair("NCD_PAA", "NY.GDP.PCAP.CD"),
    # Probability of dying aged 30-70 from NCDs vs urban population (%)
    AnalysisType.death_probability_vs_urbanization: IndicatorPair("NCDMORT3070", "SP.URB.TOTL.IN.ZS"),
    # Raised fasting blood glucose vs Gini index
    AnalysisType.diabetes_vs_gini_index: IndicatorPair("NCD_GLUC_04", "SI.POV.GINI"),
}


class DatasetSource(Protocol):
    def health_series(self, indicator: str, country: str, start: int, end: int) -> Series: ...

    def economic_series(self, indicator: str, country: str, start: int, end: int) -> Series: ...

    def countries(self) -> List[Dict[str, Any]]: ...

    def available_years(self, analysis_type: AnalysisType, country: str) -> List[int]: ...


def _to_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_year(value: Any) -> Optional[int]:
    try:
        return int(str(value)[:4])
    except (TypeError, ValueError):
        return None


class PublicDatasetSource:
    """WHO GHO OData API + World Bank v2 API over httpx."""

    who_service = "WHO"
    world_bank_service = "World Bank"

    def __init__(self, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def _cached(self, key: tuple, loader):
        return cache_get_or_load("datasets", key, loader, settings.dataset_cache_ttl)

    # ---- WHO ----

    def _who_rows(self, indicator: str, odata_filter: str) -> List[Dict[str, Any]]:
        data = get_json(
            f"{settings.who_base_url.rstrip('/')}/{indicator}",
            service=self.who_service,
            params={"$filter": odata_filter},
            transport=self._transport,
        )
        rows = data.get("value") if isinstance(data, dict) else None
        return [r for r in rows or [] if isinstance(r, dict)]

    def health_series(self, indicator: str, country: str, start: int, end: int) -> Series:
        def load() -> Series:
            rows = self._who_rows(
                indicator,
                f"SpatialDim eq '{country}' and TimeDim ge {start} and TimeDim le {end}",
            )
            series: Series = {}
            for row in rows:
                if row.get("Dim1") not in _WHO_SEXES or row.get("Dim2") not in _WHO_AGE_GROUPS:
                    continue
                year = _to_year(row.get("TimeDim"))
                value = _to_float(row.get("NumericValue"))
                if year is not None and value is not None:
                    series[year] = value
            return series

        return self._cached(("who", indicator, country, start, end), load)

    def _who_years(self, indicator: str, country: str) -> List[int]:
        def load() -> List[int]:
            rows = self._who_rows(indicator, f"SpatialDim eq '{country}'")
            return sorted({y for y in (_to_year(r.get("TimeDim")) for r in rows) if y is not None})

        return self._cached(("who-years", indicator, country), load)

    def _who_countries(self) -> Dict[str, str]:
        def load() -> Dict[str, str]:
            data = get_json(
                f"{settings.who_base_url.rstrip('/')}/DIMENSION/COUNTRY/DimensionValues",
                service=self.who_service,
                transport=self._transport,
            )
            rows = data.get("value") if isinstance(data, dict) else None
            return {r["Code"]: r.get("Title") or r["Code"] for r in rows or [] if isinstance(r, dict) and r.get("Code")}

        return self._cached(("who-countries",), load)

    # ---- World Bank ----

    def _world_bank_rows(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        data = get_json(
            f"{settings.world_bank_base_url.rstrip('/')}/{path}",
            service=self.world_bank_service,
            params={"format": "json", **params},
            transport=self._transport,
        )
        # Responses are [metadata, rows]; an error is a one-element list.
        if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
            return []
        return [r for r in data[1] if isinstance(r, dict)]

    def economic_series(self, indicator: str, country: str, start: int, end: int) -> Series:
        def load() -> Series:
            rows = self._world_bank_rows(
                f"country/{country}/indicator/{indicator}",
                {"date": f"{start}:{end}", "per_page": 100},
            )
            series: Series = {}
            for row in rows:
                year = _to_year(row.get("date"))
                value = _to_float(row.get("value"))
                if year is not None and value is not None:
                    series[year] = value
            return series

        return self._cached(("wb", indicator, country, start, end), load)

    def _world_bank_years(self, indicator: str, country: str) -> List[int]:
        def load() -> List[int]:
            rows = self._world_bank_rows(f"country/{country}/indicator/{indicator}", {"per_page": 100})
            return sorted(
                {y for y in (_to_year(r.get("date")) for r in rows if r.get("value") is not None) if y is not None}
            )

        return self._cached(("wb-years", indicator, country), load)

    def _world_bank_countries(self) -> List[Dict[str, Any]]:
        def load() -> List[Dict[str, Any]]:
            rows = self._world_bank_rows("country", {"per_page": 300})
            return [
                {
                    "code": r.get("id"),
                    "name": r.get("name"),
                    "region": (r.get("region") or {}).get("value"),
                }
                for r in rows
                if r.get("id")
            ]

        return self._cached(("wb-countries",), load)

    # ---- Both ----

    def countries(self) -> List[Dict[str, Any]]:
        """Countries known to both sources."""
        who = self._who_countries()
        return [c for c in self._world_bank_countries() if c["code"] in who]

    def available_years(self, analysis_type: AnalysisType, country: str) -> List[int]:
        pair = INDICATORS[analysis_type]
        economic = set(self._world_bank_years(pair.economic, country))
        return [y for y in self._who_years(pair.health, country) if y in economic]


def get_dataset_source() -> DatasetSource:
    return PublicDatasetSource()
