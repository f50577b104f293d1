# -*- coding: utf-8 -*-
"""Run, import and export health-vs-economic correlation analyses."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from fastapi import UploadFile

from ..errors import AnalysisImportError, InsufficientDataError, ValidationError
from ..fileformats import ExportedFile, detect_format
from ..i18n import translate
from ..plans.duplicates import DuplicateStrategy, apply_import_strategy
from ..uploads import read_upload
from . import storage
from .correlation import AlignedPoint, classify, conclude, describe_trend, direction, interpret, merge_by_year, pearson
from .datasets import INDICATORS, AnalysisType, DatasetSource
from .models import AnalysisImportResponse, AnalysisResult, DataPoint
from .transfer import export_analysis, parse_analysis

logger = logging.getLogger(__name__)


def summarize(
    analysis_type: AnalysisType,
    country_code: str,
    year_start: int,
    year_end: int,
    points: Sequence[AlignedPoint],
    locale: Optional[str] = None,
) -> AnalysisResult:
    """Correlation, band, trend and localized texts for aligned points."""
    if len(points) < 2:
        raise InsufficientDataError(points=len(points))

    pair = INDICATORS[analysis_type]
    r = pearson([p.health for p in points], [p.economic for p in points])
    trend = describe_trend(points)
    return AnalysisResult(
        analysis_type=analysis_type,
        analysis_name=translate(f"analysis.{analysis_type.value}", locale),
        country_code=country_code,
        year_start=year_start,
        year_end=year_end,
        health_indicator=pair.health,
        economic_indicator=pair.economic,
        correlation=r,
        band=classify(r).value,
        direction=direction(r),
        interpretation=interpret(r, locale),
        conclusion=conclude(analysis_type.value, r, trend, locale),
        trend=trend.value,
        trend_description=translate(f"trend.{trend.value}", locale),
        data=[DataPoint(year=p.year, health_value=p.health, economic_value=p.economic) for p in points],
    )


def run_analysis(
    source: DatasetSource,
    analysis_type: AnalysisType,
    country_code: str,
    year_start: int,
    year_end: int,
    locale: Optional[str] = None,
) -> AnalysisResult:
    if year_start > year_end:
        raise ValidationError(fields={"yearStart": "must not be after yearEnd"})

    country = country_code.strip().upper()
    pair = INDICATORS[analysis_type]
    health = source.health_series(pair.health, country, year_start, year_end)
    economic = source.economic_series(pair.economic, country, year_start, year_end)

    result = summarize(analysis_type, country, year_start, year_end, merge_by_year(health, economic), locale)
    logger.info(
        "Analysis %s for %s %s-%s: r=%.3f over %s years",
        analysis_type.value,
        country,
        year_start,
        year_end,
        result.correlation,
        len(result.data),
    )
    return result


def export_analysis_file(*, user_id: str, analysis_id: str, fmt: str) -> ExportedFile:
    return export_analysis(storage.get_analysis(user_id=user_id, analysis_id=analysis_id), fmt)


def import_analysis(
    *,
    user_id: str,
    upload: UploadFile,
    strategy: DuplicateStrategy,
    locale: Optional[str] = None,
) -> AnalysisImportResponse:
    """Store an exported analysis as a new one (or over a same-named one with ``replace``).

    Statistics and texts are derived again from the file's data points.
    """
    fmt = detect_format(upload.filename)
    imported = parse_analysis(read_upload(upload), fmt)
    if imported.year_start > imported.year_end:
        raise AnalysisImportError("yearStart is after yearEnd")
    country = imported.country_code.strip().upper()
    ordered = sorted(imported.data, key=lambda p: p.year)
    points = [AlignedPoint(p.year, p.health_value, p.economic_value) for p in ordered]
    result = summarize(imported.analysis_type, country, imported.year_start, imported.year_end, points, locale)
    country_name = imported.country_name.strip() or country

    decision = apply_import_strategy(
        storage.analysis_names(user_id=user_id), imported.name, strategy, locale, resource="analysis"
    )
    if decision.replace_id:
        stored = storage.replace_analysis(
            user_id=user_id,
            analysis_id=decision.replace_id,
            name=decision.name,
            country_name=country_name,
            result=result,
        )
    else:
        stored = storage.create_analysis(
            user_id=user_id, name=decision.name, country_name=country_name, result=result
        )

    logger.info(
        "Imported analysis %s from %s (strategy=%s, renamed=%s, replaced=%s)",
        stored.id,
        fmt,
        strategy.value,
        decision.renamed,
        bool(decision.replace_id),
    )
    return AnalysisImportResponse(
        analysis=stored,
        format=fmt,
        duplicate_strategy=strategy.value,
        renamed=decision.renamed,
        replaced=bool(decision.replace_id),
    )
