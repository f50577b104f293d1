# -*- coding: utf-8 -*-
"""Analytics endpoints: dataset lookups, ad-hoc runs, saved analyses and their files."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from ..auth.security import get_current_user
from ..fileformats import content_disposition
from ..i18n import get_locale, translate
from ..plans.duplicates import DuplicateStrategy
from .datasets import INDICATORS, AnalysisType, DatasetSource, get_dataset_source
from .models import (
    AnalysisCreateRequest,
    AnalysisImportResponse,
    AnalysisPage,
    AnalysisRenameRequest,
    AnalysisRequest,
    AnalysisResult,
    AnalysisTypeInfo,
    AvailableYears,
    SavedAnalysis,
)
from .service import export_analysis_file, import_analysis, run_analysis
from .storage import create_analysis, delete_analysis, get_analysis, list_analyses, rename_analysis

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])
analyses_router = APIRouter(prefix="/api/analyses", tags=["Analyses"])


@router.get("/analysis-types", response_model=List[AnalysisTypeInfo], summary="List analysis types")
def analysis_types(locale: str = Depends(get_locale)):
    return [
        AnalysisTypeInfo(
            id=kind,
            name=translate(f"analysis.{kind.value}", locale),
            health_indicator=pair.health,
            economic_indicator=pair.economic,
        )
        for kind, pair in INDICATORS.items()
    ]


@router.get("/countries", summary="Countries covered by both sources")
def countries(source: DatasetSource = Depends(get_dataset_source)) -> List[Dict[str, Any]]:
    return source.countries()


@router.get("/available-years", response_model=AvailableYears, summary="Years with data in both sources")
def available_years(
    country_code: str = Query(..., alias="countryCode"),
    analysis_type: AnalysisType = Query(..., alias="analysisType"),
    source: DatasetSource = Depends(get_dataset_source),
):
    years = source.available_years(analysis_type, country_code.strip().upper())
    if not years:
        return AvailableYears()
    return AvailableYears(min_year=years[0], max_year=years[-1], available_years=years)


@router.post("/run", response_model=AnalysisResult, summary="Run an analysis without saving it")
def run(
    request: AnalysisRequest,
    source: DatasetSource = Depends(get_dataset_source),
    locale: str = Depends(get_locale),
):
    return run_analysis(
        source, request.analysis_type, request.country_code, request.year_start, request.year_end, locale
    )


@analyses_router.get("", response_model=AnalysisPage, summary="List saved analyses")
def list_saved(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    user: dict = Depends(get_current_user),
):
    return list_analyses(user_id=user["id"], page=page, limit=limit)


@analyses_router.post(
    "", response_model=SavedAnalysis, status_code=status.HTTP_201_CREATED, summary="Run and save an analysis"
)
def create_saved(
    request: AnalysisCreateRequest,
    user: dict = Depends(get_current_user),
    source: DatasetSource = Depends(get_dataset_source),
    locale: str = Depends(get_locale),
):
    result = run_analysis(
        source, request.analysis_type, request.country_code, request.year_start, request.year_end, locale
    )
    return create_analysis(
        user_id=user["id"],
        name=request.name,
        country_name=request.country_name or result.country_code,
        result=result,
    )


@analyses_router.post("/import", response_model=AnalysisImportResponse, summary="Import an exported analysis file")
def import_saved(
    file: UploadFile = File(...),
    duplicate_strategy: DuplicateStrategy = Form(DuplicateStrategy.prefix, alias="duplicateStrategy"),
    user: dict = Depends(get_current_user),
    locale: str = Depends(get_locale),
):
    return import_analysis(user_id=user["id"], upload=file, strategy=duplicate_strategy, locale=locale)


@analyses_router.get("/{analysis_id}", response_model=SavedAnalysis, summary="Get a saved analysis")
def get_saved(analysis_id: str, user: dict = Depends(get_current_user)):
    return get_analysis(user_id=user["id"], analysis_id=analysis_id)


@analyses_router.put("/{analysis_id}", response_model=SavedAnalysis, summary="Rename a saved analysis")
def rename_saved(analysis_id: str, request: AnalysisRenameRequest, user: dict = Depends(get_current_user)):
    return rename_analysis(user_id=user["id"], analysis_id=analysis_id, name=request.name)


@analyses_router.delete("/{analysis_id}", summary="Delete a saved analysis")
def delete_saved(analysis_id: str, user: dict = Depends(get_current_user)):
    delete_analysis(user_id=user["id"], analysis_id=analysis_id)
    return {"status": "ok"}


@analyses_router.get("/{analysis_id}/export", summary="Export a saved analysis")
def export_saved(
    analysis_id: str,
    fmt: str = Query(default="json", alias="format", description="json | xml | yaml"),
    user: dict = Depends(get_current_user),
):
    exported = export_analysis_file(user_id=user["id"], analysis_id=analysis_id, fmt=fmt)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": content_disposition(exported.filename)},
    )

