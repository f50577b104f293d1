# -*- coding: utf-8 -*-
"""Analytics — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schema import CamelModel
from .datasets import AnalysisType


class AnalysisRequest(CamelModel):
    analysis_type: AnalysisType
    country_code: str = Field(..., min_length=2, max_length=8)
    year_start: int = Field(..., ge=1900, le=2100)
    year_end: int = Field(..., ge=1900, le=2100)


class DataPoint(CamelModel):
    year: int
    health_value: float
    economic_value: float


class AnalysisResult(CamelModel):
    analysis_type: AnalysisType
    analysis_name: str
    country_code: str
    year_start: int
    year_end: int
    health_indicator: str
    economic_indicator: str
    correlation: float
    band: str
    direction: Optional[str] = None
    interpretation: str
    conclusion: str = ""
    trend: str
    trend_description: str
    data: List[DataPoint] = Field(default_factory=list)


class AnalysisCreateRequest(AnalysisRequest):
    name: str = Field(..., min_length=1, max_length=200)
    country_name: Optional[str] = None


class AnalysisRenameRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)


class SavedAnalysis(CamelModel):
    id: str
    name: str
    analysis_type: AnalysisType
    country_code: str
    country_name: str
    year_start: int
    year_end: int
    result: AnalysisResult
    created_at: str
    updated_at: str


class ImportedAnalysis(CamelModel):
    """The parts of an exported analysis that an import keeps."""

    name: str = Field(..., min_length=1, max_length=200)
    analysis_type: AnalysisType
    country_code: str = Field(..., min_length=2, max_length=8)
    country_name: str = ""
    year_start: int = Field(..., ge=1900, le=2100)
    year_end: int = Field(..., ge=1900, le=2100)
    data: List[DataPoint] = Field(default_factory=list)


class AnalysisImportResponse(CamelModel):
    analysis: SavedAnalysis
    format: str
    duplicate_strategy: str
    renamed: bool = False
    replaced: bool = False


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    pages: int


class AnalysisPage(CamelModel):
    items: List[SavedAnalysis]
    pagination: Pagination


class AnalysisTypeInfo(CamelModel):
    id: AnalysisType
    name: str
    health_indicator: str
    economic_indicator: str


class AvailableYears(CamelModel):
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    available_years: List[int] = Field(default_factory=list)
