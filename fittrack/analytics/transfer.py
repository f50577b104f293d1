# -*- coding: utf-8 -*-
"""Saved analysis export/import (JSON, XML, YAML).

An exported file has three parts: ``analysis`` (name, type, country, years),
``result`` (the computed statistics and texts, for reading) and ``data`` (the
aligned yearly values). Imports keep ``analysis`` and ``data`` only.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from ..errors import AnalysisImportError
from ..fileformats import (
    MEDIA_TYPES,
    ROOT_KEY,
    ExportedFile,
    check_format,
    dump_document,
    filename_slug,
    load_document,
)
from ..schema import error_fields
from .models import ImportedAnalysis, SavedAnalysis

ROOT_TAG = "savedAnalysis"

_LIST_TAGS = {"data": "point"}

_INFO_FIELDS = {"name", "analysis_type", "country_code", "country_name", "year_start", "year_end", "created_at"}


def analysis_document(analysis: SavedAnalysis) -> Dict[str, Any]:
    return {
        "analysis": analysis.model_dump(by_alias=True, mode="json", include=_INFO_FIELDS),
        "result": analysis.result.model_dump(
            by_alias=True,
            mode="json",
            exclude={"data", "analysis_type", "country_code", "year_start", "year_end"},
            exclude_none=True,
        ),
        "data": [p.model_dump(by_alias=True, mode="json") for p in analysis.result.data],
    }


def export_analysis(analysis: SavedAnalysis, fmt: str) -> ExportedFile:
    fmt = check_format(fmt)
    return ExportedFile(
        filename=f"analysis-{filename_slug(analysis.name, 'analysis')}.{fmt}",
        media_type=MEDIA_TYPES[fmt],
        content=dump_document(analysis_document(analysis), fmt, ROOT_TAG, _LIST_TAGS),
    )


def parse_analysis(content: bytes, fmt: str) -> ImportedAnalysis:
    data = load_document(content, fmt, _LIST_TAGS, AnalysisImportError)
    data.pop(ROOT_KEY, None)

    info = data.get("analysis")
    if not isinstance(info, dict):
        raise AnalysisImportError("missing analysis section")
    points = data.get("data")
    if points in (None, ""):
        points = []
    if not isinstance(points, list):
        raise AnalysisImportError("data must be a list")

    fields = {k: v for k, v in info.items() if k not in ("id", "_id", "createdAt", "data")}
    try:
        return ImportedAnalysis.model_validate(dict(fields, data=points))
    except PydanticValidationError as exc:
        reason = "; ".join(f"{key}: {msg}" for key, msg in error_fields(exc).items())
        raise AnalysisImportError(reason) from exc
