# -*- coding: utf-8 -*-
"""Saved analyses storage helpers (SQLite)."""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from typing import Dict, List
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..errors import NotFoundError
from .models import AnalysisPage, AnalysisResult, Pagination, SavedAnalysis


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _result_json(result: AnalysisResult) -> str:
    return json.dumps(result.model_dump(by_alias=True, mode="json"), ensure_ascii=False)


def _row_to_analysis(row) -> SavedAnalysis:
    r = dict(row)
    return SavedAnalysis(
        id=r["id"],
        name=r["name"],
        analysis_type=r["analysis_type"],
        country_code=r["country_code"],
        country_name=r["country_name"],
        year_start=r["year_start"],
        year_end=r["year_end"],
        result=AnalysisResult.model_validate_json(r["result_json"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


def create_analysis(*, user_id: str, name: str, country_name: str, result: AnalysisResult) -> SavedAnalysis:
    analysis_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO analyses (
                id, user_id, name, analysis_type, country_code, country_name,
                year_start, year_end, result_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                analysis_id,
                user_id,
                name.strip(),
                result.analysis_type.value,
                result.country_code,
                country_name,
                result.year_start,
                result.year_end,
                _result_json(result),
                now,
                now,
            ),
        )
        row = conn.execute("SELECT * FROM analyses WHERE id = ?", (analysis_id,)).fetchone()
    return _row_to_analysis(row)


def list_analyses(*, user_id: str, page: int = 1, limit: int = 10) -> AnalysisPage:
    offset = (page - 1) * limit
    with db_conn(settings.app_db_path) as conn:
        total = conn.execute("SELECT COUNT(*) FROM analyses WHERE user_id = ?", (user_id,)).fetchone()[0]
        rows = conn.execute(
            "SELECT * FROM analyses WHERE user_id = ? ORDER BY created_at DESC LIMIT ? OFFSET ?",
            (user_id, limit, offset),
        ).fetchall()
    return AnalysisPage(
        items=[_row_to_analysis(row) for row in rows],
        pagination=Pagination(total=total, page=page, limit=limit, pages=math.ceil(total / limit)),
    )


def get_analysis(*, user_id: str, analysis_id: str) -> SavedAnalysis:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM analyses WHERE id = ? AND user_id = ?",
            (analysis_id, user_id),
        ).fetchone()
    if not row:
        raise NotFoundError("analysis", analysis_id)
    return _row_to_analysis(row)

def analysis_names(*, user_id: str) -> List[Dict[str, str]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute("SELECT id, name FROM analyses WHERE user_id = ?", (user_id,)).fetchall()
    return [{"id": row["id"], "name": row["name"]} for row in rows]


def replace_analysis(
    *, user_id: str, analysis_id: str, name: str, country_name: str, result: AnalysisResult
) -> SavedAnalysis:
    """Overwrite an analysis in place; its id and creation time are kept."""
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            UPDATE analyses
            SET name = ?, analysis_type = ?, country_code = ?, country_name = ?,
                year_start = ?, year_end = ?, result_json = ?, updated_at = ?
            WHERE id = ? AND user_id = ?
            """,
            (
                name.strip(),
                result.analysis_type.value,
                result.country_code,
                country_name,
                result.year_start,
                result.year_end,
                _result_json(result),
                _utc_now(),
                analysis_id,
                user_id,
            ),
        )
        if cur.rowcount == 0:
            raise NotFoundError("analysis", analysis_id)
    return get_analysis(user_id=user_id, analysis_id=analysis_id)



def rename_analysis(*, user_id: str, analysis_id: str, name: str) -> SavedAnalysis:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE analyses SET name = ?, updated_at = ? WHERE id = ? AND user_id = ?",
            (name.strip(), _utc_now(), analysis_id, user_id),
        )
        if cur.rowcount == 0:
            raise NotFoundError("analysis", analysis_id)
    return get_analysis(user_id=user_id, analysis_id=analysis_id)


def delete_analysis(*, user_id: str, analysis_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM analyses WHERE id = ? AND user_id = ?", (analysis_id, user_id))
        if cur.rowcount == 0:
            raise NotFoundError("analysis", analysis_id)
