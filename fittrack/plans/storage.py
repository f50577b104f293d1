# -*- coding: utf-8 -*-
"""Plan storage helpers (SQLite).

A plan is one row; its Day/Item tree lives in ``days_json`` so every write of
a plan is a single-row write. The active plan of each kind is a pointer row
in ``active_plans``.
"""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..errors import DuplicateNameError, NotFoundError
from .document import normalize
from .duplicates import normalize_name
from .models import PLAN_MODELS, Plan, PlanKind

_SELECT_PLAN = """
    SELECT p.*, (a.plan_id IS NOT NULL) AS is_active
    FROM plans p
    LEFT JOIN active_plans a
        ON a.user_id = p.user_id AND a.kind = p.kind AND a.plan_id = p.id
"""


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_plan(row: sqlite3.Row) -> Plan:
    r = dict(row)
    kind = PlanKind(r["kind"])
    days = json.loads(r.get("days_json") or "[]")
    plan = PLAN_MODELS[kind].model_validate(
        {
            "id": r["id"],
            "name": r["name"],
            "description": r.get("description") or "",
            "is_active": bool(r.get("is_active")),
            "days": days,
            "date_created": r.get("created_at"),
            "date_updated": r.get("updated_at"),
        }
    )
    return normalize(plan)


def _days_json(plan: Plan) -> str:
    days = [day.model_dump(by_alias=True, mode="json") for day in plan.days]
    return json.dumps(days, ensure_ascii=False)


def list_plans(*, user_id: str, kind: PlanKind) -> List[Plan]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            _SELECT_PLAN + " WHERE p.user_id = ? AND p.kind = ? ORDER BY p.created_at ASC",
            (user_id, kind.value),
        ).fetchall()
    return [_row_to_plan(row) for row in rows]


def plan_names(*, user_id: str, kind: PlanKind) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT id, name FROM plans WHERE user_id = ? AND kind = ?",
            (user_id, kind.value),
        ).fetchall()
    return [dict(row) for row in rows]


def get_plan(*, user_id: str, kind: PlanKind, plan_id: str) -> Optional[Plan]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            _SELECT_PLAN + " WHERE p.id = ? AND p.user_id = ? AND p.kind = ?",
            (plan_id, user_id, kind.value),
        ).fetchone()
    return _row_to_plan(row) if row else None


def _set_active(conn: sqlite3.Connection, *, user_id: str, kind: PlanKind, plan_id: str, now: str) -> None:
    conn.execute(
        """
        INSERT INTO active_plans (user_id, kind, plan_id, updated_at) VALUES (?, ?, ?, ?)
        ON CONFLICT(user_id, kind) DO UPDATE SET plan_id = excluded.plan_id, updated_at = excluded.updated_at
        """,
        (user_id, kind.value, plan_id, now),
    )


def insert_plan(*, user_id: str, plan: Plan, activate: bool = False) -> Plan:
    plan_id = str(uuid4())
    now = _utc_now()
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                """
                INSERT INTO plans (
                    id, user_id, kind, name, name_norm, description, days_json, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    plan_id,
                    user_id,
                    plan.kind.value,
                    plan.name,
                    normalize_name(plan.name),
                    plan.description,
                    _days_json(plan),
                    now,
                    now,
                ),
            )
            if activate:
                _set_active(conn, user_id=user_id, kind=plan.kind, plan_id=plan_id, now=now)
    except sqlite3.IntegrityError as exc:
        raise DuplicateNameError(plan.name) from exc

    stored = get_plan(user_id=user_id, kind=plan.kind, plan_id=plan_id)
    assert stored is not None
    return stored


def replace_plan(*, user_id: str, plan_id: str, plan: Plan, activate: Optional[bool] = None) -> Plan:
    """Overwrite name, description and days of ``plan_id`` in one row write.

    ``activate=None`` leaves the active pointer as it is.
    """
    now = _utc_now()
    try:
        with db_conn(settings.app_db_path) as conn:
            cur = conn.execute(
                """
                UPDATE plans
                SET name = ?, name_norm = ?, description = ?, days_json = ?, updated_at = ?
                WHERE id = ? AND user_id = ? AND kind = ?
                """,
                (
                    plan.name,
                    normalize_name(plan.name),
                    plan.description,
                    _days_json(plan),
                    now,
                    plan_id,
                    user_id,
                    plan.kind.value,
                ),
            )
            if cur.rowcount == 0:
                raise NotFoundError("plan", plan_id)
            if activate:
                _set_active(conn, user_id=user_id, kind=plan.kind, plan_id=plan_id, now=now)
            elif activate is False:
                conn.execute(
                    "DELETE FROM active_plans WHERE user_id = ? AND kind = ? AND plan_id = ?",
                    (user_id, plan.kind.value, plan_id),
                )
    except sqlite3.IntegrityError as exc:
        raise DuplicateNameError(plan.name) from exc

    stored = get_plan(user_id=user_id, kind=plan.kind, plan_id=plan_id)
    assert stored is not None
    return stored


def delete_plan(*, user_id: str, kind: PlanKind, plan_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM plans WHERE id = ? AND user_id = ? AND kind = ?",
            (plan_id, user_id, kind.value),
        )
        if cur.rowcount == 0:
            raise NotFoundError("plan", plan_id)


def activate_plan(*, user_id: str, kind: PlanKind, plan_id: str) -> Plan:
    """Point the (user, kind) active slot at ``plan_id``; one statement, one transaction."""
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT id FROM plans WHERE id = ? AND user_id = ? AND kind = ?",
            (plan_id, user_id, kind.value),
        ).fetchone()
        if not row:
            raise NotFoundError("plan", plan_id)
        _set_active(conn, user_id=user_id, kind=kind, plan_id=plan_id, now=_utc_now())

    stored = get_plan(user_id=user_id, kind=kind, plan_id=plan_id)
    assert stored is not None
    return stored
