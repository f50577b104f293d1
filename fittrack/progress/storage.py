# -*- coding: utf-8 -*-
"""Progress storage helpers (SQLite)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..errors import NotFoundError
from .models import ProgressEntry


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_entry(row) -> ProgressEntry:
    r = dict(row)
    return ProgressEntry(id=r["id"], date=r["date"], weight=r["weight"], training_time=r["training_time"])


def record_progress(*, user_id: str, entry: ProgressEntry) -> ProgressEntry:
    """Append a sample, or overwrite the user's sample with ``entry.id``."""
    with db_conn(settings.app_db_path) as conn:
        if entry.id:
            cur = conn.execute(
                "UPDATE progress SET date = COALESCE(?, date), weight = ?, training_time = ? WHERE id = ? AND user_id = ?",
                (entry.date, entry.weight, entry.training_time, entry.id, user_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError("progress", entry.id)
            row = conn.execute("SELECT * FROM progress WHERE id = ?", (entry.id,)).fetchone()
            return _row_to_entry(row)

        entry_id = str(uuid4())
        now = _utc_now()
        date = entry.date or now
        conn.execute(
            """
            INSERT INTO progress (id, user_id, date, weight, training_time, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (entry_id, user_id, date, entry.weight, entry.training_time, now),
        )
    return entry.model_copy(update={"id": entry_id, "date": date})


def list_progress(*, user_id: str) -> List[ProgressEntry]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM progress WHERE user_id = ? ORDER BY date ASC, created_at ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_entry(row) for row in rows]


def delete_progress(*, user_id: str, entry_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM progress WHERE id = ? AND user_id = ?", (entry_id, user_id))
        if cur.rowcount == 0:
            raise NotFoundError("progress", entry_id)
