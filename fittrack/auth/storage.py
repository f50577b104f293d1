# -*- coding: utf-8 -*-
"""Auth — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(*, email: str, password_hash: str, username: Optional[str] = None) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = _utc_now()
    email_norm = email.lower().strip()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO users (id, email, username, password_hash, created_at) VALUES (?, ?, ?, ?, ?)",
            (user_id, email_norm, username, password_hash, now),
        )
    return {
        "id": user_id,
        "email": email_norm,
        "username": username,
        "password_hash": password_hash,
        "created_at": now,
    }


def update_user(*, user_id: str, email: Optional[str] = None, username: Optional[str] = None) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        if email is not None:
            conn.execute("UPDATE users SET email = ? WHERE id = ?", (email.lower().strip(), user_id))
        if username is not None:
            conn.execute("UPDATE users SET username = ? WHERE id = ?", (username.strip(), user_id))
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return dict(row)


def set_password_hash(*, user_id: str, password_hash: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute("UPDATE users SET password_hash = ? WHERE id = ?", (password_hash, user_id))


def delete_user(user_id: str) -> None:
    # Plans, progress and analyses go with the user (ON DELETE CASCADE).
    with db_conn(settings.app_db_path) as conn:
        conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
