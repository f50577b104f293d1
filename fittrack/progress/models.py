# -*- coding: utf-8 -*-
"""Progress sample models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ..schema import CamelModel


class ProgressEntry(CamelModel):
    """A stored sample. Storage applies no range checks."""

    id: Optional[str] = None
    date: Optional[str] = None
    weight: float
    training_time: float


class ProgressWriteRequest(CamelModel):
    date: Optional[str] = None
    weight: float = Field(..., ge=30, le=150, description="kg")
    training_time: float = Field(..., ge=1, le=240, description="minutes")

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        try:
            datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError("date must be an ISO 8601 date or datetime") from exc
        return value.strip()

    def to_entry(self, entry_id: Optional[str] = None) -> ProgressEntry:
        return ProgressEntry(id=entry_id, date=self.date, weight=self.weight, training_time=self.training_time)
