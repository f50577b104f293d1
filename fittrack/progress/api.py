# -*- coding: utf-8 -*-
"""Progress endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ..auth.security import get_current_user
from .models import ProgressEntry, ProgressWriteRequest
from .storage import delete_progress, list_progress, record_progress

router = APIRouter(prefix="/api/progress", tags=["Progress"])


@router.get("", response_model=List[ProgressEntry], summary="List progress samples (oldest first)")
def get_progress(user: dict = Depends(get_current_user)):
    return list_progress(user_id=user["id"])


@router.post("", response_model=ProgressEntry, status_code=status.HTTP_201_CREATED, summary="Record a sample")
def add_progress(request: ProgressWriteRequest, user: dict = Depends(get_current_user)):
    return record_progress(user_id=user["id"], entry=request.to_entry())


@router.put("/{entry_id}", response_model=ProgressEntry, summary="Update a sample")
def update_progress(entry_id: str, request: ProgressWriteRequest, user: dict = Depends(get_current_user)):
    return record_progress(user_id=user["id"], entry=request.to_entry(entry_id))


@router.delete("/{entry_id}", summary="Delete a sample")
def remove_progress(entry_id: str, user: dict = Depends(get_current_user)):
    delete_progress(user_id=user["id"], entry_id=entry_id)
    return {"status": "ok"}
