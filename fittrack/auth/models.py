# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8, max_length=128)
    username: Optional[str] = Field(default=None, max_length=64)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class UserPublic(BaseModel):
    id: str
    email: str
    username: Optional[str] = None
    created_at: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str


class ProfileUpdateRequest(BaseModel):
    email: Optional[str] = Field(default=None, min_length=3, max_length=254)
    username: Optional[str] = Field(default=None, max_length=64)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, max_length=128, alias="currentPassword")
    new_password: str = Field(..., min_length=8, max_length=128, alias="newPassword")

    model_config = {"populate_by_name": True}
