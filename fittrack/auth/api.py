# -*- coding: utf-8 -*-
"""Auth and profile endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from ..catalog.cache import catalog_cache
from ..config import settings
from ..errors import AuthError
from .models import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserPublic,
)
from .security import TOKEN_COOKIE_NAME, create_access_token, get_current_user, hash_password, verify_password
from .storage import create_user, delete_user, get_user_by_email, set_password_hash, update_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])
profile_router = APIRouter(prefix="/api/profile", tags=["Profile"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(id=row["id"], email=row["email"], username=row.get("username"), created_at=row["created_at"])


def _set_auth_cookie(resp: Response, token: str) -> None:
    max_age = int(settings.token_ttl_days) * 24 * 60 * 60
    resp.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=max_age,
        path="/",
    )


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(request: RegisterRequest, response: Response):
    if get_user_by_email(request.email):
        raise AuthError("auth.email_taken", status_code=400)

    user = create_user(
        email=request.email,
        password_hash=hash_password(request.password),
        username=(request.username or "").strip() or None,
    )
    token = create_access_token(user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise AuthError("auth.invalid_credentials")

    token = create_access_token(user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/logout", summary="Logout")
def logout(request: Request, response: Response):
    user = getattr(request.state, "user", None)
    if user:
        # Cached catalog data is per session; drop all of it.
        catalog_cache.invalidate(user["id"])
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return _user_public(user)


@profile_router.put("", response_model=UserPublic, summary="Update profile")
def update_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    if request.email is not None:
        other = get_user_by_email(request.email)
        if other and other["id"] != user["id"]:
            raise AuthError("auth.email_taken", status_code=400)
    row = update_user(user_id=user["id"], email=request.email, username=request.username)
    return _user_public(row)


@profile_router.put("/change-password", summary="Change password")
def change_password(request: ChangePasswordRequest, user: dict = Depends(get_current_user)):
    if not verify_password(request.current_password, user["password_hash"]):
        raise AuthError("auth.wrong_password", status_code=400)
    set_password_hash(user_id=user["id"], password_hash=hash_password(request.new_password))
    return {"status": "ok"}


@profile_router.delete("", summary="Delete account")
def delete_account(response: Response, user: dict = Depends(get_current_user)):
    delete_user(user["id"])
    catalog_cache.invalidate(user["id"])
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    logger.info("Deleted user %s", user["id"])
    return {"status": "ok"}
