# -*- coding: utf-8 -*-
"""Auth — password hashing, signed access tokens and the current-user dependency.

Tokens are compact HS256 JWTs signed with ``settings.jwt_secret``; they are
read from the ``Authorization: Bearer`` header or the auth cookie.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, Request

from ..config import settings
from ..errors import AuthError
from .storage import get_user_by_id

TOKEN_COOKIE_NAME = "fittrack_token"

_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000
_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64decode(data: str) -> bytes:
    return base64.urlsafe_b64decode((data + "=" * (-len(data) % 4)).encode("ascii"))


def _sign(signing_input: bytes) -> bytes:
    return hmac.new(settings.jwt_secret.encode("utf-8"), signing_input, hashlib.sha256).digest()


# ---- Passwords ----


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    derived = hashlib.pbkdf2_hmac(_PBKDF2_ALG, password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"pbkdf2_{_PBKDF2_ALG}${_PBKDF2_ITERATIONS}${_b64encode(salt)}${_b64encode(derived)}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        scheme, iterations, salt_b64, derived_b64 = password_hash.split("$", 3)
        salt = _b64decode(salt_b64)
        expected = _b64decode(derived_b64)
        rounds = int(iterations)
    except (ValueError, binascii.Error):
        return False
    if not scheme.startswith("pbkdf2_"):
        return False
    actual = hashlib.pbkdf2_hmac(scheme.split("_", 1)[1], password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(actual, expected)


# ---- Tokens ----


def create_access_token(*, user_id: str, email: str) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(days=int(settings.token_ttl_days))).timestamp()),
    }
    header_b64 = _b64encode(json.dumps(_TOKEN_HEADER, separators=(",", ":")).encode("utf-8"))
    claims_b64 = _b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{claims_b64}".encode("ascii")
    return f"{header_b64}.{claims_b64}.{_b64encode(_sign(signing_input))}"


def decode_token(token: str) -> Dict[str, Any]:
    try:
        header_b64, claims_b64, sig_b64 = token.split(".")
        signing_input = f"{header_b64}.{claims_b64}".encode("ascii")
        if not hmac.compare_digest(_sign(signing_input), _b64decode(sig_b64)):
            raise ValueError("bad signature")
        claims = json.loads(_b64decode(claims_b64).decode("utf-8"))
    except (ValueError, UnicodeError, binascii.Error) as exc:
        raise AuthError("auth.invalid_token") from exc
    if not isinstance(claims, dict):
        raise AuthError("auth.invalid_token")

    exp = int(claims.get("exp") or 0)
    if exp and exp < int(datetime.now(timezone.utc).timestamp()):
        raise AuthError("auth.token_expired")
    return claims


# ---- FastAPI helpers ----


def get_token_from_request(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    # The auth gate middleware may already have resolved the user.
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = get_token_from_request(request)
    if not token:
        raise AuthError("auth.not_authenticated")

    user_id = str(decode_token(token).get("sub") or "")
    user_row = get_user_by_id(user_id) if user_id else None
    if not user_row:
        raise AuthError("auth.user_not_found")

    request.state.user = user_row
    return user_row


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
