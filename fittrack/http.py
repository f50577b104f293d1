# -*- coding: utf-8 -*-
"""Outbound HTTP for the catalog and dataset collaborators.

One GET per call, ``settings.http_timeout``, no retry. Every transport or
protocol failure becomes ``TransportError`` naming the service.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import settings
from .errors import TransportError

logger = logging.getLogger(__name__)


def get_json(
    url: str,
    *,
    service: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Any:
    try:
        with httpx.Client(timeout=settings.http_timeout, follow_redirects=True, transport=transport) as client:
            resp = client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPError as exc:
        logger.warning("%s request to %s failed: %s", service, url, exc)
        raise TransportError(service, str(exc)) from exc
    except ValueError as exc:
        logger.warning("%s returned a non-JSON body from %s", service, url)
        raise TransportError(service, "invalid JSON response") from exc
