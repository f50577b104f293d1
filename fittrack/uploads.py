# -*- coding: utf-8 -*-
"""Size-capped reading of multipart uploads."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import UploadFile

from .config import settings
from .errors import UploadTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 256


def read_upload(upload: UploadFile, max_mb: Optional[int] = None) -> bytes:
    """Read ``upload`` in chunks, giving up as soon as it passes ``max_mb``.

    The spooled file is closed either way.
    """
    limit_mb = int(settings.max_upload_mb if max_mb is None else max_mb)
    max_bytes = limit_mb * 1024 * 1024
    chunks = []
    size = 0
    try:
        while True:
            chunk = upload.file.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > max_bytes:
                logger.info("Rejected upload %r: over %s MB", getattr(upload, "filename", None), limit_mb)
                raise UploadTooLargeError(limit_mb)
            chunks.append(chunk)
    finally:
        upload.file.close()
    return b"".join(chunks)
