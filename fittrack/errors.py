# -*- coding: utf-8 -*-
"""Domain exception hierarchy.

Every error knows its HTTP status and a message key from ``i18n``; the app
renders it in the caller's locale through a single exception handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .i18n import translate


class FitTrackError(Exception):
    status_code: int = 500
    message_key: str = "error.validation"

    def __init__(self, **params: Any) -> None:
        self.params = params
        super().__init__(self.render("en"))

    def render(self, locale: Optional[str] = None) -> str:
        return translate(self.message_key, locale, **self.params)

    def extra(self) -> Dict[str, Any]:
        return {}

    def to_payload(self, locale: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"detail": self.render(locale), "error": type(self).__name__}
        payload.update(self.extra())
        return payload


class ValidationError(FitTrackError):
    status_code = 400
    message_key = "error.validation"

    def __init__(self, fields: Optional[Dict[str, str]] = None, **params: Any) -> None:
        self.fields = dict(fields or {})
        super().__init__(**params)

    def extra(self) -> Dict[str, Any]:
        return {"fields": self.fields}


class IncompletePlanError(ValidationError):
    message_key = "error.incomplete_plan"

    def __init__(self) -> None:
        super().__init__(fields={"name": "required"})


class IncompleteDayError(ValidationError):
    message_key = "error.incomplete_day"

    def __init__(self, day_index: int, missing: list[str]) -> None:
        self.day_index = day_index
        self.missing = list(missing)
        super().__init__(
            fields={f"days[{day_index}].{name}": "required" for name in missing},
            day=day_index + 1,
        )


class IncompleteItemError(ValidationError):
    message_key = "error.incomplete_item"

    def __init__(self, day_index: int, item_index: int, missing: list[str]) -> None:
        self.day_index = day_index
        self.item_index = item_index
        self.missing = list(missing)
        super().__init__(
            fields={f"days[{day_index}].items[{item_index}].{name}": "invalid" for name in missing},
            day=day_index + 1,
            item=item_index + 1,
        )


class DuplicateNameError(FitTrackError):
    status_code = 409
    message_key = "error.duplicate_name"

    def __init__(self, name: str, conflict_id: Optional[str] = None, resource: str = "plan") -> None:
        self.name = name
        self.conflict_id = conflict_id
        if resource == "analysis":
            self.message_key = "error.duplicate_analysis_name"
        super().__init__(name=name)

    def extra(self) -> Dict[str, Any]:
        return {"conflictId": self.conflict_id}


class UnsupportedFormatError(FitTrackError):
    status_code = 400
    message_key = "error.unsupported_format"

    def __init__(self, fmt: Optional[str] = None) -> None:
        self.fmt = fmt
        super().__init__()


class ImportParseError(FitTrackError):
    status_code = 400
    message_key = "error.import_parse"

    def __init__(self, kind: str, reason: str) -> None:
        self.reason = reason
        super().__init__(kind=kind, reason=reason)


class AnalysisImportError(ImportParseError):
    message_key = "error.import_parse_analysis"

    def __init__(self, reason: str) -> None:
        super().__init__("analysis", reason)


class UploadTooLargeError(FitTrackError):
    status_code = 413
    message_key = "error.upload_too_large"

    def __init__(self, limit_mb: int) -> None:
        super().__init__(limit=limit_mb)


class InsufficientDataError(FitTrackError):
    status_code = 422
    message_key = "error.insufficient_data"

    def __init__(self, points: int = 0) -> None:
        self.points = points
        super().__init__()


class TransportError(FitTrackError):
    """Network or timeout failure talking to an external collaborator. Never retried."""

    status_code = 502
    message_key = "error.transport"

    def __init__(self, service: str, reason: str = "") -> None:
        self.service = service
        self.reason = reason
        super().__init__(service=service)


class NotFoundError(FitTrackError):
    status_code = 404
    message_key = "error.not_found"

    def __init__(self, resource: str = "plan", resource_id: Optional[str] = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__()

    def render(self, locale: Optional[str] = None) -> str:
        return translate(self.message_key, locale, resource=translate(f"resource.{self.resource}", locale))


class AuthError(FitTrackError):
    """Authentication or account failure; ``message_key`` picks the ``auth.*`` message."""

    status_code = 401
    message_key = "auth.not_authenticated"

    def __init__(self, message_key: Optional[str] = None, status_code: Optional[int] = None) -> None:
        if message_key is not None:
            self.message_key = message_key
        if status_code is not None:
            self.status_code = status_code
        super().__init__()
