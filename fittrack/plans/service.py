# -*- coding: utf-8 -*-
"""Plan use cases: validate, resolve duplicates, write once."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from fastapi import UploadFile
from pydantic import ValidationError as PydanticValidationError

from ..errors import NotFoundError, ValidationError
from ..schema import error_fields
from ..uploads import read_upload
from . import storage
from .document import prepare_for_write
from .duplicates import DuplicateStrategy, apply_import_strategy, ensure_unique
from .models import PLAN_MODELS, ImportResponse, Plan, PlanKind
from .transfer import ExportedFile, detect_format, export_plan, parse_plan

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_payload(kind: PlanKind, payload: Dict[str, Any]) -> Plan:
    data = {k: v for k, v in payload.items() if k not in ("id", "_id")}
    try:
        return PLAN_MODELS[kind].model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(fields=error_fields(exc)) from exc


def list_plans(*, user_id: str, kind: PlanKind) -> List[Plan]:
    return storage.list_plans(user_id=user_id, kind=kind)


def require_plan(*, user_id: str, kind: PlanKind, plan_id: str) -> Plan:
    plan = storage.get_plan(user_id=user_id, kind=kind, plan_id=plan_id)
    if plan is None:
        raise NotFoundError("plan", plan_id)
    return plan


def create_plan(*, user_id: str, kind: PlanKind, payload: Dict[str, Any]) -> Plan:
    plan = prepare_for_write(parse_payload(kind, payload))
    ensure_unique(storage.plan_names(user_id=user_id, kind=kind), plan.name)
    return storage.insert_plan(user_id=user_id, plan=plan, activate=plan.is_active)


def update_plan(*, user_id: str, kind: PlanKind, plan_id: str, payload: Dict[str, Any]) -> Plan:
    require_plan(user_id=user_id, kind=kind, plan_id=plan_id)
    plan = prepare_for_write(parse_payload(kind, payload))
    ensure_unique(storage.plan_names(user_id=user_id, kind=kind), plan.name, exclude_id=plan_id)
    activate: Optional[bool] = None
    if "isActive" in payload or "is_active" in payload:
        activate = plan.is_active
    return storage.replace_plan(user_id=user_id, plan_id=plan_id, plan=plan, activate=activate)


def edit_plan(
    *,
    user_id: str,
    kind: PlanKind,
    plan_id: str,
    mutate: Callable[[Plan], T],
) -> Tuple[Plan, T]:
    """Load a plan, apply one document operation, validate and write it back."""
    plan = require_plan(user_id=user_id, kind=kind, plan_id=plan_id)
    result = mutate(plan)
    prepare_for_write(plan)
    stored = storage.replace_plan(user_id=user_id, plan_id=plan_id, plan=plan)
    return stored, result


def delete_plan(*, user_id: str, kind: PlanKind, plan_id: str) -> None:
    storage.delete_plan(user_id=user_id, kind=kind, plan_id=plan_id)


def activate(*, user_id: str, kind: PlanKind, plan_id: str) -> Plan:
    return storage.activate_plan(user_id=user_id, kind=kind, plan_id=plan_id)


def import_plan(
    *,
    user_id: str,
    kind: PlanKind,
    upload: UploadFile,
    strategy: DuplicateStrategy,
    locale: Optional[str] = None,
) -> ImportResponse:
    fmt = detect_format(upload.filename)
    content = read_upload(upload)
    plan = prepare_for_write(parse_plan(content, fmt, kind))
    decision = apply_import_strategy(
        storage.plan_names(user_id=user_id, kind=kind),
        plan.name,
        strategy,
        locale,
    )
    plan.name = decision.name

    if decision.replace_id:
        stored = storage.replace_plan(user_id=user_id, plan_id=decision.replace_id, plan=plan)
    else:
        stored = storage.insert_plan(user_id=user_id, plan=plan, activate=False)

    logger.info(
        "Imported %s plan %s from %s (strategy=%s, renamed=%s, replaced=%s)",
        kind.value,
        stored.id,
        fmt,
        strategy.value,
        decision.renamed,
        bool(decision.replace_id),
    )
    return ImportResponse(
        plan=stored.model_dump(by_alias=True, mode="json"),
        format=fmt,
        duplicate_strategy=strategy.value,
        renamed=decision.renamed,
        replaced=bool(decision.replace_id),
    )


def export_plan_file(*, user_id: str, kind: PlanKind, plan_id: str, fmt: str) -> ExportedFile:
    plan = require_plan(user_id=user_id, kind=kind, plan_id=plan_id)
    return export_plan(plan, fmt)
