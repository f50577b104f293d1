# -*- coding: utf-8 -*-
"""Plan import/export as JSON, XML or YAML files.

Exported documents use the camelCase field names of the plan models, with a
``planType`` marker first. Ids and client-only keys are never written.
Files in the older flat layout (``plan`` / ``days`` / ``items`` with a
``dayIndex`` per item) are still accepted on import.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from ..errors import ImportParseError
from ..fileformats import (
    EXPORT_FORMATS,
    MEDIA_TYPES,
    ROOT_KEY,
    ExportedFile,
    check_format,
    detect_format,
    dump_document,
    filename_slug,
    load_document,
)
from ..schema import error_fields
from .document import normalize
from .models import PLAN_MODELS, Plan, PlanKind

__all__ = ["EXPORT_FORMATS", "ExportedFile", "detect_format", "export_plan", "parse_plan", "plan_document"]

_ROOT_TAGS = {
    PlanKind.training: "trainingPlan",
    PlanKind.diet: "dietPlan",
}

# List container -> element tag of its entries.
_LIST_TAGS = {
    "days": "day",
    "exercises": "exercise",
    "meals": "meal",
    "items": "item",
}


def export_filename(plan: Plan, fmt: str) -> str:
    return f"{plan.kind.value}-plan-{filename_slug(plan.name, 'plan')}.{fmt}"


def plan_document(plan: Plan) -> Dict[str, Any]:
    body = plan.model_dump(by_alias=True, mode="json", exclude={"id"}, exclude_none=True)
    document: Dict[str, Any] = {"planType": plan.kind.value}
    document.update(body)
    return document


def export_plan(plan: Plan, fmt: str) -> ExportedFile:
    fmt = check_format(fmt)
    return ExportedFile(
        filename=export_filename(plan, fmt),
        media_type=MEDIA_TYPES[fmt],
        content=dump_document(plan_document(plan), fmt, _ROOT_TAGS[plan.kind], _LIST_TAGS),
    )


# ---- Import ----


def _from_flat_layout(data: Dict[str, Any], kind: PlanKind) -> Dict[str, Any]:
    plan = dict(data.get("plan") or {})
    items_key = "exercises" if kind == PlanKind.training else "meals"
    days: List[Dict[str, Any]] = []
    for index, raw_day in enumerate(data.get("days") or []):
        day = dict(raw_day or {})
        if day.get("order") in (None, ""):
            day["order"] = index + 1
        day[items_key] = []
        days.append(day)

    for number, raw_item in enumerate(data.get("items") or [], start=1):
        item = dict(raw_item or {})
        try:
            day_index = int(item.pop("dayIndex"))
        except (KeyError, TypeError, ValueError) as exc:
            raise ImportParseError(kind.value, f"item {number} has no valid dayIndex") from exc
        if not 0 <= day_index < len(days):
            raise ImportParseError(kind.value, f"item {number} points at missing day {day_index}")
        if "sourceId" not in item:
            item["sourceId"] = item.pop("exerciseId", None) or item.pop("recipeId", None)
        if kind == PlanKind.training and "name" not in item:
            item["name"] = item.pop("exerciseName", None)
        days[day_index][items_key].append(item)

    plan["days"] = days
    if "planType" in data:
        plan.setdefault("planType", data["planType"])
    return plan


def parse_plan(content: bytes, fmt: str, kind: PlanKind) -> Plan:
    """Rebuild a typed, normalized plan from an uploaded file."""
    data = load_document(content, fmt, _LIST_TAGS, lambda reason: ImportParseError(kind.value, reason))
    root_tag = data.pop(ROOT_KEY, None)
    if root_tag is not None and "planType" not in data:
        for plan_kind, tag in _ROOT_TAGS.items():
            if root_tag == tag:
                data["planType"] = plan_kind.value
    if isinstance(data.get("plan"), dict):
        data = _from_flat_layout(data, kind)

    declared = data.pop("planType", None)
    if declared is not None and str(declared).strip().lower() != kind.value:
        raise ImportParseError(kind.value, f"file contains a {declared} plan")

    data.pop("id", None)
    data.pop("_id", None)
    days = data.get("days")
    if days is not None and not isinstance(days, list):
        raise ImportParseError(kind.value, "days must be a list")

    try:
        plan = PLAN_MODELS[kind].model_validate(data)
    except PydanticValidationError as exc:
        reason = "; ".join(f"{key}: {msg}" for key, msg in error_fields(exc).items())
        raise ImportParseError(kind.value, reason) from exc
    return normalize(plan)
