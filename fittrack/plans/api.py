# -*- coding: utf-8 -*-
"""Plan endpoints (training / diet).

Both kinds share one router factory; days and items are addressed by their
0-based position in the plan.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from fastapi import APIRouter, Body, Depends, File, Form, Query, Response, UploadFile, status

from ..auth.security import get_current_user
from ..fileformats import content_disposition
from ..i18n import get_locale
from . import service
from .document import add_day, add_item, coerce_record, day_at, edit_item, move_item, remove_day, remove_item, update_day
from .duplicates import DuplicateStrategy
from .models import DayUpdateRequest, ImportResponse, ItemWriteRequest, Plan, PlanKind


def _plan_out(plan: Plan) -> Dict[str, Any]:
    return plan.model_dump(by_alias=True, mode="json")


def build_plan_router(kind: PlanKind, prefix: str, tag: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("", summary=f"List {kind.value} plans")
    def list_plans(user: dict = Depends(get_current_user)) -> List[Dict[str, Any]]:
        return [_plan_out(p) for p in service.list_plans(user_id=user["id"], kind=kind)]

    @router.post("", status_code=status.HTTP_201_CREATED, summary=f"Create a {kind.value} plan")
    def create_plan(
        payload: Dict[str, Any] = Body(...),
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        return _plan_out(service.create_plan(user_id=user["id"], kind=kind, payload=payload))

    @router.post("/import", response_model=ImportResponse, summary=f"Import a {kind.value} plan file")
    def import_plan(
        file: UploadFile = File(...),
        duplicate_strategy: DuplicateStrategy = Form(DuplicateStrategy.prefix, alias="duplicateStrategy"),
        user: dict = Depends(get_current_user),
        locale: str = Depends(get_locale),
    ):
        return service.import_plan(
            user_id=user["id"],
            kind=kind,
            upload=file,
            strategy=duplicate_strategy,
            locale=locale,
        )

    @router.get("/{plan_id}", summary=f"Get a {kind.value} plan")
    def get_plan(plan_id: str, user: dict = Depends(get_current_user)) -> Dict[str, Any]:
        return _plan_out(service.require_plan(user_id=user["id"], kind=kind, plan_id=plan_id))

    @router.put("/{plan_id}", summary=f"Replace a {kind.value} plan")
    def update_plan(
        plan_id: str,
        payload: Dict[str, Any] = Body(...),
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        return _plan_out(service.update_plan(user_id=user["id"], kind=kind, plan_id=plan_id, payload=payload))

    @router.delete("/{plan_id}", summary=f"Delete a {kind.value} plan")
    def delete_plan(plan_id: str, user: dict = Depends(get_current_user)):
        service.delete_plan(user_id=user["id"], kind=kind, plan_id=plan_id)
        return {"status": "ok"}

    @router.post("/{plan_id}/activate", summary=f"Make this the active {kind.value} plan")
    def activate_plan(plan_id: str, user: dict = Depends(get_current_user)) -> Dict[str, Any]:
        return _plan_out(service.activate(user_id=user["id"], kind=kind, plan_id=plan_id))

    @router.get("/{plan_id}/export", summary=f"Export a {kind.value} plan")
    def export_plan(
        plan_id: str,
        fmt: str = Query(default="json", alias="format", description="json | xml | yaml"),
        user: dict = Depends(get_current_user),
    ):
        exported = service.export_plan_file(user_id=user["id"], kind=kind, plan_id=plan_id, fmt=fmt)
        return Response(
            content=exported.content,
            media_type=exported.media_type,
            headers={"Content-Disposition": content_disposition(exported.filename)},
        )

    # ---- Days ----

    @router.post("/{plan_id}/days", status_code=status.HTTP_201_CREATED, summary="Append a day")
    def create_day(
        plan_id: str,
        user: dict = Depends(get_current_user),
        locale: str = Depends(get_locale),
    ) -> Dict[str, Any]:
        plan, _ = service.edit_plan(
            user_id=user["id"], kind=kind, plan_id=plan_id, mutate=lambda p: add_day(p, locale)
        )
        return _plan_out(plan)

    @router.put("/{plan_id}/days/{day_index}", summary="Update a day")
    def change_day(
        plan_id: str,
        day_index: int,
        request: DayUpdateRequest,
        user: dict = Depends(get_current_user),
        locale: str = Depends(get_locale),
    ) -> Dict[str, Any]:
        data = request.model_dump(exclude_none=True)
        plan, _ = service.edit_plan(
            user_id=user["id"],
            kind=kind,
            plan_id=plan_id,
            mutate=lambda p: update_day(p, day_index, data, locale),
        )
        return _plan_out(plan)

    @router.delete("/{plan_id}/days/{day_index}", summary="Remove a day")
    def delete_day(plan_id: str, day_index: int, user: dict = Depends(get_current_user)) -> Dict[str, Any]:
        plan, _ = service.edit_plan(
            user_id=user["id"], kind=kind, plan_id=plan_id, mutate=lambda p: remove_day(p, day_index)
        )
        return _plan_out(plan)

    # ---- Items ----

    @router.post(
        "/{plan_id}/days/{day_index}/items",
        status_code=status.HTTP_201_CREATED,
        summary="Add a catalog or custom item to a day",
    )
    def create_item(
        plan_id: str,
        day_index: int,
        request: ItemWriteRequest,
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        record = coerce_record(kind, request.custom, request.record)
        plan, _ = service.edit_plan(
            user_id=user["id"],
            kind=kind,
            plan_id=plan_id,
            mutate=lambda p: add_item(day_at(p, day_index), record),
        )
        return _plan_out(plan)

    @router.put("/{plan_id}/days/{day_index}/items/{item_index}", summary="Replace an item")
    def change_item(
        plan_id: str,
        day_index: int,
        item_index: int,
        request: ItemWriteRequest,
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        record = coerce_record(kind, request.custom, request.record)
        plan, _ = service.edit_plan(
            user_id=user["id"],
            kind=kind,
            plan_id=plan_id,
            mutate=lambda p: edit_item(day_at(p, day_index), item_index, record),
        )
        return _plan_out(plan)

    @router.delete("/{plan_id}/days/{day_index}/items/{item_index}", summary="Remove an item")
    def delete_item(
        plan_id: str,
        day_index: int,
        item_index: int,
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        plan, _ = service.edit_plan(
            user_id=user["id"],
            kind=kind,
            plan_id=plan_id,
            mutate=lambda p: remove_item(day_at(p, day_index), item_index),
        )
        return _plan_out(plan)

    @router.post("/{plan_id}/days/{day_index}/items/{item_index}/move", summary="Move an item up or down")
    def shift_item(
        plan_id: str,
        day_index: int,
        item_index: int,
        direction: Literal["up", "down"] = Query(...),
        user: dict = Depends(get_current_user),
    ) -> Dict[str, Any]:
        plan, _ = service.edit_plan(
            user_id=user["id"],
            kind=kind,
            plan_id=plan_id,
            mutate=lambda p: move_item(day_at(p, day_index), item_index, direction),
        )
        return _plan_out(plan)

    return router


training_router = build_plan_router(PlanKind.training, "/api/training-plans", "Training plans")
diet_router = build_plan_router(PlanKind.diet, "/api/diet-plans", "Diet plans")
