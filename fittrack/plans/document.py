# -*- coding: utf-8 -*-
"""Plan document model: in-place edits of the Plan -> Day -> Item tree.

Every operation mutates the given plan (or day) and returns the node it
touched. Orders are kept dense (1..N) after each structural change; the
tree is validated as a whole before it is written.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from ..catalog.models import CatalogExercise, CatalogRecipe
from ..errors import (
    IncompleteDayError,
    IncompleteItemError,
    IncompletePlanError,
    NotFoundError,
    ValidationError,
)
from ..i18n import SUPPORTED_LOCALES, translate, weekdays
from ..schema import error_fields
from .models import (
    DAY_MODELS,
    CustomExercise,
    CustomMeal,
    Day,
    ExerciseItem,
    MealItem,
    Plan,
    PlanKind,
    TrainingDay,
)

ItemRecord = Union[CatalogExercise, CatalogRecipe, CustomExercise, CustomMeal]

# Fields a user tunes on an exercise; kept when the catalog entry is swapped.
_TUNED_EXERCISE_FIELDS = ("sets", "reps", "weight", "rest_time", "notes")


def _kind_of_day(day: Day) -> PlanKind:
    return PlanKind.training if isinstance(day, TrainingDay) else PlanKind.diet


def default_day_name(day_of_week: str, kind: PlanKind, locale: Optional[str] = None) -> str:
    return f"{day_of_week} - {translate(f'day.suffix.{kind.value}', locale)}"


def is_default_day_name(name: str, day_of_week: str, kind: PlanKind) -> bool:
    """True when ``name`` is exactly the generated name for ``day_of_week`` in any locale."""
    for locale in ("en", "pl"):
        if name == default_day_name(day_of_week, kind, locale):
            return True
    return False


def densify(nodes: List[Any]) -> List[Any]:
    for position, node in enumerate(nodes, start=1):
        node.order = position
    return nodes


def day_at(plan: Plan, index: int) -> Day:
    if index < 0 or index >= len(plan.days):
        raise NotFoundError("day", str(index))
    return plan.days[index]


def _item_at(day: Day, index: int):
    if index < 0 or index >= len(day.items):
        raise NotFoundError("item", str(index))
    return day.items[index]


# ---- Days ----


def add_day(plan: Plan, locale: Optional[str] = None) -> Day:
    kind = plan.kind
    used = {day.day_of_week for day in plan.days}
    # A weekday is taken whichever locale it was written in.
    taken = {
        position
        for loc in SUPPORTED_LOCALES
        for position, label in enumerate(weekdays(loc))
        if label in used
    }
    day_of_week = next(
        (label for position, label in enumerate(weekdays(locale)) if position not in taken),
        translate(f"day.fallback.{kind.value}", locale),
    )
    day = DAY_MODELS[kind](
        day_of_week=day_of_week,
        name=default_day_name(day_of_week, kind, locale),
        order=len(plan.days) + 1,
        name_manually_edited=False,
        temp_id=uuid4().hex,
    )
    plan.days.append(day)
    return day


def remove_day(plan: Plan, index: int) -> Day:
    day_at(plan, index)
    removed = plan.days.pop(index)
    densify(plan.days)
    return removed


def rename_day(plan: Plan, index: int, name: str) -> Day:
    day = day_at(plan, index)
    if name != day.name:
        day.name = name
        day.name_manually_edited = True
    return day


def update_day(
    plan: Plan,
    index: int,
    data: Mapping[str, Any],
    locale: Optional[str] = None,
) -> Day:
    """Merge ``data`` (dayOfWeek / name / items) into the day at ``index``.

    A changed name marks the day as manually named. When the day of week
    changes and the name was never edited by hand (or is empty), the name is
    regenerated for the new day of week.
    """
    day = day_at(plan, index)
    kind = plan.kind
    old_day_of_week = day.day_of_week

    name = data.get("name")
    if name is not None:
        rename_day(plan, index, name)

    day_of_week = data.get("day_of_week", data.get("dayOfWeek"))
    if day_of_week is not None and day_of_week != old_day_of_week:
        day.day_of_week = day_of_week
        if not day.name_manually_edited or not day.name.strip():
            day.name = default_day_name(day_of_week, kind, locale)
            day.name_manually_edited = False

    items = data.get("items")
    if items is not None:
        item_model = ExerciseItem if kind == PlanKind.training else MealItem
        try:
            parsed = [item_model.model_validate(raw) for raw in items]
        except PydanticValidationError as exc:
            raise ValidationError(fields=error_fields(exc)) from exc
        if kind == PlanKind.training:
            day.exercises = parsed
        else:
            day.meals = parsed
        densify(day.items)
    return day


# ---- Items ----


def _exercise_from(record: ItemRecord) -> ExerciseItem:
    if isinstance(record, CustomExercise):
        return ExerciseItem(
            source_id=record.id or f"custom-{uuid4().hex}",
            name=record.name,
            is_custom=True,
            sets=record.sets,
            reps=record.reps,
            weight=record.weight,
            rest_time=record.rest_time,
            notes=record.notes,
            body_part=record.body_part,
            equipment=record.equipment,
            target=record.target,
            gif_url=record.gif_url,
        )
    if isinstance(record, CatalogExercise):
        return ExerciseItem(
            source_id=record.id,
            name=record.name,
            is_custom=False,
            body_part=record.body_part,
            equipment=record.equipment,
            target=record.target,
            gif_url=record.gif_url,
        )
    raise ValidationError(fields={"record": "expected an exercise"})


def _meal_from(record: ItemRecord) -> MealItem:
    if isinstance(record, (CustomMeal, CatalogRecipe)):
        custom = isinstance(record, CustomMeal)
        return MealItem(
            source_id=(record.id or f"custom-{uuid4().hex}") if custom else record.id,
            title=record.title,
            is_custom=custom,
            calories=record.calories,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
            image=record.image,
            recipe_url=record.recipe_url,
        )
    raise ValidationError(fields={"record": "expected a meal"})


def build_item(day: Day, record: ItemRecord) -> Union[ExerciseItem, MealItem]:
    if _kind_of_day(day) == PlanKind.training:
        return _exercise_from(record)
    return _meal_from(record)


def add_item(day: Day, record: ItemRecord) -> Union[ExerciseItem, MealItem]:
    item = build_item(day, record)
    item.order = len(day.items) + 1
    day.items.append(item)
    return item


def edit_item(day: Day, index: int, record: ItemRecord) -> Union[ExerciseItem, MealItem]:
    current = _item_at(day, index)
    if isinstance(record, (CustomExercise, CustomMeal)) and not record.id and current.is_custom:
        # Editing a custom entry keeps its locally generated id.
        record = record.model_copy(update={"id": current.source_id})
    item = build_item(day, record)
    if isinstance(item, ExerciseItem) and isinstance(record, CatalogExercise):
        for field in _TUNED_EXERCISE_FIELDS:
            setattr(item, field, getattr(current, field))
    item.order = current.order
    day.items[index] = item
    return item


def remove_item(day: Day, index: int) -> Union[ExerciseItem, MealItem]:
    _item_at(day, index)
    removed = day.items.pop(index)
    densify(day.items)
    return removed


def move_item(day: Day, index: int, direction: str) -> Union[ExerciseItem, MealItem]:
    item = _item_at(day, index)
    if direction not in ("up", "down"):
        raise ValidationError(fields={"direction": "expected up or down"})
    target = index - 1 if direction == "up" else index + 1
    items = day.items
    if 0 <= target < len(items):
        items[index], items[target] = items[target], items[index]
    densify(items)
    return item


# ---- Whole plan ----


def _day_missing(day: Day) -> List[str]:
    missing = []
    if not day.day_of_week.strip():
        missing.append("dayOfWeek")
    if not day.name.strip():
        missing.append("name")
    if day.order is None:
        missing.append("order")
    return missing


def validate(plan: Plan) -> Plan:
    if not plan.name.strip():
        raise IncompletePlanError()
    for day_index, day in enumerate(plan.days):
        missing = _day_missing(day)
        if missing:
            raise IncompleteDayError(day_index, missing)
        for item_index, item in enumerate(day.items):
            missing = item.missing_fields()
            if missing:
                raise IncompleteItemError(day_index, item_index, missing)
    return plan


def normalize(plan: Plan) -> Plan:
    """Sort by order, densify, and fill in the manual-name flag for old documents."""
    plan.days.sort(key=lambda d: d.order if d.order is not None else float("inf"))
    densify(plan.days)
    kind = plan.kind
    for day in plan.days:
        day.temp_id = None
        items = day.items
        items.sort(key=lambda i: i.order if i.order is not None else float("inf"))
        densify(items)
        if day.name_manually_edited is None:
            day.name_manually_edited = bool(day.name) and not is_default_day_name(
                day.name, day.day_of_week, kind
            )
    return plan


def prepare_for_write(plan: Plan) -> Plan:
    """Validate then normalize; raises before anything is persisted."""
    validate(plan)
    return normalize(plan)


def coerce_record(kind: PlanKind, custom: bool, raw: Dict[str, Any]) -> ItemRecord:
    """Turn a raw JSON record into the typed catalog or custom record for ``kind``."""
    if kind == PlanKind.training:
        model = CustomExercise if custom else CatalogExercise
    else:
        model = CustomMeal if custom else CatalogRecipe
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(fields=error_fields(exc)) from exc
