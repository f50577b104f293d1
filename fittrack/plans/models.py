# -*- coding: utf-8 -*-
"""Plan document models (Plan -> Day -> Item) and API payloads."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from pydantic import Field

from ..schema import CamelModel, Count, Identifier, Number, Text, Timestamp


class PlanKind(str, Enum):
    training = "training"
    diet = "diet"


class ExerciseItem(CamelModel):
    order: Count = None
    source_id: Identifier = ""
    name: Text = ""
    is_custom: bool = False
    sets: Count = 3
    reps: Count = 12
    weight: Number = 0.0
    rest_time: Count = None
    notes: Text = ""
    body_part: Optional[str] = None
    equipment: Optional[str] = None
    target: Optional[str] = None
    gif_url: Optional[str] = None

    def missing_fields(self) -> List[str]:
        missing: List[str] = []
        if not self.source_id:
            missing.append("sourceId")
        if not self.name.strip():
            missing.append("name")
        if self.order is None or self.order < 1:
            missing.append("order")
        if self.sets is None or self.sets < 1:
            missing.append("sets")
        if self.reps is None or self.reps < 1:
            missing.append("reps")
        if self.weight is None or self.weight < 0:
            missing.append("weight")
        return missing


class MealItem(CamelModel):
    order: Count = None
    source_id: Identifier = ""
    title: Text = ""
    is_custom: bool = False
    calories: Number = None
    protein: Number = None
    carbs: Number = None
    fat: Number = None
    image: Optional[str] = None
    recipe_url: Optional[str] = None

    def missing_fields(self) -> List[str]:
        missing: List[str] = []
        if not self.source_id:
            missing.append("sourceId")
        if not self.title.strip():
            missing.append("title")
        if self.order is None or self.order < 1:
            missing.append("order")
        if self.calories is None or self.calories < 1:
            missing.append("calories")
        for field in ("protein", "carbs", "fat"):
            value = getattr(self, field)
            if value is None or value < 0:
                missing.append(field)
        return missing


class _Day(CamelModel):
    day_of_week: Text = ""
    name: Text = ""
    order: Count = None
    # None means "unknown" (documents written before the flag existed).
    name_manually_edited: Optional[bool] = None
    # Client-side key for unsaved days; never serialized.
    temp_id: Optional[str] = Field(default=None, exclude=True)

    @property
    def items(self) -> list:
        raise NotImplementedError


class TrainingDay(_Day):
    exercises: List[ExerciseItem] = Field(default_factory=list)

    @property
    def items(self) -> List[ExerciseItem]:
        return self.exercises


class DietDay(_Day):
    meals: List[MealItem] = Field(default_factory=list)

    @property
    def items(self) -> List[MealItem]:
        return self.meals


class _Plan(CamelModel):
    kind: ClassVar[PlanKind]

    id: Optional[str] = None
    name: Text = ""
    description: Text = ""
    is_active: bool = False
    date_created: Timestamp = None
    date_updated: Timestamp = None


class TrainingPlan(_Plan):
    kind: ClassVar[PlanKind] = PlanKind.training

    days: List[TrainingDay] = Field(default_factory=list)


class DietPlan(_Plan):
    kind: ClassVar[PlanKind] = PlanKind.diet

    days: List[DietDay] = Field(default_factory=list)


Plan = Union[TrainingPlan, DietPlan]
Day = Union[TrainingDay, DietDay]
Item = Union[ExerciseItem, MealItem]

PLAN_MODELS: Dict[PlanKind, Type[_Plan]] = {
    PlanKind.training: TrainingPlan,
    PlanKind.diet: DietPlan,
}
DAY_MODELS: Dict[PlanKind, Type[_Day]] = {
    PlanKind.training: TrainingDay,
    PlanKind.diet: DietDay,
}
ITEM_MODELS: Dict[PlanKind, Type[CamelModel]] = {
    PlanKind.training: ExerciseItem,
    PlanKind.diet: MealItem,
}


# ---- Custom (user-entered) records ----


class CustomExercise(CamelModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    sets: Count = 3
    reps: Count = 12
    weight: Number = 0.0
    rest_time: Count = None
    notes: Text = ""
    body_part: Optional[str] = None
    equipment: Optional[str] = None
    target: Optional[str] = None
    gif_url: Optional[str] = None


class CustomMeal(CamelModel):
    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    calories: Number = None
    protein: Number = None
    carbs: Number = None
    fat: Number = None
    image: Optional[str] = None
    recipe_url: Optional[str] = None


# ---- API payloads ----


class DayUpdateRequest(CamelModel):
    day_of_week: Optional[str] = None
    name: Optional[str] = None
    items: Optional[List[Dict[str, Any]]] = None


class ItemWriteRequest(CamelModel):
    custom: bool = False
    record: Dict[str, Any]


class ImportResponse(CamelModel):
    plan: Dict[str, Any]
    format: str
    duplicate_strategy: str
    renamed: bool = False
    replaced: bool = False
