# -*- coding: utf-8 -*-
"""Catalog endpoints: exercise lookups and recipe search."""

from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .cache import catalog_cache
from .client import ExerciseCatalog, RecipeCatalog
from .filters import body_parts, equipment_list, filter_exercises, targets
from .models import CatalogExercise, ExerciseListResponse, RecipeFilter, RecipeListResponse

router = APIRouter(prefix="/api/catalog", tags=["Catalog"])

_SNAPSHOT_KEY = "exercises"


def get_exercise_catalog() -> ExerciseCatalog:
    return ExerciseCatalog()


def get_recipe_catalog() -> RecipeCatalog:
    return RecipeCatalog()


def _snapshot(user: dict, catalog: ExerciseCatalog) -> Tuple[CatalogExercise, ...]:
    return catalog_cache.get_or_load(user["id"], _SNAPSHOT_KEY, catalog.fetch_all)


@router.get("/exercises", response_model=ExerciseListResponse, summary="List exercises")
def list_exercises(
    body_part: Optional[str] = Query(default=None, alias="bodyPart"),
    equipment: Optional[str] = Query(default=None),
    target: Optional[str] = Query(default=None),
    q: Optional[str] = Query(default=None, description="Name contains"),
    user: dict = Depends(get_current_user),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    items = filter_exercises(
        _snapshot(user, catalog),
        body_part=body_part,
        equipment=equipment,
        target=target,
        query=q,
    )
    return ExerciseListResponse(count=len(items), items=items)


@router.get("/body-parts", response_model=List[str], summary="List body parts")
def list_body_parts(
    user: dict = Depends(get_current_user),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    return body_parts(_snapshot(user, catalog))


@router.get("/equipment", response_model=List[str], summary="List equipment")
def list_equipment(
    user: dict = Depends(get_current_user),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    return equipment_list(_snapshot(user, catalog))


@router.get("/targets", response_model=List[str], summary="List target muscles")
def list_targets(
    user: dict = Depends(get_current_user),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    return targets(_snapshot(user, catalog))


@router.get("/recipes", response_model=RecipeListResponse, summary="Find recipes by nutrient ranges")
def list_recipes(
    min_calories: Optional[float] = Query(default=None, ge=0, alias="minCalories"),
    max_calories: Optional[float] = Query(default=None, ge=0, alias="maxCalories"),
    min_protein: Optional[float] = Query(default=None, ge=0, alias="minProtein"),
    max_protein: Optional[float] = Query(default=None, ge=0, alias="maxProtein"),
    min_carbs: Optional[float] = Query(default=None, ge=0, alias="minCarbs"),
    max_carbs: Optional[float] = Query(default=None, ge=0, alias="maxCarbs"),
    min_fat: Optional[float] = Query(default=None, ge=0, alias="minFat"),
    max_fat: Optional[float] = Query(default=None, ge=0, alias="maxFat"),
    number: int = Query(default=20, ge=1, le=100),
    user: dict = Depends(get_current_user),
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
):
    flt = RecipeFilter(
        min_calories=min_calories,
        max_calories=max_calories,
        min_protein=min_protein,
        max_protein=max_protein,
        min_carbs=min_carbs,
        max_carbs=max_carbs,
        min_fat=min_fat,
        max_fat=max_fat,
        number=number,
    )
    items = catalog_cache.get_or_load(
        user["id"],
        ("recipes", flt.cache_key()),
        lambda: catalog.find_by_nutrients(flt),
    )
    return RecipeListResponse(count=len(items), items=list(items))
