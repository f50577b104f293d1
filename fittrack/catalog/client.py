# -*- coding: utf-8 -*-
"""Catalog clients: ExerciseDB (exercises) and Spoonacular (recipes).

Both are read-only lookups. Records that cannot be turned into catalog
models are skipped with a log line rather than failing the whole list.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..http import get_json
from .models import CatalogExercise, CatalogRecipe, RecipeFilter

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[^a-z0-9]+")

# RecipeFilter field -> Spoonacular query parameter.
_NUTRIENT_PARAMS = {
    "min_calories": "minCalories",
    "max_calories": "maxCalories",
    "min_protein": "minProtein",
    "max_protein": "maxProtein",
    "min_carbs": "minCarbs",
    "max_carbs": "maxCarbs",
    "min_fat": "minFat",
    "max_fat": "maxFat",
}


def _slug(title: str) -> str:
    return _SLUG_RE.sub("-", title.lower()).strip("-")


class ExerciseCatalog:
    service = "ExerciseDB"

    def __init__(self, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"X-RapidAPI-Host": settings.exercisedb_host}
        if settings.exercisedb_api_key:
            headers["X-RapidAPI-Key"] = settings.exercisedb_api_key
        return headers

    def fetch_all(self) -> Tuple[CatalogExercise, ...]:
        """Bulk-fetch the whole exercise list once."""
        data = get_json(
            f"{settings.exercisedb_base_url.rstrip('/')}/exercises",
            service=self.service,
            params={"limit": 0},
            headers=self._headers(),
            transport=self._transport,
        )
        if not isinstance(data, list):
            logger.warning("%s returned %s instead of a list", self.service, type(data).__name__)
            return ()

        exercises: List[CatalogExercise] = []
        for raw in data:
            try:
                exercises.append(CatalogExercise.model_validate(raw))
            except PydanticValidationError:
                logger.info("Skipping malformed exercise record: %r", raw)
        return tuple(exercises)


class RecipeCatalog:
    service = "Spoonacular"

    def __init__(self, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def find_by_nutrients(self, flt: RecipeFilter) -> Tuple[CatalogRecipe, ...]:
        params: Dict[str, Any] = {"number": flt.number}
        for field, param in _NUTRIENT_PARAMS.items():
            value = getattr(flt, field)
            if value is not None:
                params[param] = value
        if settings.spoonacular_api_key:
            params["apiKey"] = settings.spoonacular_api_key

        data = get_json(
            f"{settings.spoonacular_base_url.rstrip('/')}/recipes/findByNutrients",
            service=self.service,
            params=params,
            transport=self._transport,
        )
        if not isinstance(data, list):
            logger.warning("%s returned %s instead of a list", self.service, type(data).__name__)
            return ()

        recipes: List[CatalogRecipe] = []
        for raw in data:
            if not isinstance(raw, dict):
                continue
            record = dict(raw)
            if not record.get("recipeUrl") and record.get("id") and record.get("title"):
                record["recipeUrl"] = f"https://spoonacular.com/recipes/{_slug(str(record['title']))}-{record['id']}"
            try:
                recipes.append(CatalogRecipe.model_validate(record))
            except PydanticValidationError:
                logger.info("Skipping malformed recipe record: %r", raw)
        return tuple(recipes)
