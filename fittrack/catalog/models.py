# -*- coding: utf-8 -*-
"""Catalog — records returned by the exercise and recipe providers."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schema import CamelModel, Identifier, Number


class CatalogExercise(CamelModel):
    id: Identifier
    name: str = Field(..., min_length=1)
    body_part: Optional[str] = None
    equipment: Optional[str] = None
    target: Optional[str] = None
    gif_url: Optional[str] = None


class CatalogRecipe(CamelModel):
    id: Identifier
    title: str = Field(..., min_length=1)
    calories: Number = None
    protein: Number = None
    carbs: Number = None
    fat: Number = None
    image: Optional[str] = None
    recipe_url: Optional[str] = None


class RecipeFilter(CamelModel):
    min_calories: Optional[float] = Field(None, ge=0)
    max_calories: Optional[float] = Field(None, ge=0)
    min_protein: Optional[float] = Field(None, ge=0)
    max_protein: Optional[float] = Field(None, ge=0)
    min_carbs: Optional[float] = Field(None, ge=0)
    max_carbs: Optional[float] = Field(None, ge=0)
    min_fat: Optional[float] = Field(None, ge=0)
    max_fat: Optional[float] = Field(None, ge=0)
    number: int = Field(20, ge=1, le=100)

    def cache_key(self) -> tuple:
        return tuple(sorted(self.model_dump(exclude_none=True).items()))


class ExerciseListResponse(CamelModel):
    count: int
    items: List[CatalogExercise]


class RecipeListResponse(CamelModel):
    count: int
    items: List[CatalogRecipe]
