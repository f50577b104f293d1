# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import httpx

from fittrack.analytics.datasets import AnalysisType, PublicDatasetSource
from fittrack.cache import cache_clear
from fittrack.catalog.cache import CatalogCache
from fittrack.catalog.client import ExerciseCatalog, RecipeCatalog
from fittrack.catalog.filters import body_parts, equipment_list, filter_exercises, targets
from fittrack.catalog.models import CatalogExercise, RecipeFilter
from fittrack.errors import TransportError

_EXERCISES = [
    {"id": "0001", "name": "3/4 sit-up", "bodyPart": "waist", "equipment": "body weight", "target": "abs", "gifUrl": "https://g/1.gif"},
    {"id": "0025", "name": "barbell bench press", "bodyPart": "chest", "equipment": "barbell", "target": "pectorals"},
    {"id": "0043", "name": "barbell full squat", "bodyPart": "upper legs", "equipment": "barbell", "target": "glutes"},
    {"id": "1512", "name": "all fours squad stretch", "bodyPart": "upper legs", "equipment": "body weight", "target": "quads"},
    {"name": "record without id"},
]


def _snapshot():
    return [CatalogExercise.model_validate(r) for r in _EXERCISES[:4]]


class TestFilters(unittest.TestCase):
    def test_distinct_values_keep_first_seen_order(self) -> None:
        snapshot = _snapshot()
        self.assertEqual(body_parts(snapshot), ["waist", "chest", "upper legs"])
        self.assertEqual(equipment_list(snapshot), ["body weight", "barbell"])
        self.assertEqual(targets(snapshot), ["abs", "pectorals", "glutes", "quads"])

    def test_filter_combines_criteria(self) -> None:
        snapshot = _snapshot()
        found = filter_exercises(snapshot, body_part="Upper Legs", equipment="barbell")
        self.assertEqual([e.id for e in found], ["0043"])
        self.assertEqual([e.id for e in filter_exercises(snapshot, query="SQU")], ["0043", "1512"])
        self.assertEqual(len(filter_exercises(snapshot)), 4)
        self.assertEqual(filter_exercises(snapshot, target="biceps"), [])


class TestCatalogCache(unittest.TestCase):
    def test_loads_once_per_user_until_invalidated(self) -> None:
        cache = CatalogCache()
        calls = []

        def loader():
            calls.append(1)
            return ("snapshot",)

        cache.get_or_load("u1", "exercises", loader)
        cache.get_or_load("u1", "exercises", loader)
        cache.get_or_load("u2", "exercises", loader)
        self.assertEqual(len(calls), 2)
        self.assertEqual(cache.keys("u1"), ("exercises",))

        cache.invalidate("u1")
        self.assertEqual(cache.keys("u1"), ())
        self.assertEqual(cache.keys("u2"), ("exercises",))
        cache.get_or_load("u1", "exercises", loader)
        self.assertEqual(len(calls), 3)


class TestExerciseCatalog(unittest.TestCase):
    def test_fetch_all_skips_malformed_records(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["limit"] = request.url.params.get("limit")
            seen["host"] = request.headers.get("X-RapidAPI-Host")
            return httpx.Response(200, json=_EXERCISES)

        exercises = ExerciseCatalog(transport=httpx.MockTransport(handler)).fetch_all()
        self.assertEqual([e.id for e in exercises], ["0001", "0025", "0043", "1512"])
        self.assertEqual(exercises[0].body_part, "waist")
        self.assertEqual(exercises[0].gif_url, "https://g/1.gif")
        self.assertEqual(seen["path"], "/exercises")
        self.assertEqual(seen["limit"], "0")
        self.assertTrue(seen["host"])

    def test_server_error_is_a_transport_error(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
        with self.assertRaises(TransportError) as ctx:
            ExerciseCatalog(transport=transport).fetch_all()
        self.assertEqual(ctx.exception.service, "ExerciseDB")
        self.assertEqual(ctx.exception.status_code, 502)

    def test_connection_failure_is_a_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(TransportError):
            ExerciseCatalog(transport=httpx.MockTransport(handler)).fetch_all()

    def test_non_json_body_is_a_transport_error(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        with self.assertRaises(TransportError):
            ExerciseCatalog(transport=transport).fetch_all()


class TestRecipeCatalog(unittest.TestCase):
    def test_find_by_nutrients(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(
                200,
                json=[
                    {"id": 716429, "title": "Pasta with Garlic", "calories": 584, "protein": "19g", "carbs": "84g", "fat": "20g"},
                    {"title": "no id"},
                ],
            )

        flt = RecipeFilter(min_calories=100, max_protein=40, number=5)
        recipes = RecipeCatalog(transport=httpx.MockTransport(handler)).find_by_nutrients(flt)
        self.assertEqual(seen["path"], "/recipes/findByNutrients")
        self.assertEqual(seen["params"]["minCalories"], "100.0")
        self.assertEqual(seen["params"]["maxProtein"], "40.0")
        self.assertEqual(seen["params"]["number"], "5")
        self.assertNotIn("maxFat", seen["params"])
        self.assertEqual(len(recipes), 1)
        self.assertEqual(recipes[0].id, "716429")
        self.assertEqual(recipes[0].protein, 19.0)
        self.assertEqual(recipes[0].recipe_url, "https://spoonacular.com/recipes/pasta-with-garlic-716429")


class TestPublicDatasetSource(unittest.TestCase):
    def setUp(self) -> None:
        cache_clear("datasets")
        self.requests = []

    def tearDown(self) -> None:
        cache_clear("datasets")

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/DIMENSION/COUNTRY/DimensionValues"):
            return httpx.Response(200, json={"value": [{"Code": "POL", "Title": "Poland"}, {"Code": "DEU", "Title": "Germany"}]})
        if path.endswith("/NCD_BMI_30A"):
            return httpx.Response(
                200,
                json={
                    "value": [
                        {"TimeDim": 2015, "Dim1": "SEX_BTSX", "Dim2": "AGEGROUP_YEARS18-PLUS", "NumericValue": 22.1},
                        {"TimeDim": 2015, "Dim1": "SEX_MLE", "Dim2": "AGEGROUP_YEARS18-PLUS", "NumericValue": 99.0},
                        {"TimeDim": 2016, "Dim1": "SEX_BTSX", "Dim2": "AGEGROUP_YEARS18-PLUS", "NumericValue": 22.9},
                        {"TimeDim": 2017, "Dim1": "SEX_BTSX", "NumericValue": None},
                    ]
                },
            )
        if path.endswith("/country"):
            return httpx.Response(
                200,
                json=[
                    {"page": 1},
                    [
                        {"id": "POL", "name": "Poland", "region": {"value": "Europe & Central Asia"}},
                        {"id": "XKX", "name": "Kosovo", "region": {"value": "Europe & Central Asia"}},
                    ],
                ],
            )
        if "/indicator/" in path:
            return httpx.Response(
                200,
                json=[{"page": 1}, [{"date": "2016", "value": 6.5}, {"date": "2015", "value": 6.3}, {"date": "2014", "value": None}]],
            )
        return httpx.Response(404)

    def test_series_and_countries(self) -> None:
        source = PublicDatasetSource(transport=httpx.MockTransport(self._handler))
        self.assertEqual(source.health_series("NCD_BMI_30A", "POL", 2015, 2017), {2015: 22.1, 2016: 22.9})
        self.assertEqual(source.economic_series("SH.XPD.CHEX.GD.ZS", "POL", 2015, 2017), {2015: 6.3, 2016: 6.5})
        self.assertEqual(source.countries(), [{"code": "POL", "name": "Poland", "region": "Europe & Central Asia"}])
        self.assertEqual(source.available_years(AnalysisType.obesity_vs_health_expenditure, "POL"), [2015, 2016])

    def test_responses_are_cached(self) -> None:
        source = PublicDatasetSource(transport=httpx.MockTransport(self._handler))
        source.health_series("NCD_BMI_30A", "POL", 2015, 2017)
        source.health_series("NCD_BMI_30A", "POL", 2015, 2017)
        self.assertEqual(len(self.requests), 1)

    def test_world_bank_error_payload_is_empty(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[{"message": [{"key": "Invalid value"}]}]))
        source = PublicDatasetSource(transport=transport)
        self.assertEqual(source.economic_series("NY.GDP.PCAP.CD", "ZZZ", 2000, 2001), {})


if __name__ == "__main__":
    unittest.main()
