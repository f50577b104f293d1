# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import os
import shutil
import sys
import tempfile
import unittest
import uuid
from pathlib import Path
from unittest import mock

import yaml
from fastapi.testclient import TestClient

_EXERCISES = [
    {"id": "0025", "name": "barbell bench press", "bodyPart": "chest", "equipment": "barbell", "target": "pectorals"},
    {"id": "0043", "name": "barbell full squat", "bodyPart": "upper legs", "equipment": "barbell", "target": "glutes"},
    {"id": "1512", "name": "all fours squad stretch", "bodyPart": "upper legs", "equipment": "body weight", "target": "quads"},
]


class _FakeExerciseCatalog:
    def __init__(self) -> None:
        self.calls = 0

    def fetch_all(self):
        from fittrack.catalog.models import CatalogExercise  # noqa: WPS433

        self.calls += 1
        return tuple(CatalogExercise.model_validate(r) for r in _EXERCISES)


class _FakeDatasetSource:
    health = {2015: 20.1, 2016: 20.8, 2017: 21.4, 2018: 22.0}
    economic = {2015: 6.3, 2016: 6.5, 2017: 6.6, 2018: 6.9}

    def health_series(self, indicator, country, start, end):
        if country != "POL":
            return {}
        return {y: v for y, v in self.health.items() if start <= y <= end}

    def economic_series(self, indicator, country, start, end):
        if country != "POL":
            return {}
        return {y: v for y, v in self.economic.items() if start <= y <= end}

    def countries(self):
        return [{"code": "POL", "name": "Poland", "region": "Europe & Central Asia"}]

    def available_years(self, analysis_type, country):
        return sorted(set(self.health) & set(self.economic)) if country == "POL" else []


def _training_payload(name: str = "Leg Day", **extra) -> dict:
    payload = {
        "name": name,
        "description": "Lower body",
        "days": [
            {
                "dayOfWeek": "Monday",
                "name": "Monday - Training",
                "order": 1,
                "exercises": [
                    {"order": 1, "sourceId": "0043", "name": "barbell full squat", "sets": 5, "reps": 5, "weight": 100},
                ],
            }
        ],
    }
    payload.update(extra)
    return payload


class TestFitTrackApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="fittrack-test-"))
        data_root = cls._tmp / "data"
        os.environ["FITTRACK_DATA_ROOT"] = str(data_root)
        os.environ["FITTRACK_DB_PATH"] = str(data_root / "fittrack.db")
        os.environ["FITTRACK_JWT_SECRET"] = "test-secret"
        os.environ["FITTRACK_LOCALE"] = "en"

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "fittrack" or name.startswith("fittrack."):
                sys.modules.pop(name, None)

        from fittrack.analytics.datasets import get_dataset_source  # noqa: WPS433
        from fittrack.api import app  # noqa: WPS433
        from fittrack.catalog.api import get_exercise_catalog  # noqa: WPS433

        cls.app = app
        cls.exercise_catalog = _FakeExerciseCatalog()
        app.dependency_overrides[get_dataset_source] = _FakeDatasetSource
        app.dependency_overrides[get_exercise_catalog] = lambda: cls.exercise_catalog

    @classmethod
    def tearDownClass(cls) -> None:
        cls.app.dependency_overrides.clear()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _client(self) -> TestClient:
        client = TestClient(self.app)
        email = f"{uuid.uuid4().hex[:12]}@example.com"
        resp = client.post("/api/auth/register", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.addCleanup(client.close)
        return client

    # ---- Auth ----

    def test_auth_required(self) -> None:
        unauth = TestClient(self.app)
        self.addCleanup(unauth.close)
        for path in ("/api/training-plans", "/api/progress", "/api/analyses", "/api/catalog/exercises"):
            with self.subTest(path=path):
                self.assertEqual(unauth.get(path).status_code, 401)
        self.assertEqual(unauth.get("/api/health").status_code, 200)
        resp = unauth.get("/api/diet-plans", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(resp.status_code, 401)

    def test_auth_errors_are_localized(self) -> None:
        unauth = TestClient(self.app)
        self.addCleanup(unauth.close)
        resp = unauth.get("/api/training-plans", headers={"Accept-Language": "pl-PL,pl;q=0.9"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Brak uwierzytelnienia. Zaloguj się.")
        self.assertEqual(resp.json()["error"], "AuthError")

        resp = unauth.get("/api/training-plans", headers={"Authorization": "Bearer not.a.token", "Accept-Language": "pl"})
        self.assertEqual(resp.json()["detail"], "Token sesji jest nieprawidłowy.")
        resp = unauth.get("/api/training-plans", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(resp.json()["detail"], "The session token is invalid.")

        resp = unauth.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "password123"},
            headers={"Accept-Language": "pl"},
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Nieprawidłowy e-mail lub hasło.")

    def test_login_logout_and_profile(self) -> None:
        client = TestClient(self.app)
        self.addCleanup(client.close)
        email = f"{uuid.uuid4().hex[:12]}@example.com"
        resp = client.post("/api/auth/register", json={"email": email, "password": "password123", "username": "ania"})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]
        self.assertEqual(client.post("/api/auth/register", json={"email": email, "password": "password123"}).status_code, 400)

        bearer = TestClient(self.app)
        self.addCleanup(bearer.close)
        resp = bearer.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["username"], "ania")

        resp = client.put("/api/profile/change-password", json={"currentPassword": "wrong-one", "newPassword": "password456"})
        self.assertEqual(resp.status_code, 400)
        resp = client.put("/api/profile/change-password", json={"currentPassword": "password123", "newPassword": "password456"})
        self.assertEqual(resp.status_code, 200)

        self.assertEqual(client.post("/api/auth/logout").status_code, 200)
        self.assertEqual(client.get("/api/auth/me").status_code, 401)
        resp = client.post("/api/auth/login", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 401)
        resp = client.post("/api/auth/login", json={"email": email, "password": "password456"})
        self.assertEqual(resp.status_code, 200)

    # ---- Plans ----

    def test_duplicate_names_are_rejected(self) -> None:
        client = self._client()
        resp = client.post("/api/training-plans", json=_training_payload("Leg Day"))
        self.assertEqual(resp.status_code, 201)
        plan_id = resp.json()["id"]

        resp = client.post("/api/training-plans", json=_training_payload("  leg   DAY "))
        self.assertEqual(resp.status_code, 409)
        body = resp.json()
        self.assertEqual(body["error"], "DuplicateNameError")
        self.assertEqual(body["conflictId"], plan_id)

        resp = client.post(
            "/api/training-plans",
            json=_training_payload("Leg day"),
            headers={"Accept-Language": "pl-PL,pl;q=0.9"},
        )
        self.assertEqual(resp.status_code, 409)
        self.assertTrue(resp.json()["detail"].startswith("Plan o nazwie"))

        # Same name is fine for the other plan kind and when editing the plan itself.
        self.assertEqual(client.post("/api/diet-plans", json={"name": "Leg Day"}).status_code, 201)
        resp = client.put(f"/api/training-plans/{plan_id}", json=_training_payload("LEG DAY"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["name"], "LEG DAY")

    def test_incomplete_plans_are_not_saved(self) -> None:
        client = self._client()
        payload = _training_payload("Broken")
        payload["days"][0]["name"] = ""
        resp = client.post("/api/training-plans", json=payload)
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["error"], "IncompleteDayError")
        self.assertIn("days[0].name", body["fields"])

        payload = _training_payload("Broken")
        payload["days"][0]["exercises"][0]["sets"] = "many"
        resp = client.post("/api/training-plans", json=payload)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "IncompleteItemError")

        self.assertEqual(client.post("/api/training-plans", json={"name": " "}).status_code, 400)
        self.assertEqual(client.get("/api/training-plans").json(), [])

    def test_plan_crud_and_activation(self) -> None:
        client = self._client()
        first = client.post("/api/training-plans", json=_training_payload("Push")).json()
        second = client.post("/api/training-plans", json=_training_payload("Pull", isActive=True)).json()
        self.assertFalse(first["isActive"])
        self.assertTrue(second["isActive"])

        resp = client.post(f"/api/training-plans/{first['id']}/activate")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["isActive"])
        active = {p["name"]: p["isActive"] for p in client.get("/api/training-plans").json()}
        self.assertEqual(active, {"Push": True, "Pull": False})

        resp = client.get(f"/api/training-plans/{first['id']}")
        self.assertEqual(resp.json()["days"][0]["exercises"][0]["weight"], 100.0)
        self.assertEqual(client.get(f"/api/diet-plans/{first['id']}").status_code, 404)

        self.assertEqual(client.delete(f"/api/training-plans/{first['id']}").json(), {"status": "ok"})
        self.assertEqual(client.get(f"/api/training-plans/{first['id']}").status_code, 404)
        self.assertEqual(client.delete(f"/api/training-plans/{first['id']}").status_code, 404)

        other = self._client()
        self.assertEqual(other.get(f"/api/training-plans/{second['id']}").status_code, 404)

    def test_days_and_items(self) -> None:
        client = self._client()
        plan_id = client.post("/api/training-plans", json={"name": "Split"}).json()["id"]
        base = f"/api/training-plans/{plan_id}"

        resp = client.post(f"{base}/days")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["days"][0]["name"], "Monday - Training")
        resp = client.post(f"{base}/days", headers={"Accept-Language": "pl"})
        self.assertEqual(resp.json()["days"][1]["name"], "Wtorek - Trening")

        resp = client.put(f"{base}/days/0", json={"dayOfWeek": "Friday"})
        self.assertEqual(resp.json()["days"][0]["name"], "Friday - Training")
        client.put(f"{base}/days/1", json={"name": "Arms"})
        resp = client.put(f"{base}/days/1", json={"dayOfWeek": "Sunday"})
        day = resp.json()["days"][1]
        self.assertEqual((day["dayOfWeek"], day["name"], day["nameManuallyEdited"]), ("Sunday", "Arms", True))

        items = f"{base}/days/0/items"
        resp = client.post(items, json={"record": {"id": "0043", "name": "barbell full squat", "bodyPart": "upper legs"}})
        self.assertEqual(resp.status_code, 201)
        client.post(items, json={"custom": True, "record": {"name": "Plank", "sets": 3, "reps": 1}})
        client.post(items, json={"record": {"id": "0025", "name": "barbell bench press"}})

        resp = client.post(f"{items}/2/move", params={"direction": "up"})
        exercises = resp.json()["days"][0]["exercises"]
        self.assertEqual([e["name"] for e in exercises], ["barbell full squat", "barbell bench press", "Plank"])
        self.assertEqual([e["order"] for e in exercises], [1, 2, 3])
        self.assertTrue(exercises[2]["sourceId"].startswith("custom-"))
        self.assertEqual(client.post(f"{items}/0/move", params={"direction": "sideways"}).status_code, 422)

        resp = client.put(f"{items}/0", json={"record": {"id": "1512", "name": "all fours squad stretch"}})
        self.assertEqual(resp.json()["days"][0]["exercises"][0]["sourceId"], "1512")
        resp = client.delete(f"{items}/1")
        self.assertEqual([e["order"] for e in resp.json()["days"][0]["exercises"]], [1, 2])
        self.assertEqual(client.delete(f"{items}/9").status_code, 404)
        self.assertEqual(client.post(items, json={"custom": True, "record": {"name": ""}}).status_code, 400)

        resp = client.delete(f"{base}/days/0")
        days = resp.json()["days"]
        self.assertEqual([(d["name"], d["order"]) for d in days], [("Arms", 1)])
        self.assertEqual(client.put(f"{base}/days/4", json={"name": "x"}).status_code, 404)

    def test_diet_items(self) -> None:
        client = self._client()
        plan_id = client.post("/api/diet-plans", json={"name": "Cut"}).json()["id"]
        base = f"/api/diet-plans/{plan_id}"
        client.post(f"{base}/days")
        resp = client.post(
            f"{base}/days/0/items",
            json={"record": {"id": 716429, "title": "Pasta", "calories": 584, "protein": "19g", "carbs": 84, "fat": 20}},
        )
        self.assertEqual(resp.status_code, 201)
        meal = resp.json()["days"][0]["meals"][0]
        self.assertEqual((meal["sourceId"], meal["protein"]), ("716429", 19.0))

        resp = client.post(f"{base}/days/0/items", json={"custom": True, "record": {"title": "Water"}})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "IncompleteItemError")
        self.assertEqual(len(client.get(base).json()["days"][0]["meals"]), 1)

    # ---- Import / export ----

    def test_export_then_import_with_each_strategy(self) -> None:
        client = self._client()
        plan_id = client.post("/api/training-plans", json=_training_payload("Leg Day", isActive=True)).json()["id"]

        resp = client.get(f"/api/training-plans/{plan_id}/export", params={"format": "yaml"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn('filename="training-plan-Leg-Day.yaml"', resp.headers["content-disposition"])
        document = yaml.safe_load(resp.content)
        self.assertEqual(document["planType"], "training")
        self.assertNotIn("id", document)
        self.assertEqual(client.get(f"/api/training-plans/{plan_id}/export", params={"format": "csv"}).status_code, 400)

        upload = {"file": ("leg-day.yaml", resp.content, "application/x-yaml")}
        resp = client.post("/api/training-plans/import", files=upload, data={"duplicateStrategy": "reject"})
        self.assertEqual(resp.status_code, 409)

        resp = client.post("/api/training-plans/import", files=upload)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["renamed"])
        self.assertEqual(body["duplicateStrategy"], "prefix")
        self.assertEqual(body["plan"]["name"], "Copy - Leg Day")
        self.assertFalse(body["plan"]["isActive"])
        self.assertNotEqual(body["plan"]["id"], plan_id)

        resp = client.post("/api/training-plans/import", files=upload)
        self.assertEqual(resp.json()["plan"]["name"], "Copy (2) - Leg Day")

        changed = dict(document, description="Imported over the top")
        resp = client.post(
            "/api/training-plans/import",
            files={"file": ("leg-day.json", json.dumps(changed).encode("utf-8"), "application/json")},
            data={"duplicateStrategy": "replace"},
        )
        body = resp.json()
        self.assertTrue(body["replaced"])
        self.assertEqual(body["plan"]["id"], plan_id)
        self.assertTrue(body["plan"]["isActive"])
        self.assertEqual(client.get(f"/api/training-plans/{plan_id}").json()["description"], "Imported over the top")
        self.assertEqual(len(client.get("/api/training-plans").json()), 3)

    def test_import_errors(self) -> None:
        client = self._client()
        resp = client.post("/api/diet-plans/import", files={"file": ("plan.csv", b"a,b", "text/csv")})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "UnsupportedFormatError")

        resp = client.post("/api/diet-plans/import", files={"file": ("plan.json", b"{oops", "application/json")})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "ImportParseError")

        training = json.dumps({"planType": "training", "name": "Legs"}).encode("utf-8")
        resp = client.post("/api/diet-plans/import", files={"file": ("plan.json", training, "application/json")})
        self.assertEqual(resp.status_code, 400)

        xml = b"<dietPlan><name>Lean</name><days><day><dayOfWeek>Monday</dayOfWeek><name>Monday - Diet</name><order>1</order><meals /></day></days></dietPlan>"
        resp = client.post("/api/diet-plans/import", files={"file": ("lean.xml", xml, "application/xml")})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["format"], "xml")
        self.assertEqual(resp.json()["plan"]["days"][0]["meals"], [])

    def test_oversized_import_is_rejected(self) -> None:
        from fittrack.config import settings  # noqa: WPS433

        client = self._client()
        content = b" " * (1024 * 1024 + 1)
        with mock.patch.object(settings, "max_upload_mb", 1):
            resp = client.post("/api/training-plans/import", files={"file": ("big.json", content, "application/json")})
        self.assertEqual(resp.status_code, 413)
        self.assertEqual(resp.json()["error"], "UploadTooLargeError")
        self.assertEqual(client.get("/api/training-plans").json(), [])

    # ---- Catalog ----

    def test_catalog_lookups_use_the_session_snapshot(self) -> None:
        client = self._client()
        calls_before = self.exercise_catalog.calls
        resp = client.get("/api/catalog/exercises", params={"bodyPart": "upper legs", "equipment": "barbell"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 1)
        self.assertEqual(resp.json()["items"][0]["id"], "0043")
        self.assertEqual(client.get("/api/catalog/body-parts").json(), ["chest", "upper legs"])
        self.assertEqual(client.get("/api/catalog/targets").json(), ["pectorals", "glutes", "quads"])
        self.assertEqual(self.exercise_catalog.calls, calls_before + 1)
        self.assertEqual(client.get("/api/catalog/recipes", params={"minCalories": -1}).status_code, 422)

    # ---- Progress ----

    def test_progress(self) -> None:
        client = self._client()
        resp = client.post("/api/progress", json={"date": "2026-01-02", "weight": 80.5, "trainingTime": 45})
        self.assertEqual(resp.status_code, 201)
        entry = resp.json()
        self.assertEqual(entry["trainingTime"], 45)
        client.post("/api/progress", json={"date": "2025-12-30", "weight": 81, "trainingTime": 30})

        for bad in ({"weight": 29.9, "trainingTime": 30}, {"weight": 80, "trainingTime": 241}, {"weight": 80, "trainingTime": 30, "date": "yesterday"}):
            with self.subTest(payload=bad):
                self.assertEqual(client.post("/api/progress", json=bad).status_code, 422)

        resp = client.put(f"/api/progress/{entry['id']}", json={"weight": 79.0, "trainingTime": 50})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["date"], "2026-01-02")
        self.assertEqual(resp.json()["weight"], 79.0)

        dates = [e["date"] for e in client.get("/api/progress").json()]
        self.assertEqual(dates, ["2025-12-30", "2026-01-02"])

        self.assertEqual(client.put("/api/progress/missing", json={"weight": 79, "trainingTime": 50}).status_code, 404)
        self.assertEqual(client.delete(f"/api/progress/{entry['id']}").status_code, 200)
        self.assertEqual(client.delete(f"/api/progress/{entry['id']}").status_code, 404)
        self.assertEqual(len(client.get("/api/progress").json()), 1)

    # ---- Analytics ----

    def test_analytics_lookups_and_run(self) -> None:
        client = self._client()
        types = client.get("/api/analytics/analysis-types").json()
        self.assertEqual(len(types), 4)
        self.assertEqual(client.get("/api/analytics/countries").json()[0]["code"], "POL")

        resp = client.get(
            "/api/analytics/available-years",
            params={"countryCode": "pol", "analysisType": "obesity_vs_health_expenditure"},
        )
        self.assertEqual(resp.json(), {"minYear": 2015, "maxYear": 2018, "availableYears": [2015, 2016, 2017, 2018]})

        request = {"analysisType": "obesity_vs_health_expenditure", "countryCode": "POL", "yearStart": 2015, "yearEnd": 2018}
        resp = client.post("/api/analytics/run", json=request)
        self.assertEqual(resp.status_code, 200)
        result = resp.json()
        self.assertEqual(len(result["data"]), 4)
        self.assertEqual(result["band"], "strong")
        self.assertEqual(result["direction"], "positive")
        self.assertEqual(result["trend"], "both_increase")

        resp = client.post("/api/analytics/run", json=dict(request, countryCode="DEU"))
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["error"], "InsufficientDataError")
        resp = client.post("/api/analytics/run", json=dict(request, yearStart=2019))
        self.assertEqual(resp.status_code, 400)

    def test_saved_analyses(self) -> None:
        client = self._client()
        request = {
            "name": "Poland obesity",
            "analysisType": "obesity_vs_health_expenditure",
            "countryCode": "POL",
            "countryName": "Poland",
            "yearStart": 2015,
            "yearEnd": 2018,
        }
        created = []
        for index in range(3):
            resp = client.post("/api/analyses", json=dict(request, name=f"Run {index}"))
            self.assertEqual(resp.status_code, 201)
            created.append(resp.json())
        self.assertEqual(created[0]["countryName"], "Poland")
        self.assertEqual(created[0]["result"]["countryCode"], "POL")

        page = client.get("/api/analyses", params={"page": 2, "limit": 2}).json()
        self.assertEqual(page["pagination"], {"total": 3, "page": 2, "limit": 2, "pages": 2})
        self.assertEqual(len(page["items"]), 1)

        analysis_id = created[0]["id"]
        resp = client.put(f"/api/analyses/{analysis_id}", json={"name": "Renamed"})
        self.assertEqual(resp.json()["name"], "Renamed")
        self.assertEqual(client.get(f"/api/analyses/{analysis_id}").json()["name"], "Renamed")

        self.assertEqual(self._client().get(f"/api/analyses/{analysis_id}").status_code, 404)
        self.assertEqual(client.delete(f"/api/analyses/{analysis_id}").status_code, 200)
        resp = client.get(f"/api/analyses/{analysis_id}", headers={"Accept-Language": "pl"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Nie znaleziono: analiza.")

    def test_analysis_export_and_import(self) -> None:
        client = self._client()
        request = {
            "name": "Poland obesity",
            "analysisType": "obesity_vs_health_expenditure",
            "countryCode": "POL",
            "countryName": "Poland",
            "yearStart": 2015,
            "yearEnd": 2018,
        }
        saved = client.post("/api/analyses", json=request).json()
        self.assertTrue(saved["result"]["conclusion"])

        resp = client.get(f"/api/analyses/{saved['id']}/export", params={"format": "xml"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn('filename="analysis-Poland-obesity.xml"', resp.headers["content-disposition"])
        self.assertEqual(client.get(f"/api/analyses/{saved['id']}/export", params={"format": "csv"}).status_code, 400)
        self.assertEqual(client.get("/api/analyses/missing/export").status_code, 404)

        upload = {"file": ("poland.xml", resp.content, "application/xml")}
        resp = client.post("/api/analyses/import", files=upload, data={"duplicateStrategy": "reject"})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["detail"], 'An analysis named "Poland obesity" already exists.')

        resp = client.post("/api/analyses/import", files=upload, headers={"Accept-Language": "pl"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["renamed"])
        self.assertEqual(body["format"], "xml")
        copy = body["analysis"]
        self.assertEqual(copy["name"], "Kopia - Poland obesity")
        self.assertNotEqual(copy["id"], saved["id"])
        self.assertEqual(copy["countryName"], "Poland")
        self.assertEqual(copy["result"]["data"], saved["result"]["data"])
        self.assertAlmostEqual(copy["result"]["correlation"], saved["result"]["correlation"])
        self.assertTrue(copy["result"]["conclusion"].startswith("Dodatnia korelacja"))

        document = yaml.safe_load(client.get(f"/api/analyses/{saved['id']}/export", params={"format": "yaml"}).content)
        document["data"] = document["data"][:2]
        resp = client.post(
            "/api/analyses/import",
            files={"file": ("poland.yaml", yaml.safe_dump(document).encode("utf-8"), "application/x-yaml")},
            data={"duplicateStrategy": "replace"},
        )
        body = resp.json()
        self.assertTrue(body["replaced"])
        self.assertEqual(body["analysis"]["id"], saved["id"])
        self.assertEqual(len(client.get(f"/api/analyses/{saved['id']}").json()["result"]["data"]), 2)
        self.assertEqual(client.get("/api/analyses").json()["pagination"]["total"], 2)

        resp = client.post("/api/analyses/import", files={"file": ("poland.json", b"{}", "application/json")})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "AnalysisImportError")


if __name__ == "__main__":
    unittest.main()
