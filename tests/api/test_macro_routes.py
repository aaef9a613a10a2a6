"""
Tests for the macro API routes.

Tests cover:
- Target calculation with metric and imperial units
- Boundary validation (422 from schemas, 400 from services)
- Reference data endpoints
- Health endpoints
"""

import json

import pytest

from fastapi.testclient import TestClient

from fitness_planner.api.deps import get_macro_service
from fitness_planner.config import Settings
from fitness_planner.main import app
from fitness_planner.services.macro_service import MacroService


# ============================================================================
# Test Client Setup
# ============================================================================

@pytest.fixture
def client():
    """Test client with a macro service isolated from .env settings."""
    service = MacroService(settings=Settings(_env_file=None))
    app.dependency_overrides[get_macro_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def metric_body():
    return {
        "age": 25,
        "sex": "male",
        "height_cm": 180,
        "weight": 80,
        "activity_level": "sedentary",
        "weight_goal": "maintain",
        "macro_preference": "balanced",
    }


# ============================================================================
# Test Calculate Endpoint
# ============================================================================

class TestCalculateMacros:
    """Tests for POST /api/v1/macros/calculate."""

    def test_metric_request(self, client, metric_body):
        response = client.post("/api/v1/macros/calculate", json=metric_body)
        assert response.status_code == 200
        data = response.json()
        assert data["targets"] == {
            "bmr": 1805,
            "tdee": 2166,
            "target_calories": 2166,
            "protein_g": 160,
            "carbs_g": 246,
            "fat_g": 60,
            "warnings": [],
        }
        assert data["height_cm"] == 180
        assert "calculated_at" in data

    def test_imperial_request(self, client):
        response = client.post("/api/v1/macros/calculate", json={
            "age": 25,
            "sex": "male",
            "height_feet": 5,
            "height_inches": 10,
            "weight": 176.4,
            "weight_unit": "lbs",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["height_cm"] == pytest.approx(177.8)
        assert data["weight_kg"] == pytest.approx(80.01, abs=0.01)

    def test_weight_loss_lowers_target(self, client, metric_body):
        maintain = client.post("/api/v1/macros/calculate", json=metric_body).json()
        metric_body.update(weight_goal="lose", weight_change_rate=0.5)
        lose = client.post("/api/v1/macros/calculate", json=metric_body).json()
        assert maintain["targets"]["target_calories"] - lose["targets"]["target_calories"] == 550

    def test_carb_warning_reported(self, client):
        response = client.post("/api/v1/macros/calculate", json={
            "age": 80,
            "sex": "female",
            "height_cm": 150,
            "weight": 150,
            "weight_goal": "lose",
            "weight_change_rate": 1.0,
            "macro_preference": "low_carb",
        })
        assert response.status_code == 200
        targets = response.json()["targets"]
        assert targets["carbs_g"] == 0
        assert targets["warnings"] == ["carb_calories_negative"]

    def test_missing_height(self, client, metric_body):
        del metric_body["height_cm"]
        response = client.post("/api/v1/macros/calculate", json=metric_body)
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("field,value", [
        ("age", 14),
        ("sex", "other"),
        ("activity_level", "athlete"),
        ("weight", 0),
        ("weight_change_rate", -1),
    ])
    def test_schema_rejects(self, client, metric_body, field, value):
        metric_body[field] = value
        response = client.post("/api/v1/macros/calculate", json=metric_body)
        assert response.status_code == 422
        errors = response.json()["error"]["details"]["errors"]
        assert any(field in e["field"] for e in errors)

    @pytest.mark.parametrize("changes,field", [
        ({"weight": float("inf")}, "weight"),
        ({"weight": float("nan")}, "weight"),
        ({"height_cm": float("inf")}, "height_cm"),
        ({"weight_goal": "lose", "weight_change_rate": float("inf")}, "weight_change_rate"),
        ({"height_cm": None, "height_feet": 5, "height_inches": float("inf")}, "height_inches"),
    ])
    def test_non_finite_numbers_rejected(self, client, metric_body, changes, field):
        """Infinity/NaN literals in the JSON body are a 422, not a server error."""
        metric_body.update(changes)
        body = json.dumps(metric_body)
        assert "Infinity" in body or "NaN" in body
        response = client.post(
            "/api/v1/macros/calculate",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(e["field"] == field for e in error["details"]["errors"])

    def test_out_of_range_height(self, client, metric_body):
        metric_body["height_cm"] = 90
        response = client.post("/api/v1/macros/calculate", json=metric_body)
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_BIOMETRICS"
        assert error["details"]["field"] == "height_cm"


# ============================================================================
# Test Reference Data Endpoints
# ============================================================================

class TestReferenceEndpoints:
    """Tests for activity level and weight change rate listings."""

    def test_activity_levels(self, client):
        response = client.get("/api/v1/macros/activity-levels")
        assert response.status_code == 200
        levels = response.json()
        assert len(levels) == 5
        assert levels[2] == {
            "value": "moderately_active",
            "multiplier": 1.55,
            "label": "Moderately Active",
            "description": "Moderate exercise or sports 3-5 days per week",
        }

    def test_weight_change_rates(self, client):
        response = client.get("/api/v1/macros/weight-change-rates/lose")
        assert response.status_code == 200
        assert [r["value"] for r in response.json()] == [0.25, 0.5, 0.75, 1.0]

    def test_unknown_goal(self, client):
        response = client.get("/api/v1/macros/weight-change-rates/bulk")
        assert response.status_code == 422


class TestHealth:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        data = client.get("/").json()
        assert data["status"] == "healthy"
        assert data["version"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
