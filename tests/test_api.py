"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from nutrition_logger.api.app import create_app
from nutrition_logger.domain.errors import TransportError
from tests.conftest import FakeEstimationClient


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_estimate_ingredient(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/estimate/ingredient", json={"name": "rice", "unit": "g", "quantity": 100}
    )

    assert response.status_code == 200
    assert response.json() == {
        "calories": 500.0,
        "protein": 30.0,
        "carbs": 40.0,
        "fat": 20.0,
    }


def test_status_reports_update_recommendation(
    container, estimation_client: FakeEstimationClient
) -> None:
    client = TestClient(create_app(container))
    estimation_client.queued.extend([TransportError("down")] * 3)

    for _ in range(3):
        response = client.post("/estimate/dish", json={"name": "stew"})
        assert response.json()["calories"] == 350

    status = client.get("/status").json()
    assert status == {"update_recommended": True, "consecutive_failures": 3}

    dismissed = client.post("/status/dismiss").json()
    assert dismissed["update_recommended"] is False


def test_quick_dish(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/dishes/quick", json={"name": "Chicken Caesar Salad", "servings": 1}
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["ingredients"]) == 4
    assert data["total_calories"] == 500


def test_quick_dish_rejects_zero_servings(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/dishes/quick", json={"name": "Soup", "servings": 0})

    assert response.status_code == 422


def test_scale_quantity(container) -> None:
    client = TestClient(create_app(container))
    body = {
        "quantity": 100,
        "nutrition": {"calories": 200, "protein": 10, "carbs": 20, "fat": 5},
        "new_quantity": 150,
    }

    response = client.post("/scale/quantity", json=body)

    assert response.json() == {
        "calories": 300.0,
        "protein": 15.0,
        "carbs": 30.0,
        "fat": 7.5,
    }


def test_scale_quantity_manual_override(container) -> None:
    client = TestClient(create_app(container))
    body = {
        "quantity": 100,
        "nutrition": {"calories": 200},
        "new_quantity": 150,
        "candidate": {"calories": 250},
    }

    response = client.post("/scale/quantity", json=body)

    assert response.json()["calories"] == 250


def test_scale_quantity_zero_original(container) -> None:
    client = TestClient(create_app(container))
    body = {"quantity": 0, "nutrition": {"calories": 200}, "new_quantity": 150}

    response = client.post("/scale/quantity", json=body)

    assert response.status_code == 422


def test_scale_servings(container) -> None:
    client = TestClient(create_app(container))
    body = {
        "ingredients": [
            {
                "id": "a",
                "name": "Rice",
                "unit": "g",
                "quantity": 100,
                "nutrition": {"calories": 130, "protein": 2, "carbs": 28, "fat": 0},
            }
        ],
        "multiplier": 2,
    }

    response = client.post("/scale/servings", json=body)

    item = response.json()["ingredients"][0]
    assert item["quantity"] == 200
    assert item["nutrition"]["calories"] == 260


def test_library_ingredients(container) -> None:
    client = TestClient(create_app(container))

    created = client.post("/library/ingredients", json={"name": "Oats", "unit": "g"})
    listed = client.get("/library/ingredients")

    assert created.status_code == 200
    assert listed.json()["ingredients"][0]["name"] == "Oats"


def test_goals(container) -> None:
    client = TestClient(create_app(container))
    body = {
        "weight": 70,
        "height": 175,
        "age": 30,
        "gender": "male",
        "activity_level": "moderately active",
        "goal": "maintain",
    }

    response = client.post("/goals", json=body)

    assert response.json()["calories"] == 2152


def test_estimate_dish_rejects_negative_servings(
    container, estimation_client: FakeEstimationClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/estimate/dish", json={"name": "stew", "servings": -2})

    assert response.status_code == 422
    assert estimation_client.calls == []


def test_quick_dish_with_infinite_estimate_falls_back(
    container, estimation_client: FakeEstimationClient
) -> None:
    client = TestClient(create_app(container))
    estimation_client.response = '{"calories": 1e999, "protein": 1}'

    response = client.post(
        "/dishes/quick", json={"name": "Chicken Caesar Salad", "servings": 1}
    )

    assert response.status_code == 200
    assert response.json()["total_calories"] == 350
    assert client.get("/status").json()["consecutive_failures"] == 1


def test_estimate_meal_photo(
    container, estimation_client: FakeEstimationClient
) -> None:
    client = TestClient(create_app(container))
    estimation_client.response = "720"

    response = client.post("/estimate/meal-photo", json={"image_base64": "abcd"})

    assert response.json() == {
        "calories": 720.0,
        "protein": 0.0,
        "carbs": 0.0,
        "fat": 0.0,
    }


def test_photo_meal(container, estimation_client: FakeEstimationClient) -> None:
    client = TestClient(create_app(container))
    estimation_client.response = "not sure"

    response = client.post(
        "/meals/photo",
        json={"image_base64": "abcd", "day": "2026-10-17", "name": "Dinner"},
    )

    data = response.json()
    assert response.status_code == 200
    assert data["day"] == "2026-10-17"
    assert data["total_calories"] == 350
    assert data["ingredients"][0]["name"] == "Dinner (estimated)"
