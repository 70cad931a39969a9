"""Test the HTTP surface: /health, /bfhl and the error envelope."""
import logging

import pytest
from fastapi.testclient import TestClient

from qualifier.api.main import create_app
from qualifier.core.exceptions import AIUnavailable, InvalidRequest

from tests.conftest import TEST_EMAIL, FakeAIClient


def _assert_error(response, status_code: int) -> dict:
    assert response.status_code == status_code
    body = response.json()
    assert body["is_success"] is False
    assert body["official_email"] == TEST_EMAIL
    assert "error" in body
    assert "data" not in body
    return body


# ==================== HEALTH ====================

def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"is_success": True, "official_email": TEST_EMAIL}


def test_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health"] == "/health"


# ==================== OPERATIONS ====================

@pytest.mark.parametrize("body, expected", [
    ({"fibonacci": 7}, [0, 1, 1, 2, 3, 5, 8]),
    ({"fibonacci": 0}, []),
    ({"fibonacci": 1}, [0]),
    ({"prime": [2, 4, 7, 9, 11]}, [2, 7, 11]),
    ({"prime": []}, []),
    ({"lcm": [12, 18, 24]}, 72),
    ({"lcm": [4, 6]}, 12),
    ({"hcf": [24, 36, 60]}, 12),
    ({"hcf": [48, 18]}, 6),
])
def test_operation_success(client: TestClient, body, expected) -> None:
    response = client.post("/bfhl", json=body)
    assert response.status_code == 200
    assert response.json() == {
        "is_success": True,
        "official_email": TEST_EMAIL,
        "data": expected,
    }


def test_ai_success(client: TestClient, fake_ai: FakeAIClient) -> None:
    response = client.post("/bfhl", json={"AI": "What is the capital of France?"})
    assert response.status_code == 200
    assert response.json()["data"] == "Paris"
    assert fake_ai.questions == ["What is the capital of France?"]


def test_unrecognised_keys_do_not_count(client: TestClient) -> None:
    response = client.post("/bfhl", json={"hcf": [8, 12], "note": "ignored"})
    assert response.status_code == 200
    assert response.json()["data"] == 4


# ==================== ERRORS ====================

def test_no_operation_key(client: TestClient) -> None:
    body = _assert_error(client.post("/bfhl", json={}), 400)
    assert "No valid operation key" in body["error"]


def test_multiple_operation_keys(client: TestClient) -> None:
    body = _assert_error(client.post("/bfhl", json={"fibonacci": 5, "prime": [1, 2, 3]}), 400)
    assert "Multiple operation keys" in body["error"]


@pytest.mark.parametrize("body", [
    {"fibonacci": 1, "lcm": [2]},
    {"lcm": [2], "hcf": [2], "AI": "x"},
    {"fibonacci": 1, "prime": [2], "lcm": [2], "hcf": [2], "AI": "x"},
])
def test_any_extra_operation_key_is_rejected(client: TestClient, body) -> None:
    _assert_error(client.post("/bfhl", json=body), 400)


@pytest.mark.parametrize("body, message", [
    ({"fibonacci": -5}, "Input must be a non-negative integer"),
    ({"fibonacci": "5"}, "Fibonacci input must be a number"),
    ({"prime": "not an array"}, "Prime input must be an array"),
    ({"lcm": 12}, "LCM input must be an array"),
    ({"hcf": [1, "x"]}, "HCF input must be an array"),
    ({"lcm": []}, "Input must be a non-empty array"),
    ({"hcf": [0, 5]}, "All elements must be positive integers"),
    ({"AI": 42}, "AI input must be a string"),
])
def test_validation_errors(client: TestClient, body, message) -> None:
    assert _assert_error(client.post("/bfhl", json=body), 400)["error"] == message


@pytest.mark.parametrize("content", [b"[1, 2, 3]", b"null", b"{not json"])
def test_body_must_be_json_object(client: TestClient, content) -> None:
    response = client.post(
        "/bfhl", content=content, headers={"Content-Type": "application/json"}
    )
    assert _assert_error(response, 400)["error"] == "Request body must be a JSON object"


def test_ai_unavailable_maps_to_503(settings) -> None:
    fake = FakeAIClient(error=AIUnavailable())
    client = TestClient(create_app(settings, ai_client=fake))
    body = _assert_error(client.post("/bfhl", json={"AI": "anything"}), 503)
    assert body["error"] == "AI service unavailable"


def test_ai_invalid_question_maps_to_400(settings) -> None:
    fake = FakeAIClient(error=InvalidRequest("Question must be a non-empty string"))
    client = TestClient(create_app(settings, ai_client=fake))
    body = _assert_error(client.post("/bfhl", json={"AI": "   "}), 400)
    assert body["error"] == "Question must be a non-empty string"


def test_unexpected_failure_maps_to_500(settings) -> None:
    fake = FakeAIClient(error=RuntimeError("socket exploded with secret details"))
    client = TestClient(create_app(settings, ai_client=fake))
    body = _assert_error(client.post("/bfhl", json={"AI": "anything"}), 500)
    assert body["error"] == "Internal server error"


def test_audit_header_present(client: TestClient) -> None:
    response = client.post("/bfhl", json={"fibonacci": 3})
    assert response.headers["X-Response-Time"].endswith("s")


def test_rejected_field_is_logged(client: TestClient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="qualifier.api.main"):
        client.post("/bfhl", json={"AI": 42})
    assert "kind=invalid_request" in caplog.text
    assert "field=AI" in caplog.text
