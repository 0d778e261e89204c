"""Tests for the @validate_request decorator."""

import pytest
from flask import Blueprint, jsonify
from pydantic import BaseModel, Field

from inkpost_core.main import app
from inkpost_core.api.validation import validate_request


# Test Pydantic schemas
class MockCreateRequest(BaseModel):
    """Test schema for request body validation."""
    name: str = Field(..., description="Name field")
    amount: float = Field(..., description="Amount field")
    category: str | None = Field(default=None, description="Optional category")


class MockSecretRequest(BaseModel):
    username: str
    password: str
    age: int


test_validation_bp = Blueprint("validation_test_routes", __name__)


@test_validation_bp.post("/test/valid")
@validate_request
def route_valid(data: MockCreateRequest):
    return jsonify({
        "name": data.name,
        "amount": data.amount,
        "category": data.category
    }), 200


@test_validation_bp.post("/test/secret")
@validate_request
def route_secret(data: MockSecretRequest):
    return jsonify({"status": "ok"}), 200


@test_validation_bp.get("/test/path/<uuid>")
@validate_request
def route_path_param(uuid: str):
    return jsonify({"uuid": uuid}), 200


# Register blueprint on app module import
app.register_blueprint(test_validation_bp)


@pytest.fixture
def validation_client():
    """Create test client with validation test routes."""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_validates_valid_request_body(validation_client):
    response = validation_client.post(
        "/test/valid",
        json={"name": "Test", "amount": 100.50, "category": "Food"}
    )

    assert response.status_code == 200
    assert response.get_json() == {"name": "Test", "amount": 100.50, "category": "Food"}


def test_validates_with_optional_field_omitted(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Test", "amount": 50.0})

    assert response.status_code == 200
    assert response.get_json()["category"] is None


def test_missing_required_field_reports_field(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Test"})

    assert response.status_code == 400
    data = response.get_json()
    assert data["message"] == "Invalid request data"

    errors = data["details"]["errors"]
    assert any(e["field"] == "amount" for e in errors)


def test_error_details_include_field_message_and_expected_type(validation_client):
    response = validation_client.post("/test/valid", json={"amount": "not_a_number"})

    assert response.status_code == 400
    for error in response.get_json()["details"]["errors"]:
        assert "field" in error
        assert "message" in error
        assert "expected_type" in error


def test_empty_json_body_lists_all_required_fields(validation_client):
    response = validation_client.post("/test/valid", json={})

    assert response.status_code == 400
    details = response.get_json()["details"]
    assert details["model"] == "MockCreateRequest"
    assert details["received"] == {}
    field_names = [e["field"] for e in details["errors"]]
    assert "name" in field_names
    assert "amount" in field_names


def test_no_body_is_treated_as_empty(validation_client):
    response = validation_client.post("/test/valid")

    assert response.status_code == 400
    assert response.get_json()["details"]["received"] == {}


def test_form_data_is_accepted(validation_client):
    response = validation_client.post("/test/valid", data={"name": "Form", "amount": "12.5"})

    assert response.status_code == 200
    assert response.get_json()["amount"] == 12.5


def test_password_values_are_redacted(validation_client):
    response = validation_client.post(
        "/test/secret",
        json={"username": "ann", "password": "hunter2hunter2", "age": "old"}
    )

    assert response.status_code == 400
    assert response.get_json()["details"]["received"]["password"] == "***"
    assert b"hunter2hunter2" not in response.data


def test_passes_through_path_parameters_unchanged(validation_client):
    test_uuid = "550e8400-e29b-41d4-a716-446655440000"
    response = validation_client.get(f"/test/path/{test_uuid}")

    assert response.status_code == 200
    assert response.get_json() == {"uuid": test_uuid}
