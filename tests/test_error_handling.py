"""
Error translation tests.

This test suite covers the global error translator:
- Constraint violations become a list of "<path> <message>" strings
- Binding failures become a list of field error objects
- Both are answered with HTTP 400 on every router
- Other exceptions fall through to the 404/500 handlers
"""

import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from api.middleware import format_binding_errors, format_constraint_violations
from app.exceptions import ConstraintViolation, ConstraintViolationError
from main import app
from test_fixtures import client, beer_request_body


# =============================================================================
# FORMATTING
# =============================================================================


@pytest.mark.parametrize("count", [0, 1, 5])
def test_format_constraint_violations_one_string_per_violation(count):
    violations = [
        ConstraintViolation(property_path=f"field{i}", message=f"message {i}")
        for i in range(count)
    ]

    errors = format_constraint_violations(violations)

    assert len(errors) == count
    assert errors == [f"field{i} message {i}" for i in range(count)]


def test_format_constraint_violations_single_space_separator():
    errors = format_constraint_violations(
        [ConstraintViolation("getBeer.beerId", "must not be null")]
    )

    assert errors == ["getBeer.beerId must not be null"]


def test_format_binding_errors():
    errors = [
        {"type": "int_parsing", "loc": ("body", "upc"), "msg": "Input should be a valid integer", "input": "abc"},
        {"type": "missing", "loc": ("body",), "msg": "Field required", "input": {"x": 1}},
        {"type": "uuid_parsing", "loc": ("path", "beer_id"), "msg": "Input should be a valid UUID", "input": "nope"},
    ]

    field_errors = format_binding_errors(errors)

    assert len(field_errors) == 3
    first = field_errors[0].model_dump(by_alias=True)
    assert first == {
        "objectName": "body",
        "field": "upc",
        "rejectedValue": "abc",
        "defaultMessage": "Input should be a valid integer",
        "code": "int_parsing",
        "bindingFailure": True,
    }
    assert field_errors[1].field is None
    assert field_errors[1].rejected_value is None
    assert field_errors[2].object_name == "path"


def test_format_binding_errors_decodes_raw_bytes():
    errors = [
        {
            "type": "model_attributes_type",
            "loc": ("body",),
            "msg": "Input should be a valid dictionary or object to extract fields from",
            "input": b"\xff\xfe\x00",
        }
    ]

    field_errors = format_binding_errors(errors)

    assert len(field_errors) == 1
    assert isinstance(field_errors[0].rejected_value, str)
    assert field_errors[0].rejected_value == b"\xff\xfe\x00".decode("utf-8", "replace")


def test_format_binding_errors_empty():
    assert format_binding_errors([]) == []


def test_constraint_violation_error_message():
    exc = ConstraintViolationError(
        [ConstraintViolation("a", "must be null"), ConstraintViolation("b", "must not be blank")]
    )

    assert len(exc.violations) == 2
    assert str(exc) == "a must be null; b must not be blank"
    assert exc.http_status == 400


# =============================================================================
# HTTP MAPPING
# =============================================================================


def test_constraint_violation_response_is_json_array(beer_service_mock):
    r = client.post("/api/v1/beer/", json={"beerName": "x", "beerStyle": "y"})

    assert r.status_code == 400
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == ["upc must not be null"]


def test_binding_failure_uses_400_not_422(customer_service_mock):
    r = client.get("/api/v1/customer/123")

    assert r.status_code == 400
    assert len(r.json()) == 1


def test_missing_body_is_binding_failure(beer_service_mock):
    r = client.post("/api/v1/beer/")

    assert r.status_code == 400
    errors = r.json()
    assert len(errors) == 1
    assert errors[0]["objectName"] == "body"
    assert errors[0]["code"] == "missing"


def test_unknown_route_returns_404_envelope():
    r = client.get("/api/v1/wine/")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_method_not_allowed():
    r = client.patch(f"/api/v1/beer/{uuid.uuid4()}", json=beer_request_body())

    assert r.status_code == 405


def test_unexpected_error_returns_500(beer_service_mock):
    beer_service_mock.get_beer_by_id.side_effect = RuntimeError("boom")
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get(f"/api/v1/beer/{uuid.uuid4()}")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "boom" not in r.text


def test_request_id_header_present(beer_service_mock):
    r = client.delete(f"/api/v1/beer/{uuid.uuid4()}")

    assert "x-request-id" in r.headers
    assert "x-process-time" in r.headers


def test_non_utf8_plain_text_body_is_binding_failure(beer_service_mock):
    r = client.post(
        "/api/v1/beer/",
        content=b"\xff\xfe\x00",
        headers={"Content-Type": "text/plain"},
    )

    assert r.status_code == 400
    errors = r.json()
    assert isinstance(errors, list)
    assert len(errors) == 1
    assert errors[0]["objectName"] == "body"
    assert errors[0]["bindingFailure"] is True
    beer_service_mock.save_beer.assert_not_called()


def test_non_utf8_json_body_is_binding_failure(beer_service_mock):
    r = client.post(
        "/api/v1/beer/",
        content=b"\xff\xfe\x00",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json() == [
        {
            "objectName": "body",
            "field": None,
            "rejectedValue": None,
            "defaultMessage": "There was an error parsing the body",
            "code": "json_invalid",
            "bindingFailure": True,
        }
    ]
    beer_service_mock.save_beer.assert_not_called()


def test_request_log_lines_carry_request_id(beer_service_mock, caplog):
    with caplog.at_level(logging.INFO, logger="brewery.middleware"):
        r = client.delete(f"/api/v1/beer/{uuid.uuid4()}")

    request_id = r.headers["x-request-id"]
    completed = [m for m in caplog.messages if m.startswith("request_completed")]
    assert completed
    assert f"request_id={request_id}" in completed[-1]
    assert "status=204" in completed[-1]
