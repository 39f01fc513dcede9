import logging
from http import HTTPStatus

import pytest
from fastapi.exceptions import RequestValidationError

from medrec_commons.core.exceptions import (
    EmailAlreadyExistsException,
    ResourceCreationException,
    ResourceNotFoundException,
    UnauthorizedAccessException,
)
from medrec_commons.core import middleware
from medrec_commons.core.middleware import error_response, field_path, validation_errors


def test_resource_not_found_is_translated_to_404_list_body(client) -> None:
    # Goal: the documented not-found shape is produced at the HTTP boundary.

    # Act
    response = client.get("/raise/not-found")

    # Assert
    assert response.status_code == 404
    assert response.json() == [
        {"code": "404", "detailedMessage": "not-found happened", "message": "Not Found"}
    ]


@pytest.mark.parametrize(
    "kind, status, phrase",
    [
        ("creation", 500, "Internal Server Error"),
        ("forbidden", 403, "Forbidden"),
        ("conflict", 409, "Conflict"),
        ("improper", 400, "Bad Request"),
    ],
)
def test_structured_errors_carry_code_message_and_reason(client, kind: str, status: int, phrase: str) -> None:
    response = client.get(f"/raise/{kind}")

    assert response.status_code == status
    assert response.json() == [
        {"code": str(status), "detailedMessage": f"{kind} happened", "message": phrase}
    ]


@pytest.mark.parametrize("kind, status", [("unauthorized", 401), ("validation", 400)])
def test_plain_text_errors_return_bare_message(client, kind: str, status: int) -> None:
    response = client.get(f"/raise/{kind}")

    assert response.status_code == status
    assert response.text == f"{kind} happened"
    assert response.headers["content-type"].startswith("text/plain")


def test_unexpected_exception_returns_generic_500(client) -> None:
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_error_response_is_usable_without_an_app() -> None:
    # Goal: the translation function works on its own, outside request handling.
    response = error_response(EmailAlreadyExistsException("a@b.c already registered"))

    assert response.status_code == HTTPStatus.CONFLICT
    assert b'"detailedMessage":"a@b.c already registered"' in response.body


def test_error_response_status_matches_exception_class() -> None:
    assert error_response(ResourceNotFoundException("x")).status_code == 404
    assert error_response(ResourceCreationException("x")).status_code == 500
    assert error_response(UnauthorizedAccessException("x")).status_code == 401


@pytest.mark.parametrize(
    "loc, expected",
    [
        (("body", "allergies"), "allergies"),
        (("body", "vaccinesInjections", "vaccines", 0, "route"), "vaccinesInjections.vaccines[0].route"),
        (("query", "page"), "page"),
        (("body",), "body"),
        (("vitals", 2, "weight"), "vitals[2].weight"),
    ],
)
def test_field_path_formats_error_locations(loc, expected: str) -> None:
    assert field_path(loc) == expected


def test_validation_errors_keep_first_violation_per_field() -> None:
    # Arrange: two violations reported for the same field
    exc = RequestValidationError(
        [
            {"loc": ("body", "weight"), "msg": "first message", "type": "float_parsing"},
            {"loc": ("body", "weight"), "msg": "second message", "type": "greater_than"},
            {"loc": ("body", "height"), "msg": "height message", "type": "float_parsing"},
        ]
    )

    # Act
    errors = validation_errors(exc)

    # Assert
    assert errors == {"weight": "first message", "height": "height message"}


def test_request_binding_errors_map_field_to_message(client) -> None:
    response = client.post("/patient-meta", json={"vitals": [{"weight": "heavy"}]})

    assert response.status_code == 400
    body = response.json()
    assert list(body) == ["vitals[0].weight"]
    assert "number" in body["vitals[0].weight"]


def test_malformed_json_body_is_reported_under_body(client) -> None:
    # Goal: a parse failure is not keyed by the byte offset of the error.
    response = client.post(
        "/patient-meta",
        content='{"allergies": [',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert list(response.json()) == ["body"]


def test_failed_requests_are_logged_with_request_id(client, caplog) -> None:
    caplog.set_level(logging.INFO, logger="medrec_commons.core.middleware")

    client.get("/raise/not-found")

    messages = [r.getMessage() for r in caplog.records if r.name == "medrec_commons.core.middleware"]
    assert any(m.startswith("[") and "] GET /raise/not-found - 404 - " in m for m in messages)


def test_fast_successful_requests_are_not_logged(client, caplog) -> None:
    caplog.set_level(logging.INFO, logger="medrec_commons.core.middleware")

    client.get("/status/app")

    assert not [r for r in caplog.records if "/status/app" in r.getMessage()]


def test_slow_requests_are_logged(client, caplog, monkeypatch) -> None:
    # Arrange: every clock read advances two seconds
    class SteppingClock:
        now = 1_000.0

        def time(self) -> float:
            SteppingClock.now += 2.0
            return SteppingClock.now

    monkeypatch.setattr(middleware, "time", SteppingClock())
    caplog.set_level(logging.INFO, logger="medrec_commons.core.middleware")

    # Act
    client.get("/status/app")

    # Assert
    assert any("GET /status/app - 200 - " in r.getMessage() for r in caplog.records)


def test_unexpected_exception_is_logged_with_traceback(client, caplog) -> None:
    caplog.set_level(logging.INFO, logger="medrec_commons.core.middleware")

    client.get("/boom")

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    # The request logger records the escaping exception before re-raising it
    assert any("GET /boom - ERROR: unexpected" in r.getMessage() for r in errors)
    unhandled = [r for r in errors if "Unhandled exception in GET /boom" in r.getMessage()]
    assert len(unhandled) == 1
    assert unhandled[0].exc_info is not None
    assert unhandled[0].exc_info[0] is RuntimeError


def test_unexpected_exception_keeps_cors_headers_for_allowed_origin(client) -> None:
    response = client.get("/boom", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_unexpected_exception_omits_cors_headers_for_unknown_origin(client) -> None:
    response = client.get("/boom", headers={"Origin": "https://elsewhere.example"})

    assert response.status_code == 500
    assert "access-control-allow-origin" not in response.headers
