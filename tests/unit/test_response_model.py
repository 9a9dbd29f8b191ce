"""Unit tests for the Response builder and its snapshot view."""
from __future__ import annotations

import pytest

from fetch_integration.app.domain.models import Response, ResponseSnapshot


def test_setters_return_same_instance_for_chaining():
    response = Response()

    assert response.set_status(200) is response
    assert response.set_header("X-A", "1") is response
    assert response.set_body("hi") is response
    assert response.set_json({"a": 1}) is response
    assert response.set_error("nope") is response


def test_status_unset_fails_fast():
    with pytest.raises(RuntimeError, match="status is not set"):
        Response().status


def test_set_status_rejects_non_int():
    with pytest.raises(TypeError):
        Response().set_status("200")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Response().set_status(True)


def test_body_defaults_to_empty_string():
    response = Response()

    assert response.body == ""
    assert response.body is not None


def test_headers_are_case_sensitive_and_last_write_wins():
    response = Response().set_header("X-Tag", "a").set_header("X-Tag", "b")

    assert response.get_header("X-Tag") == "b"
    assert response.get_header("x-tag") is None
    assert response.headers == {"X-Tag": "b"}


def test_headers_property_returns_copy():
    response = Response().set_header("X-A", "1")

    response.headers["X-B"] = "2"

    assert response.get_header("X-B") is None


def test_json_of_invalid_body_is_empty_mapping():
    response = Response().set_body("not json")

    assert response.json() == {}


def test_json_of_missing_body_is_empty_mapping():
    assert Response().json() == {}


def test_json_of_non_object_body_is_empty_mapping():
    assert Response().set_body("[1, 2, 3]").json() == {}
    assert Response().set_body("null").json() == {}


def test_set_json_round_trip_and_content_type():
    response = Response().set_json({"a": 1})

    assert response.json() == {"a": 1}
    assert response.get_header("Content-Type") == "application/json"


def test_set_json_overwrites_body_and_content_type():
    response = (
        Response()
        .set_body("plain")
        .set_header("Content-Type", "text/plain")
        .set_json({"b": [1, 2]})
    )

    assert response.body == '{"b":[1,2]}'
    assert response.get_header("Content-Type") == "application/json"


def test_set_error_sets_status_message_and_json_body():
    response = Response().set_status(200).set_body("ok").set_error("bad input", 422)

    assert response.status == 422
    assert response.error_message == "bad input"
    assert response.json() == {"error": "bad input"}
    assert response.get_header("Content-Type") == "application/json"


def test_set_error_defaults_to_400():
    assert Response().set_error("bad").status == 400


def test_error_message_absent_by_default():
    assert Response().set_status(200).error_message is None


def test_snapshot_exposes_status_headers_body_and_error():
    response = Response().set_status(201).set_header("X-A", "1").set_body("created")

    snap = response.snapshot()

    assert snap == ResponseSnapshot(status=201, headers={"X-A": "1"}, body="created", error=None)
    assert snap.to_dict() == {
        "status": 201,
        "headers": {"X-A": "1"},
        "body": "created",
        "error": None,
    }


def test_snapshot_is_detached_from_later_mutation():
    response = Response().set_status(200).set_header("X-A", "1")
    snap = response.snapshot()

    response.set_header("X-B", "2")

    assert "X-B" not in snap.headers


def test_snapshot_requires_status():
    with pytest.raises(RuntimeError):
        Response().set_body("x").snapshot()


@pytest.mark.parametrize(
    "body",
    [
        "[" * 100000 + "]" * 100000,
        '{"a":' * 100000 + "1" + "}" * 100000,
    ],
    ids=["nested_arrays", "nested_objects"],
)
def test_json_of_deeply_nested_body_is_empty_mapping(body):
    assert Response().set_body(body).json() == {}


def test_set_json_rejects_non_finite_numbers():
    response = Response().set_body("kept")

    with pytest.raises(ValueError):
        response.set_json({"a": float("nan")})
    with pytest.raises(ValueError):
        response.set_json({"a": float("inf")})

    assert response.body == "kept"
    assert response.get_header("Content-Type") is None
