"""
Unit tests for the shared access contract helpers.
"""

import json

import pytest

from planner.core.access import (
    CORS_HEADERS,
    MAX_BODY_BYTES,
    is_valid_uuid,
    json_response,
    parse_body,
    preflight_response,
    stringify,
    to_numeric_or_null,
)


# -- parse_body --

class TestParseBody:
    def test_object_is_parsed(self):
        assert parse_body(b'{"title": "X"}') == {"title": "X"}

    def test_str_input_is_accepted(self):
        assert parse_body('{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("raw", [None, b"", ""])
    def test_missing_body(self, raw):
        assert parse_body(raw) is None

    @pytest.mark.parametrize("raw", [b"{", b"{'a': 1}", b"not json", b'{"a": NaN}'])
    def test_malformed_body(self, raw):
        assert parse_body(raw) is None

    @pytest.mark.parametrize("raw", [b"[]", b"5", b"null", b'"text"'])
    def test_non_object_json(self, raw):
        assert parse_body(raw) is None

    def test_invalid_utf8(self):
        assert parse_body(b'{"a": "\xff"}') is None

    def test_body_at_limit_is_parsed(self):
        raw = b'{"a":"' + b"x" * (MAX_BODY_BYTES - 8) + b'"}'
        assert len(raw) == MAX_BODY_BYTES
        assert parse_body(raw) is not None

    def test_oversized_body_is_rejected(self):
        raw = json.dumps({"a": "x" * MAX_BODY_BYTES}).encode()
        assert parse_body(raw) is None

    def test_limit_counts_bytes_not_characters(self):
        raw = '{"a":"é"}'
        assert parse_body(raw, max_bytes=len(raw)) is None


# -- is_valid_uuid --

class TestIsValidUuid:
    @pytest.mark.parametrize("value", [
        "6f1c2a9e-3b4d-4c5e-8f60-718293a4b5c6",
        "6F1C2A9E-3B4D-4C5E-8F60-718293A4B5C6",
        "c232ab00-9414-11ec-b3c8-9e6bdeced846",  # v1
    ])
    def test_valid(self, value):
        assert is_valid_uuid(value)

    @pytest.mark.parametrize("value", [
        None,
        "",
        "not-a-uuid",
        "6f1c2a9e3b4d4c5e8f60718293a4b5c6",
        "6f1c2a9e-3b4d-6c5e-8f60-718293a4b5c6",  # version 6
        "6f1c2a9e-3b4d-4c5e-7f60-718293a4b5c6",  # bad variant
        "6f1c2a9e-3b4d-4c5e-8f60-718293a4b5c6 ",
        "6f1c2a9e-3b4d-4c5e-8f60-718293a4b5c6\n",
    ])
    def test_invalid(self, value):
        assert not is_valid_uuid(value)


# -- json_response / preflight_response --

class TestJsonResponse:
    def test_headers(self):
        response = json_response(200, {"ok": True})
        assert response.headers["content-type"] == "application/json"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "Content-Type, x-admin-token"
        assert response.headers["access-control-max-age"] == "86400"

    def test_server_error_is_sanitized(self):
        response = json_response(500, {"error": "relation tasks does not exist"}, sanitize_error=True)
        assert json.loads(response.body) == {"error": "Internal server error"}

    def test_server_error_kept_without_sanitize_flag(self):
        response = json_response(500, {"error": "Failed to fetch"})
        assert json.loads(response.body) == {"error": "Failed to fetch"}

    def test_client_error_not_sanitized(self):
        response = json_response(400, {"error": "Invalid id format"}, sanitize_error=True)
        assert json.loads(response.body) == {"error": "Invalid id format"}

    def test_list_body(self):
        response = json_response(200, [])
        assert json.loads(response.body) == []

    def test_preflight(self):
        response = preflight_response()
        assert response.status_code == 204
        assert response.body == b""
        for name, value in CORS_HEADERS.items():
            assert response.headers[name] == value


# -- stringify --

class TestStringify:
    @pytest.mark.parametrize("value, expected", [
        (None, None),
        ("Venue", "Venue"),
        ("", ""),
        (12, "12"),
        (12.0, "12"),
        (1.5, "1.5"),
        (True, "true"),
        (False, "false"),
        (["a", "b"], "a,b"),
        ({"k": 1}, '{"k":1}'),
    ])
    def test_values(self, value, expected):
        assert stringify(value) == expected


# -- to_numeric_or_null --

class TestToNumericOrNull:
    @pytest.mark.parametrize("value, expected", [
        ("1,200.50", 1200.5),
        ("$3,000", 3000.0),
        ("-45.5", -45.5),
        (250, 250.0),
        (99.9, 99.9),
        ("0", 0.0),
    ])
    def test_numbers(self, value, expected):
        assert to_numeric_or_null(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "1.2.3", "-", ".", True, float("inf"), 10 ** 400, -(10 ** 400)])
    def test_invalid_yields_none(self, value):
        assert to_numeric_or_null(value) is None
