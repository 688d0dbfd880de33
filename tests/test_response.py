"""Tests for switchyard.http.response — Response chaining and JSON bodies."""

import json

import pytest

from switchyard.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        assert Response().with_status(201).status == 201

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_with_headers_dict(self) -> None:
        r = Response().with_headers({"A": "1", "B": "2"})
        assert ("A", "1") in r.headers
        assert ("B", "2") in r.headers

    def test_with_content_type(self) -> None:
        r = Response().with_content_type("application/json")
        assert r.content_type == "application/json"

    def test_transformations_return_new_objects(self) -> None:
        original = Response()
        original.with_status(500)
        assert original.status == 200

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 404  # type: ignore[misc]


class TestJSON:
    def test_json_body_and_content_type(self) -> None:
        r = Response.json({"error": "Route not found"}, status=404)
        assert r.status == 404
        assert r.content_type == "application/json"
        assert json.loads(r.text) == {"error": "Route not found"}


class TestBodyHelpers:
    def test_text_from_bytes(self) -> None:
        assert Response(body=b"caf\xc3\xa9").text == "café"

    def test_body_bytes_from_str(self) -> None:
        assert Response(body="café").body_bytes == b"caf\xc3\xa9"
