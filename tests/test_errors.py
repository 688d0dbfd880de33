"""Tests for switchyard.errors — exception hierarchy and error messages."""

import pytest

from switchyard.errors import (
    ConfigurationError,
    HandlerError,
    HTTPError,
    NotFound,
    SwitchyardError,
)


class TestHierarchy:
    def test_http_error_is_switchyard_error(self) -> None:
        assert issubclass(HTTPError, SwitchyardError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_handler_error_is_switchyard_error(self) -> None:
        assert issubclass(HandlerError, SwitchyardError)

    def test_configuration_error_is_switchyard_error(self) -> None:
        assert issubclass(ConfigurationError, SwitchyardError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request body")
        assert err.status == 400
        assert err.detail == "Bad request body"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request body")) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Route not found"
        assert err.headers == ()

    def test_custom_detail(self) -> None:
        assert NotFound("gone").detail == "gone"
