"""Tests for switchyard.config — RouterConfig frozen dataclass."""

import pytest

from switchyard.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.method_override_field == "_method"
        assert cfg.allow_method_override is True
        assert cfg.escape_literals is True
        assert cfg.not_found_status == 404
        assert cfg.not_found_content_type == "application/json"
        assert cfg.not_found_message == "Route not found"

    def test_override(self) -> None:
        cfg = RouterConfig(method_override_field="__verb", escape_literals=False)

        assert cfg.method_override_field == "__verb"
        assert cfg.escape_literals is False

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.escape_literals = False  # type: ignore[misc]
