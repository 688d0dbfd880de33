"""Tests for switchyard's lazy top-level API."""

import pytest

import switchyard


class TestLazyImports:
    @pytest.mark.parametrize("name", switchyard.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(switchyard, name) is not None

    def test_router_is_routing_router(self) -> None:
        from switchyard.routing.router import Router

        assert switchyard.Router is Router

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            switchyard.Nope  # noqa: B018

    def test_version(self) -> None:
        assert switchyard.__version__ == "0.1.0"
