"""Tests for switchyard.cli — entrypoint, ``routes`` and ``match`` commands."""

import types

import pytest

from switchyard.cli import main
from switchyard.routing.router import Router


class UserController:
    def show(self, id: str) -> str:
        return id


def list_users() -> str:
    return "users"


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a populated Router on sys.modules."""
    router = Router()
    router.get("/users", list_users)
    router.group("/api", lambda r: r.get("/users/{id}", (UserController, "show")))
    router.post("/users/{id}", list_users)

    mod = types.ModuleType("_fake_switchyard_cli")
    mod.router = router  # type: ignore[attr-defined]
    mod.empty = Router()  # type: ignore[attr-defined]
    mod.settings = {"debug": True}  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_switchyard_cli", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_match_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_match_missing_uri(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_switchyard_cli:router", "GET"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "switchyard" in capsys.readouterr().out


@pytest.mark.usefixtures("_fake_router_module")
class TestRoutesCommand:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_switchyard_cli:router"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["METHOD", "PATH", "HANDLER"]
        assert lines[2].split() == ["GET", "/users", "list_users"]
        assert lines[3].split() == ["GET", "/api/users/{id}", "UserController.show"]
        assert lines[4].split() == ["POST", "/users/{id}", "list_users"]

    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_switchyard_cli:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_target_not_a_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_switchyard_cli:settings"])
        assert exc_info.value.code == 1
        assert "expected a Router" in capsys.readouterr().err

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz:router"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_router_module")
class TestMatchCommand:
    def test_match_with_params(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_switchyard_cli:router", "GET", "/api/users/7?x=1"])
        out = capsys.readouterr().out

        assert "GET /api/users/{id} -> UserController.show" in out
        assert "id = 7" in out

    def test_override(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_switchyard_cli:router", "POST", "/users/3", "--override", "delete"])
        assert exc_info.value.code == 1
        assert "404 Not Found: DELETE /users/3" in capsys.readouterr().out

    def test_no_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_switchyard_cli:router", "GET", "/missing"])
        assert exc_info.value.code == 1
        assert "404 Not Found: GET /missing" in capsys.readouterr().out
