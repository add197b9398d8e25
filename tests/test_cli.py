"""Tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

TODOS = [
    {"id": 1, "userId": 1, "title": "buy milk", "completed": True},
    {"id": 2, "userId": 1, "title": "walk dog", "completed": False},
]
USERS = [
    {"id": 1, "name": "Leanne Graham", "username": "Bret", "email": "a@b.c"},
    {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "d@e.f"},
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's .env files and variables out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setattr("core.config.get_user_env_file", lambda: tmp_path / "config" / ".env")
    monkeypatch.delenv("RESTLIST_BASE_URL", raising=False)


def serve(table: dict[str, Any]):
    def handler(request: httpx.Request) -> httpx.Response:
        value = table.get(request.url.path)
        if value is None:
            return httpx.Response(404)
        if isinstance(value, httpx.Response):
            return value
        return httpx.Response(200, content=json.dumps(value).encode("utf-8"))

    return handler


class TestListCommand:
    """Tests for `list`."""

    def test__todos__renders_table(self, patch_transport: Any) -> None:
        """Fetched todos are rendered with their status."""
        patch_transport(serve({"/todos": TODOS}))

        result = runner.invoke(app, ["list", "todos", "--no-banner"])

        assert result.exit_code == 0
        assert "TODOS" in result.stdout
        assert "buy milk" in result.stdout
        assert "Completed" in result.stdout
        assert "In progress" in result.stdout

    def test__http_error__renders_empty_table_and_fails(self, patch_transport: Any) -> None:
        """Errors leave the table empty and exit non-zero."""
        patch_transport(serve({}))

        result = runner.invoke(app, ["list", "users", "--no-banner"])

        assert result.exit_code == 1
        assert "USERS" in result.stdout
        assert "Bret" not in result.stdout

    def test__json_option__exports_records(self, patch_transport: Any, tmp_path: Path) -> None:
        """--json writes the displayed records."""
        patch_transport(serve({"/users": USERS}))
        output = tmp_path / "users.json"

        result = runner.invoke(app, ["list", "users", "--no-banner", "--json", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [row["subtitle"] for row in data] == ["Bret", "Antonette"]

    def test__unknown_resource__is_a_usage_error(self) -> None:
        """Only catalog resources are accepted."""
        result = runner.invoke(app, ["list", "invoices"])

        assert result.exit_code == 2


class TestResourcesCommand:
    """Tests for `resources`."""

    def test__lists_every_resource(self) -> None:
        """Every catalog entry is shown."""
        result = runner.invoke(app, ["resources"])

        assert result.exit_code == 0
        for name in ("posts", "comments", "albums", "photos", "todos", "users"):
            assert name in result.stdout


class TestAllCommand:
    """Tests for `all`."""

    def test__all_ok__exits_zero(self, patch_transport: Any) -> None:
        """Every resource served means success."""
        patch_transport(
            serve({f"/{name}": [] for name in ("posts", "comments", "albums", "photos", "todos", "users")})
        )

        result = runner.invoke(app, ["all"])

        assert result.exit_code == 0
        assert "Summary" in result.stdout

    def test__one_failure__exits_non_zero(self, patch_transport: Any) -> None:
        """A failing resource is reported in the summary."""
        patch_transport(serve({"/todos": TODOS, "/users": httpx.Response(200, content=b"")}))

        result = runner.invoke(app, ["all"])

        assert result.exit_code == 1
        assert "No data" in result.stdout


class TestDoctor:
    """Tests for `doctor`."""

    def test__run__reports_probe(self, patch_transport: Any) -> None:
        """The probe fetches users through the executor."""
        patch_transport(serve({"/users": USERS}))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0
        assert "2 users" in result.stdout

    def test__run__failing_probe_exits_non_zero(self, patch_transport: Any) -> None:
        """A failing probe is reported."""
        patch_transport(serve({"/users": httpx.Response(500)}))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "FAIL" in result.stdout

    def test__set_base_url__persists_override(self, tmp_path: Path) -> None:
        """The override lands in the user .env, normalised."""
        result = runner.invoke(app, ["doctor", "set-base-url", "http://localhost:3000"])

        assert result.exit_code == 0
        env_text = (tmp_path / "config" / ".env").read_text(encoding="utf-8")
        assert "RESTLIST_BASE_URL=http://localhost:3000/" in env_text

    def test__set_base_url__rejects_non_http(self) -> None:
        """Invalid bases are a usage error."""
        result = runner.invoke(app, ["doctor", "set-base-url", "ftp://example.com"])

        assert result.exit_code == 2
