"""CLI tests for `get-raw-schema`."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from graphql import build_schema, introspection_from_schema
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.graphql_config import load_project_config
from cli.main import app

runner = CliRunner()

SDL = "type Query { ping: String }"


def _write_config(directory: Path, payload: dict) -> Path:
    path = directory / ".graphqlconfig"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_help_lists_watch_flag() -> None:
    result = runner.invoke(app, ["get-raw-schema", "--help"])

    assert result.exit_code == 0
    assert "--watch" in result.output
    assert "Download schema from endpoint" in result.output


def test_missing_endpoint_config_exits_with_guidance(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path, {"schemaPath": "schema.graphql"})

    result = runner.invoke(app, ["get-raw-schema"])

    assert result.exit_code == 1
    assert "graphql add-endpoint" in result.output


def test_unknown_endpoint_name_exits_with_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_config(
        tmp_path,
        {"schemaPath": "schema.graphql", "extensions": {"endpoints": {"default": "https://api.example.com"}}},
    )

    result = runner.invoke(app, ["get-raw-schema", "prod"])

    assert result.exit_code == 1
    assert "prod" in result.output


def test_downloads_schema_next_to_configured_schema_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    config_path = _write_config(
        tmp_path,
        {
            "schemaPath": "graphql/schema.graphql",
            "extensions": {"endpoints": {"default": "https://api.example.com/graphql"}},
        },
    )
    raw = json.dumps({"data": introspection_from_schema(build_schema(SDL))})
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text=raw))

    def load_with_mock_transport(path, *, settings=None):
        return load_project_config(path, settings=settings, transport=transport)

    monkeypatch.setattr(cli_main, "load_project_config", load_with_mock_transport)

    result = runner.invoke(app, ["get-raw-schema", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "graphql" / "schema.json").read_text(encoding="utf-8") == raw
    assert "Schema file was created" in result.output
