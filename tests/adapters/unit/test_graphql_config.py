"""Tests for `.graphqlconfig` loading and endpoint lookup."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from graphql import build_schema, introspection_from_schema, print_schema

from adapters.graphql_config import (
    HttpSchemaEndpoint,
    find_config_file,
    load_project_config,
)
from core.config import AppSettings
from core.errors import (
    AmbiguousEndpointError,
    ConfigFileNotFoundError,
    EndpointNotFoundError,
    InvalidConfigError,
    NoEndpointConfiguredError,
)

SDL = """
type Query {
  user(id: ID!): User
}

type User {
  id: ID!
  name: String
}
"""


def _write_config(directory: Path, payload: object, filename: str = ".graphqlconfig") -> Path:
    path = directory / filename
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_loads_endpoints_with_url_shorthand_and_headers(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {
            "schemaPath": "schema.graphql",
            "extensions": {
                "endpoints": {
                    "default": "https://api.example.com/graphql",
                    "staging": {
                        "url": "https://staging.example.com/graphql",
                        "headers": {"Authorization": "Bearer abc"},
                    },
                }
            },
        },
    )

    config = load_project_config(path, settings=AppSettings())

    assert config.has_endpoint_config()
    assert config.endpoint_names() == ["default", "staging"]

    default = config.get_endpoint()
    assert isinstance(default, HttpSchemaEndpoint)
    assert default.name == "default"
    assert default.url == "https://api.example.com/graphql"
    assert default.headers == {}

    staging = config.get_endpoint("staging")
    assert staging.url == "https://staging.example.com/graphql"
    assert staging.headers == {"Authorization": "Bearer abc"}


def test_single_endpoint_is_used_when_no_name_given(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"schemaPath": "schema.graphql", "extensions": {"endpoints": {"prod": "https://prod.example.com"}}},
    )

    assert load_project_config(path).get_endpoint().name == "prod"


def test_several_endpoints_without_default_require_a_name(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {
            "schemaPath": "schema.graphql",
            "extensions": {"endpoints": {"a": "https://a.example.com", "b": "https://b.example.com"}},
        },
    )
    config = load_project_config(path)

    with pytest.raises(AmbiguousEndpointError):
        config.get_endpoint()
    with pytest.raises(EndpointNotFoundError) as excinfo:
        config.get_endpoint("c")
    assert excinfo.value.available == ["a", "b"]


def test_missing_endpoints_extension(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"schemaPath": "schema.graphql"})
    config = load_project_config(path)

    assert not config.has_endpoint_config()
    with pytest.raises(NoEndpointConfiguredError):
        config.get_endpoint()


def test_yaml_config_is_supported(tmp_path: Path) -> None:
    path = tmp_path / ".graphqlconfig.yml"
    path.write_text(
        """
schemaPath: graphql/schema.graphql
extensions:
  endpoints:
    default: http://localhost:4000/graphql
""",
        encoding="utf-8",
    )

    config = load_project_config(path)

    assert config.get_endpoint().url == "http://localhost:4000/graphql"
    assert config.get_schema_base_path() == tmp_path.resolve() / "graphql" / "schema.graphql"


@pytest.mark.parametrize(
    "contents",
    ["{not json", "[1, 2, 3]", json.dumps({"extensions": {}})],
)
def test_invalid_config_files_are_rejected(tmp_path: Path, contents: str) -> None:
    path = tmp_path / ".graphqlconfig"
    path.write_text(contents, encoding="utf-8")

    with pytest.raises(InvalidConfigError):
        load_project_config(path)


def test_config_path_from_settings(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"schemaPath": "schema.graphql"}, filename="custom.json")

    config = load_project_config(settings=AppSettings(config_path=path))

    assert config.config_dir == tmp_path.resolve()


def test_find_config_file_walks_up_parent_directories(tmp_path: Path) -> None:
    expected = _write_config(tmp_path, {"schemaPath": "schema.graphql"})
    nested = tmp_path / "packages" / "web"
    nested.mkdir(parents=True)

    assert find_config_file(nested) == expected.resolve()


def test_find_config_file_raises_when_nothing_found(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    # tmp_path lives under a temp root without config files.
    with pytest.raises(ConfigFileNotFoundError):
        find_config_file(empty)


def test_stored_schema_text_from_sdl_file(tmp_path: Path) -> None:
    (tmp_path / "schema.graphql").write_text(SDL, encoding="utf-8")
    config = load_project_config(
        _write_config(tmp_path, {"schemaPath": "schema.graphql", "extensions": {"endpoints": {}}})
    )

    assert config.get_stored_schema_text() == print_schema(build_schema(SDL))


def test_stored_schema_text_from_introspection_json(tmp_path: Path) -> None:
    introspection = introspection_from_schema(build_schema(SDL))
    (tmp_path / "schema.json").write_text(json.dumps({"data": introspection}), encoding="utf-8")
    config = load_project_config(_write_config(tmp_path, {"schemaPath": "schema.json"}))

    assert config.get_stored_schema_text() == print_schema(build_schema(SDL))


def test_stored_schema_text_raises_when_file_is_missing(tmp_path: Path) -> None:
    config = load_project_config(_write_config(tmp_path, {"schemaPath": "missing.graphql"}))

    with pytest.raises(FileNotFoundError):
        config.get_stored_schema_text()
