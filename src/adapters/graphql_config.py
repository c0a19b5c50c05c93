"""`.graphqlconfig` loading and the HTTP-backed endpoint.

Supported files (first match wins while walking up from the start dir):
- `.graphqlconfig` / `.graphqlconfig.json` (JSON)
- `.graphqlconfig.yml` / `.graphqlconfig.yaml` (YAML)

Example:

    {
      "schemaPath": "schema.graphql",
      "extensions": {
        "endpoints": {
          "default": "https://api.example.com/graphql",
          "staging": {"url": "https://staging.example.com/graphql",
                      "headers": {"Authorization": "Bearer <token>"}}
        }
      }
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml
from graphql import GraphQLSchema
from pydantic import ValidationError

from adapters.introspection import fetch_introspection_result, fetch_raw_introspection
from adapters.schema_printer import load_schema_sdl, schema_from_introspection
from core.config import CONFIG_FILENAMES, AppSettings
from core.domain.models import EndpointConfig, GraphQLProjectConfigFile
from core.errors import (
    AmbiguousEndpointError,
    ConfigFileNotFoundError,
    EndpointNotFoundError,
    InvalidConfigError,
    NoEndpointConfiguredError,
)

DEFAULT_ENDPOINT_NAME = "default"

_YAML_SUFFIXES = {".yml", ".yaml"}


class HttpSchemaEndpoint:
    """Endpoint descriptor backed by real introspection requests."""

    def __init__(
        self,
        config: EndpointConfig,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = config.name
        self.url = config.url
        self.headers = dict(config.headers)
        self._settings = settings or AppSettings()
        self._transport = transport

    async def resolve_schema(self) -> GraphQLSchema:
        data = await fetch_introspection_result(
            self.url,
            headers=self.headers,
            settings=self._settings,
            transport=self._transport,
        )
        return schema_from_introspection(data)

    async def fetch_introspection_text(self) -> str:
        return await fetch_raw_introspection(
            self.url,
            headers=self.headers,
            settings=self._settings,
            transport=self._transport,
        )

    def __repr__(self) -> str:
        return f"HttpSchemaEndpoint(name={self.name!r}, url={self.url!r})"


class FileProjectConfig:
    """Project configuration read from a `.graphqlconfig` file."""

    def __init__(
        self,
        data: GraphQLProjectConfigFile,
        *,
        config_dir: Path,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.data = data
        self.config_dir = config_dir
        self._settings = settings or AppSettings()
        self._transport = transport

    def has_endpoint_config(self) -> bool:
        return self.data.extensions.endpoints is not None

    def endpoint_names(self) -> list[str]:
        return sorted(self.data.extensions.endpoints or {})

    def get_endpoint(self, name: str | None = None) -> HttpSchemaEndpoint:
        endpoints = self.data.extensions.endpoints
        if endpoints is None:
            raise NoEndpointConfiguredError()

        if name is None:
            if DEFAULT_ENDPOINT_NAME in endpoints:
                name = DEFAULT_ENDPOINT_NAME
            elif len(endpoints) == 1:
                name = next(iter(endpoints))
            else:
                raise AmbiguousEndpointError(self.endpoint_names())

        entry = endpoints.get(name)
        if entry is None:
            raise EndpointNotFoundError(name, self.endpoint_names())

        return HttpSchemaEndpoint(
            EndpointConfig(name=name, **entry.model_dump()),
            settings=self._settings,
            transport=self._transport,
        )

    def get_schema_base_path(self) -> Path:
        return self.config_dir / self.data.schema_path

    def get_stored_schema_text(self) -> str:
        return load_schema_sdl(self.get_schema_base_path())


def find_config_file(start: Path | None = None) -> Path:
    """Walk up from `start` (cwd by default) until a config file is found."""

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
    raise ConfigFileNotFoundError(origin)


def _parse_config_text(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidConfigError(f"Failed to parse {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidConfigError(f"Failed to parse {path}: {exc}") from exc


def load_project_config(
    path: Path | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FileProjectConfig:
    """Load the project config from `path`, settings, or by discovery."""

    settings = settings or AppSettings()
    config_path = path or settings.config_path or find_config_file()
    if not config_path.is_file():
        raise InvalidConfigError(f"Configuration file not found: {config_path}")

    parsed = _parse_config_text(config_path, config_path.read_text(encoding="utf-8"))
    if not isinstance(parsed, Mapping):
        raise InvalidConfigError(f"{config_path}: configuration root must be a mapping.")

    try:
        data = GraphQLProjectConfigFile.model_validate(parsed)
    except ValidationError as exc:
        raise InvalidConfigError(f"{config_path}: {exc}") from exc

    return FileProjectConfig(
        data,
        config_dir=config_path.resolve().parent,
        settings=settings,
        transport=transport,
    )
