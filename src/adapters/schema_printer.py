"""Schema (de)serialization with graphql-core.

SDL printed by `print_schema` is the canonical text used to decide whether
the remote schema changed.
"""

from __future__ import annotations

import json
from pathlib import Path

from graphql import GraphQLSchema, build_client_schema, build_schema, print_schema

JSON_SUFFIXES = {".json"}


def print_sdl(schema: GraphQLSchema) -> str:
    return print_schema(schema)


def schema_from_introspection(payload: dict) -> GraphQLSchema:
    """Accepts both `{"data": {"__schema": ...}}` and a bare `{"__schema": ...}`."""

    data = payload.get("data", payload)
    return build_client_schema(data)


def load_schema_sdl(path: Path) -> str:
    """Read a local schema file (SDL or introspection JSON) and print it as SDL."""

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in JSON_SUFFIXES:
        schema = schema_from_introspection(json.loads(text))
    else:
        schema = build_schema(text)
    return print_sdl(schema)
