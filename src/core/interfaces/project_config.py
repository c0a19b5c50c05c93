"""Contracts for the GraphQL project configuration and its endpoints.

Why Protocol:
- The sync workflow only needs four questions answered by the configuration,
  so tests can hand it a tiny fake instead of a real `.graphqlconfig`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from graphql import GraphQLSchema


@runtime_checkable
class SchemaEndpoint(Protocol):
    """A named endpoint able to resolve its current schema."""

    name: str
    url: str
    headers: dict[str, str]

    async def resolve_schema(self) -> GraphQLSchema:
        """Query the endpoint and build the in-memory schema."""

        ...

    async def fetch_introspection_text(self) -> str:
        """POST the fixed introspection document and return the raw response body."""

        ...


@runtime_checkable
class ProjectConfig(Protocol):
    """Read-only view over a GraphQL project configuration."""

    def has_endpoint_config(self) -> bool:
        """Whether an `endpoints` extension is configured at all."""

        ...

    def get_endpoint(self, name: str | None = None) -> SchemaEndpoint:
        """Look up an endpoint by name (default endpoint when `name` is None).

        Raises `GraphQLConfigError` subclasses when the name is unknown.
        """

        ...

    def get_stored_schema_text(self) -> str:
        """Serialized (SDL) form of the locally stored schema. Raises when unreadable."""

        ...

    def get_schema_base_path(self) -> Path:
        """Configured schema path the output file name is derived from."""

        ...
