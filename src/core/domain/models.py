"""Domain models (Pydantic v2).

These models describe *what* a GraphQL project configuration contains, not
*how* it is loaded or queried. The loader lives in `adapters.graphql_config`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class EndpointEntry(BaseModel):
    """One entry of `extensions.endpoints` in a `.graphqlconfig` file."""

    model_config = ConfigDict(extra="ignore")

    url: str = Field(
        ...,
        min_length=1,
        description="GraphQL endpoint URL that accepts introspection queries.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP headers sent with every request (auth tokens, etc.).",
    )


class EndpointConfig(EndpointEntry):
    """Endpoint entry together with the name it is registered under."""

    name: str = Field(
        ...,
        min_length=1,
        description="Key of the endpoint in `extensions.endpoints`.",
    )


class ProjectExtensions(BaseModel):
    """`extensions` section. Unknown extensions are kept but not interpreted."""

    model_config = ConfigDict(extra="allow")

    endpoints: dict[str, EndpointEntry] | None = Field(
        default=None,
        description="Endpoint registry: name -> URL string or {url, headers}.",
    )

    @field_validator("endpoints", mode="before")
    @classmethod
    def _expand_url_shorthand(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: {"url": entry} if isinstance(entry, str) else entry for name, entry in value.items()}
        return value


class GraphQLProjectConfigFile(BaseModel):
    """Parsed content of a `.graphqlconfig` file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    schema_path: str = Field(
        ...,
        alias="schemaPath",
        min_length=1,
        description="Path of the local schema, relative to the config file.",
    )
    extensions: ProjectExtensions = Field(
        default_factory=ProjectExtensions,
        description="graphql-config extensions (only `endpoints` is used).",
    )


class UpdateOutcome(str, Enum):
    """Result of one schema update cycle."""

    NO_CHANGE = "no-change"
    CREATED = "created"
    UPDATED = "updated"

    @property
    def changed(self) -> bool:
        return self is not UpdateOutcome.NO_CHANGE
