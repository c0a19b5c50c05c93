"""Errors raised while reading the GraphQL project configuration."""

from __future__ import annotations

from pathlib import Path


class GraphQLConfigError(Exception):
    """Base class for configuration problems surfaced to the user."""


class NoEndpointConfiguredError(GraphQLConfigError):
    def __init__(self) -> None:
        super().__init__(
            "You don't have any endpoint in your .graphqlconfig.\n"
            "Run [yellow]graphql add-endpoint[/yellow] to add endpoint to your config"
        )


class EndpointNotFoundError(GraphQLConfigError):
    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        known = ", ".join(available) or "none"
        super().__init__(f"Endpoint '{name}' is not defined in .graphqlconfig (known: {known})")


class AmbiguousEndpointError(GraphQLConfigError):
    def __init__(self, available: list[str]) -> None:
        self.available = available
        super().__init__(
            "You have to specify endpoint name or define 'default' endpoint in your .graphqlconfig "
            f"(known: {', '.join(available)})"
        )


class ConfigFileNotFoundError(GraphQLConfigError):
    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"Couldn't find a .graphqlconfig file in {start} or any parent directory")


class InvalidConfigError(GraphQLConfigError):
    """The config file exists but cannot be parsed or validated."""
