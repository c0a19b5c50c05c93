"""Typer application.

Commands are thin: they build settings and the project config, then delegate
to `core.services.schema_sync`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.graphql_config import load_project_config
from cli.ui_components import RichStatusReporter, console_log_sink, print_config_error
from core.config import AppSettings
from core.errors import GraphQLConfigError
from core.services.schema_sync import SyncRequest, get_raw_schema

app = typer.Typer(no_args_is_help=True, help="GraphQL schema tooling.")

_console = Console()


@app.callback()
def main() -> None:
    """GraphQL schema tooling."""


@app.command(name="get-raw-schema")
def get_raw_schema_command(
    endpoint: Optional[str] = typer.Argument(
        None,
        help="Endpoint name from .graphqlconfig (default endpoint when omitted).",
    ),
    watch: bool = typer.Option(
        False,
        "--watch",
        "-w",
        help="watch server for schema changes and update local schema",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the .graphqlconfig file (searched upwards from cwd by default).",
    ),
) -> None:
    """Download schema from endpoint."""

    settings = AppSettings()
    request = SyncRequest(
        endpoint_name=endpoint,
        watch=watch,
        interval_seconds=settings.watch_interval_seconds,
    )

    try:
        project = load_project_config(config, settings=settings)
        asyncio.run(
            get_raw_schema(
                config=project,
                request=request,
                log=console_log_sink(_console),
                reporter=RichStatusReporter(_console) if watch else None,
            )
        )
    except GraphQLConfigError as exc:
        print_config_error(_console, str(exc))
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        # Only way out of watch mode.
        raise typer.Exit(code=130)


def run() -> None:
    app()
