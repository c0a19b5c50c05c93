"""Schema sync workflow (`get-raw-schema`).

One update cycle resolves the endpoint, fetches its schema, compares the
printed SDL against the locally stored schema and, when they differ, writes
the raw introspection response next to the configured schema path. Watch
mode repeats the cycle forever with a fixed delay, reporting through a live
status indicator instead of plain lines.

The CLI layer only wires collaborators (config, console, spinner) into these
functions; nothing here prints or touches the terminal directly.
"""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Union

from adapters.schema_file import write_schema_file
from adapters.schema_printer import print_sdl
from core.config import WATCH_INTERVAL_SECONDS
from core.domain.models import UpdateOutcome
from core.errors import NoEndpointConfiguredError
from core.interfaces.project_config import ProjectConfig
from core.interfaces.status import StatusReporter

LogSink = Callable[[str], None]
SchemaWriter = Callable[..., Path]
Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class StoredSchema:
    """SDL of the schema currently stored on disk."""

    text: str


@dataclass(frozen=True)
class MissingSchema:
    """No usable baseline; `reason` is kept for diagnostics only."""

    reason: str


PriorSchema = Union[StoredSchema, MissingSchema]


@dataclass
class SyncRequest:
    """Parameters of a `get-raw-schema` invocation."""

    endpoint_name: str | None = None
    watch: bool = False
    interval_seconds: float = WATCH_INTERVAL_SECONDS


def read_prior_schema(config: ProjectConfig) -> PriorSchema:
    """Read the stored schema, turning every failure into `MissingSchema`.

    A missing or corrupt local schema only means there is nothing to compare
    against; the cycle goes on and writes a fresh file.
    """

    try:
        return StoredSchema(text=config.get_stored_schema_text())
    except Exception as exc:
        return MissingSchema(reason=str(exc) or type(exc).__name__)


def derive_output_path(base_path: Path | str, *, cwd: Path | str | None = None) -> Path:
    """`a/b/schema.graphql` -> `a/b/schema.json`, relative to the working directory."""

    target = Path(base_path).with_suffix(".json")
    start = Path(cwd) if cwd is not None else Path.cwd()
    try:
        return Path(os.path.relpath(target, start))
    except ValueError:
        # Different drive on Windows: no relative form exists.
        return target


async def run_update_cycle(
    *,
    config: ProjectConfig,
    endpoint_name: str | None,
    log: LogSink,
    write: SchemaWriter = write_schema_file,
    cwd: Path | None = None,
) -> UpdateOutcome:
    """Run a single fetch / compare / persist cycle."""

    if not config.has_endpoint_config():
        raise NoEndpointConfiguredError()
    endpoint = config.get_endpoint(endpoint_name)

    log(f"Downloading introspection from [blue]{endpoint.url}[/blue]")
    new_schema = await endpoint.resolve_schema()

    prior = read_prior_schema(config)
    if isinstance(prior, StoredSchema) and print_sdl(new_schema) == prior.text:
        log("[green]No changes[/green]")
        return UpdateOutcome.NO_CHANGE

    # The SDL only drives the comparison; what lands on disk is the raw
    # introspection response of a second request.
    raw_introspection = await endpoint.fetch_introspection_text()

    schema_path = derive_output_path(config.get_schema_base_path(), cwd=cwd)
    target = schema_path if cwd is None else Path(cwd) / schema_path
    existed = target.exists()
    write(path=target, content=raw_introspection)

    outcome = UpdateOutcome.UPDATED if existed else UpdateOutcome.CREATED
    log(f"[green]Schema file was {outcome.value}: [blue]{schema_path}[/blue][/green]")
    return outcome


async def watch_schema(
    *,
    config: ProjectConfig,
    endpoint_name: str | None,
    reporter: StatusReporter,
    interval_seconds: float = WATCH_INTERVAL_SECONDS,
    sleep: Sleeper = asyncio.sleep,
    write: SchemaWriter = write_schema_file,
    cwd: Path | None = None,
    max_cycles: int | None = None,
) -> None:
    """Repeat `run_update_cycle` every `interval_seconds` until the process dies.

    Errors are not handled: the first failing cycle stops the loop and the
    exception propagates. The reporter is stopped on the way out so the
    terminal is left clean.
    """

    cycles = 0
    reporter.start()
    try:
        while max_cycles is None or cycles < max_cycles:
            outcome = await run_update_cycle(
                config=config,
                endpoint_name=endpoint_name,
                log=reporter.set_text,
                write=write,
                cwd=cwd,
            )
            if outcome.changed:
                reporter.stop()
                reporter.print_line(reporter.text)
                reporter.start()
                reporter.set_text("Updated!")
            else:
                reporter.set_text("No changes.")

            reporter.set_text(f"{reporter.text} Next update in {interval_seconds:g}s.")
            cycles += 1
            await sleep(interval_seconds)
    finally:
        reporter.stop()


async def get_raw_schema(
    *,
    config: ProjectConfig,
    request: SyncRequest,
    log: LogSink,
    reporter: StatusReporter | None = None,
    sleep: Sleeper = asyncio.sleep,
) -> UpdateOutcome | None:
    """Entry point used by the CLI: one-shot cycle or watch loop."""

    if request.watch:
        if reporter is None:
            raise ValueError("watch mode requires a status reporter")
        await watch_schema(
            config=config,
            endpoint_name=request.endpoint_name,
            reporter=reporter,
            interval_seconds=request.interval_seconds,
            sleep=sleep,
        )
        return None
    return await run_update_cycle(config=config, endpoint_name=request.endpoint_name, log=log)
