# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog listing commands and their Typer entry points."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict
from typing import Annotated

import typer
from rich.console import Console

from ..controller import CatalogController
from ..errors import CatalogError
from .rendering import build_components_table, build_detail_tables, build_labels_table
from .shared import CLIError, CLILogger, CLIState


def run_component_list(
    controller: CatalogController,
    filter_pattern: str | None,
    *,
    console: Console,
    as_json: bool = False,
    logger: CLILogger | None = None,
) -> int:
    """Render the component listing and return an exit status.

    Args:
        controller: Controller answering the catalog query.
        filter_pattern: Optional wildcard filter over names and labels.
        console: Rich console used for table output.
        as_json: Emit a JSON array instead of a table.
        logger: Optional logger warned when a filter matches nothing.

    Returns:
        int: ``0`` on success.

    Raises:
        CLIError: If the catalog query fails.
    """

    try:
        summaries = controller.list_components(filter_pattern)
    except CatalogError as exc:
        raise CLIError(str(exc)) from exc
    if as_json:
        typer.echo(json.dumps(summaries, indent=2))
    elif not summaries and filter_pattern is not None and logger is not None:
        logger.warn(f"no components match '{filter_pattern}'")
    else:
        console.print(build_components_table(summaries))
        if logger is not None:
            logger.info(f"{len(summaries)} component(s) listed")
    return 0


def run_label_list(
    controller: CatalogController,
    *,
    console: Console,
    as_json: bool = False,
    logger: CLILogger | None = None,
) -> int:
    """Render the label index and return an exit status."""

    try:
        index = controller.list_labels()
    except CatalogError as exc:
        raise CLIError(str(exc)) from exc
    if as_json:
        typer.echo(json.dumps(index, indent=2))
    else:
        console.print(build_labels_table(index))
        if logger is not None:
            logger.ok(f"{len(index)} label(s) indexed")
    return 0


def run_component_info(
    controller: CatalogController,
    name: str,
    *,
    console: Console,
    as_json: bool = False,
    logger: CLILogger | None = None,
) -> int:
    """Render metadata and options for the component ``name``."""

    try:
        detail = controller.component_detail(name)
    except CatalogError as exc:
        raise CLIError(str(exc)) from exc
    if as_json:
        typer.echo(json.dumps(asdict(detail), indent=2))
    else:
        if logger is not None:
            logger.section(f"Component {detail.name}")
        for table in build_detail_tables(detail):
            console.print(table)
    return 0


JsonOption = Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")]


def component_list_command(
    ctx: typer.Context,
    filter_pattern: Annotated[
        str | None,
        typer.Argument(metavar="FILTER", help="Wildcard matched against names and labels."),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """List catalog components with their metadata."""

    state = _state(ctx)
    _exit(
        state.logger,
        lambda: run_component_list(
            state.controller,
            filter_pattern,
            console=state.console,
            as_json=as_json,
            logger=state.logger,
        ),
    )


def label_list_command(ctx: typer.Context, as_json: JsonOption = False) -> None:
    """List catalog labels and the components carrying them."""

    state = _state(ctx)
    _exit(
        state.logger,
        lambda: run_label_list(state.controller, console=state.console, as_json=as_json, logger=state.logger),
    )


def component_info_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Component name.")],
    as_json: JsonOption = False,
) -> None:
    """Show metadata and options of a single component."""

    state = _state(ctx)
    _exit(
        state.logger,
        lambda: run_component_info(
            state.controller,
            name,
            console=state.console,
            as_json=as_json,
            logger=state.logger,
        ),
    )


def _state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` installed by the application callback."""

    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state was not initialised by the application callback")
    return state


def _exit(logger: CLILogger, run: Callable[[], int]) -> None:
    """Run ``run`` and translate its outcome into a Typer exit.

    Args:
        logger: Logger reporting :class:`CLIError` failures.
        run: Command body returning an exit status.

    Raises:
        typer.Exit: Always, carrying the resulting exit status.
    """

    try:
        exit_code = run()
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


__all__ = [
    "component_info_command",
    "component_list_command",
    "label_list_command",
    "run_component_info",
    "run_component_list",
    "run_label_list",
]
