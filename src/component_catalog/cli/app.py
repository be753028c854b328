# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ..catalog import DirectoryComponentCatalog
from ..config import load_settings
from ..controller import CatalogController
from ..errors import ConfigError
from .commands import component_info_command, component_list_command, label_list_command
from .shared import EXIT_CONFIG_ERROR, CLIState, build_cli_logger, configure_debug_logging

app = typer.Typer(help="Browse the integration component catalog.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding configuration.")] = Path(),
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog directory overriding the configured catalog_root."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log catalog lookups.")] = False,
) -> None:
    """Load configuration and build the controller shared by every command."""

    project_root = root.resolve()
    overrides = {
        "catalog_root": catalog,
        "emoji": False if no_emoji else None,
        "color": False if no_color else None,
        "debug": True if debug else None,
    }
    try:
        settings = load_settings(project_root, overrides=overrides)
    except ConfigError as exc:
        build_cli_logger(emoji=not no_emoji, no_color=no_color).fail(str(exc))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    logger = build_cli_logger(emoji=settings.emoji, no_color=not settings.color)
    console = Console(no_color=not settings.color, emoji=settings.emoji, highlight=False)
    if settings.debug:
        configure_debug_logging(logger.console)
    catalog_impl = DirectoryComponentCatalog(settings.resolved_catalog_root(project_root))
    ctx.obj = CLIState(
        settings=settings,
        controller=CatalogController(catalog_impl),
        logger=logger,
        console=console,
    )


app.command("component-list")(component_list_command)
app.command("label-list")(label_list_command)
app.command("component-info")(component_info_command)

__all__ = ["app", "main"]
