# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the component catalog CLI."""

from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from typer.testing import CliRunner

from component_catalog.catalog import DirectoryComponentCatalog
from component_catalog.cli import app
from component_catalog.cli.commands import run_component_info, run_component_list, run_label_list
from component_catalog.cli.shared import configure_debug_logging
from component_catalog.config import CONFIG_FILENAME
from component_catalog.controller import CatalogController

runner = CliRunner()


def _invoke(catalog_root: Path, *args: str):
    return runner.invoke(
        app,
        ["--root", str(catalog_root.parent), "--catalog", str(catalog_root), "--no-emoji", "--no-color", *args],
    )


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, force_terminal=False, color_system=None, emoji=False, width=200), buffer


def test_component_list_json(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-list", "--json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [row["name"] for row in payload] == ["ftp", "timer"]
    assert payload[1] == {"name": "timer", "status": "release", "label": "core"}


def test_component_list_filter_json(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-list", "f*", "--json")

    assert result.exit_code == 0
    assert [row["name"] for row in json.loads(result.stdout)] == ["ftp"]


def test_label_list_json(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "label-list", "--json")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"core": ["timer"], "file": ["ftp"]}


def test_component_info_json(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-info", "ftp", "--json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["summary"]["artifactId"] == "example-ftp"
    assert [option["name"] for option in payload["options"]] == ["host", "binary"]


def test_component_info_unknown_component_fails(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-info", "jms")

    assert result.exit_code == 1
    assert "unknown component 'jms'" in result.output


def test_missing_catalog_directory_fails(tmp_path: Path) -> None:
    result = _invoke(tmp_path / "missing", "component-list")

    assert result.exit_code == 1
    assert "catalog directory does not exist" in result.output


def test_invalid_configuration_exits_with_config_status(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("colour = true\n", encoding="utf-8")

    result = runner.invoke(app, ["--root", str(tmp_path), "--no-emoji", "component-list"])

    assert result.exit_code == 2
    assert "invalid component catalog configuration" in result.output


def test_run_component_list_renders_table(catalog_root: Path) -> None:
    console, buffer = _console()
    controller = CatalogController(DirectoryComponentCatalog(catalog_root))

    exit_code = run_component_list(controller, None, console=console)

    assert exit_code == 0
    output = buffer.getvalue()
    assert "ftp" in output
    assert "org.example:example-ftp:1.2.0" in output
    assert "FTP endpoint" in output


def test_run_label_list_renders_table(catalog_root: Path) -> None:
    console, buffer = _console()
    controller = CatalogController(DirectoryComponentCatalog(catalog_root))

    exit_code = run_label_list(controller, console=console)

    assert exit_code == 0
    output = buffer.getvalue()
    assert "core" in output
    assert "timer" in output


def test_run_component_info_renders_metadata_and_options(catalog_root: Path) -> None:
    console, buffer = _console()
    controller = CatalogController(DirectoryComponentCatalog(catalog_root))

    exit_code = run_component_info(controller, "ftp", console=console)

    assert exit_code == 0
    output = buffer.getvalue()
    assert "Metadata" in output
    assert "Options" in output
    assert "example-ftp" in output
    assert "host" in output
    assert "Hostname of the FTP server" in output


def test_component_info_table_is_introduced_by_a_section(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-info", "ftp")

    assert result.exit_code == 0
    assert "--- Component ftp ---" in result.output
    assert result.output.index("--- Component ftp ---") < result.output.index("Metadata")


def test_table_listings_report_their_totals(catalog_root: Path) -> None:
    components = _invoke(catalog_root, "component-list")
    labels = _invoke(catalog_root, "label-list")

    assert components.exit_code == 0
    assert "2 component(s) listed" in components.output
    assert labels.exit_code == 0
    assert "2 label(s) indexed" in labels.output


def test_json_output_carries_no_status_lines(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-info", "ftp", "--json")

    assert result.exit_code == 0
    assert "--- Component" not in result.output
    assert json.loads(result.stdout)["summary"]["name"] == "ftp"


def test_component_list_warns_when_filter_matches_nothing(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-list", "jms*")

    assert result.exit_code == 0
    assert "no components match 'jms*'" in result.output


def test_component_list_json_without_matches_is_empty_array(catalog_root: Path) -> None:
    result = _invoke(catalog_root, "component-list", "jms*", "--json")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == []


def test_debug_logging_installs_single_rich_handler() -> None:
    logger = logging.getLogger("component_catalog")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    console, buffer = _console()
    try:
        logger.handlers.clear()
        configure_debug_logging(console)
        configure_debug_logging(console)

        assert len([handler for handler in logger.handlers if isinstance(handler, RichHandler)]) == 1
        assert logger.level == logging.DEBUG
        logging.getLogger("component_catalog.catalog").debug("loading component=ftp")
        assert "loading component=ftp" in buffer.getvalue()
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
