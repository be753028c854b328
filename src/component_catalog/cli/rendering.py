# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for catalog listing commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from ..controller import ComponentDetail
from ..types import ComponentSummary, LabelIndex, SchemaRow

_OPTION_COLUMNS = ("kind", "type", "defaultValue", "description")


def maven_coordinates(summary: ComponentSummary) -> str:
    """Return ``groupId:artifactId:version`` for the fields present in ``summary``."""

    parts = [summary[key] for key in ("groupId", "artifactId", "version") if key in summary]
    return ":".join(parts)


def build_components_table(summaries: Sequence[ComponentSummary]) -> Table:
    """Return a rich table listing one component per row.

    Args:
        summaries: Component summaries in display order.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title="Components", box=box.SIMPLE, expand=True)
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Label")
    table.add_column("Type", overflow="fold")
    table.add_column("Maven Coordinates", overflow="fold")
    table.add_column("Description", overflow="fold")
    for summary in summaries:
        table.add_row(
            summary["name"],
            summary["status"],
            summary.get("label", "-"),
            summary.get("type", "-"),
            maven_coordinates(summary) or "-",
            summary.get("description", "-"),
        )
    return table


def build_labels_table(index: LabelIndex) -> Table:
    """Return a rich table mapping each label to its component names."""

    table = Table(title="Labels", box=box.SIMPLE, expand=True)
    table.add_column("Label", style="bold")
    table.add_column("Components", overflow="fold")
    for label, names in index.items():
        table.add_row(label, ", ".join(names))
    return table


def build_detail_tables(detail: ComponentDetail) -> tuple[Table, Table]:
    """Return the metadata and option tables describing ``detail``."""

    metadata = Table(title="Metadata", box=box.SIMPLE, expand=True)
    metadata.add_column("Field", style="bold")
    metadata.add_column("Value", overflow="fold")
    for key, value in detail.summary.items():
        metadata.add_row(key, value)
    return metadata, _build_options_table(detail.options)


def _build_options_table(options: Sequence[SchemaRow]) -> Table:
    table = Table(title="Options", box=box.SIMPLE, expand=True)
    table.add_column("Name", style="bold")
    for column in _OPTION_COLUMNS:
        table.add_column(column[0].upper() + column[1:], overflow="fold")
    for option in options:
        table.add_row(option.get("name", "-"), *(option.get(column, "-") for column in _OPTION_COLUMNS))
    return table


__all__ = [
    "build_components_table",
    "build_detail_tables",
    "build_labels_table",
    "maven_coordinates",
]
