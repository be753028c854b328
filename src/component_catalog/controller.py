# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Controller projecting catalog documents into summary rows and label indexes."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .catalog import ComponentCatalog
from .schema import SchemaParser, parse_json_schema
from .types import (
    COMPONENT_GROUP,
    PROPERTIES_GROUP,
    STATUS_RELEASE,
    SUMMARY_FIELDS,
    ComponentSummary,
    LabelIndex,
    SchemaRow,
)
from .wildcard import has_wildcards, wildcard_to_regex

LOGGER = logging.getLogger(__name__)

WildcardTranslator = Callable[[str], re.Pattern[str]]


@dataclass(frozen=True, slots=True)
class ComponentDetail:
    """Summary of a single component together with its option rows."""

    summary: ComponentSummary
    options: tuple[SchemaRow, ...]

    @property
    def name(self) -> str:
        return self.summary["name"]


@dataclass(frozen=True, slots=True)
class CatalogController:
    """Answer catalog listing queries on top of an injected :class:`ComponentCatalog`.

    Every call reads the catalog afresh and returns newly built structures.
    Errors raised by the catalog, the schema parser, or the wildcard translator
    propagate unchanged; one failing component aborts the whole call.
    """

    catalog: ComponentCatalog
    parser: SchemaParser = field(default=parse_json_schema)
    translate_wildcard: WildcardTranslator = field(default=wildcard_to_regex)

    def list_components(self, filter: str | None = None) -> list[ComponentSummary]:  # noqa: A002
        """Return one summary row per component matching ``filter``.

        Args:
            filter: Optional shell-style wildcard matched against component
                names and labels. ``None`` lists every component.

        Returns:
            list[ComponentSummary]: Summaries in catalog resolution order.
        """

        pattern = self.translate_wildcard(filter) if filter is not None else None
        names = self.catalog.find_component_names(pattern)
        LOGGER.debug("listing components filter=%s matched=%d", filter, len(names))
        return [self._summarise(name) for name in names]

    def list_labels(self) -> LabelIndex:
        """Group component names by the labels they carry.

        Each label is fed back through :meth:`list_components` as a wildcard
        filter. Labels containing ``*`` or ``?`` therefore widen the match; that
        is logged rather than corrected.

        Returns:
            LabelIndex: Label to component names, omitting labels without matches.
        """

        index: LabelIndex = {}
        for label in self.catalog.find_labels():
            if has_wildcards(label):
                LOGGER.warning("label '%s' contains wildcard characters and is used as a filter verbatim", label)
            names = _unique(summary["name"] for summary in self.list_components(label) if "name" in summary)
            if names:
                index[label] = names
        return index

    def component_detail(self, name: str) -> ComponentDetail:
        """Return the summary and option rows for the component ``name``.

        Raises:
            ComponentNotFoundError: If the catalog does not know ``name``.
        """

        document = self.catalog.component_json_schema(name)
        summary = self._project(name, self.parser(COMPONENT_GROUP, document, strict=False))
        options = tuple(self.parser(PROPERTIES_GROUP, document, strict=False))
        return ComponentDetail(summary=summary, options=options)

    def _summarise(self, name: str) -> ComponentSummary:
        """Fetch and project the document of ``name`` into a summary row."""

        document = self.catalog.component_json_schema(name)
        return self._project(name, self.parser(COMPONENT_GROUP, document, strict=False))

    @staticmethod
    def _project(name: str, rows: Iterable[SchemaRow]) -> ComponentSummary:
        """Build the summary of ``name`` from its ``component`` group rows.

        Only single-key rows carry component metadata; rows flattened from
        object-valued entries describe nested structures and are ignored.

        Args:
            name: Component name stored under ``name``.
            rows: Rows parsed from the ``component`` group.

        Returns:
            ComponentSummary: ``name``, ``status`` and every field found, taking
            the first row that defines each field.
        """

        found: dict[str, str] = {}
        for row in rows:
            if len(row) != 1:
                continue
            ((key, value),) = row.items()
            target = SUMMARY_FIELDS.get(key)
            if target is not None and target not in found:
                found[target] = value
        summary: ComponentSummary = {"name": name, "status": STATUS_RELEASE}
        for target in SUMMARY_FIELDS.values():
            if target in found:
                summary[target] = found[target]
        return summary


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    """Return ``names`` without duplicates, keeping first occurrences in order."""

    return tuple(dict.fromkeys(names))


__all__ = ["CatalogController", "ComponentDetail", "WildcardTranslator"]
