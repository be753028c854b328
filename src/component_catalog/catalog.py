# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Component catalog contract and the bundled implementations."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Generic, Protocol, TypeVar, runtime_checkable

from .errors import CatalogLookupError, ComponentNotFoundError
from .io import load_document_text
from .scanner import CatalogScanner
from .schema import SchemaParser, parse_json_schema
from .types import COMPONENT_GROUP, JSONValue

LOGGER = logging.getLogger(__name__)

SourceT = TypeVar("SourceT")


@runtime_checkable
class ComponentCatalog(Protocol):
    """Read-only registry of components and their JSON documents."""

    def find_component_names(self, pattern: re.Pattern[str] | None = None) -> list[str]:
        """Return component names, optionally restricted to those matching ``pattern``.

        Args:
            pattern: Expression a name, or one of the component's labels, must
                fully match. ``None`` selects every component.

        Returns:
            list[str]: Names in catalog order.

        Raises:
            CatalogLookupError: If names cannot be enumerated.
        """

    def component_json_schema(self, name: str) -> str:
        """Return the JSON document describing ``name``.

        Raises:
            ComponentNotFoundError: If ``name`` is unknown.
            CatalogLookupError: If the document cannot be retrieved.
        """

    def find_labels(self) -> tuple[str, ...]:
        """Return every distinct label carried by catalog components, sorted."""


class DocumentCatalog(ABC, Generic[SourceT]):
    """Shared name and label matching for catalogs backed by JSON documents.

    Subclasses expose where each document lives through :meth:`_locate` and how
    to read it through :meth:`_read`. Every public query locates documents once
    and reads each document at most once.
    """

    def __init__(self, *, parser: SchemaParser = parse_json_schema) -> None:
        self._parser = parser

    @abstractmethod
    def _locate(self) -> Mapping[str, SourceT]:
        """Return document sources keyed by component name, in catalog order."""

    @abstractmethod
    def _read(self, name: str, source: SourceT) -> str:
        """Return the JSON text stored at ``source`` for component ``name``."""

    def component_names(self) -> list[str]:
        """Return every component name in catalog order."""

        return list(self._locate())

    def component_json_schema(self, name: str) -> str:
        """Return the JSON document describing ``name``.

        Raises:
            ComponentNotFoundError: If ``name`` is unknown.
        """

        sources = self._locate()
        if name not in sources:
            raise ComponentNotFoundError(name)
        return self._read(name, sources[name])

    def find_component_names(self, pattern: re.Pattern[str] | None = None) -> list[str]:
        """Return names whose name or any label part fully matches ``pattern``.

        Args:
            pattern: Expression to match; ``None`` selects every component.

        Returns:
            list[str]: Matching names in catalog order.
        """

        sources = self._locate()
        if pattern is None:
            return list(sources)
        matched = [
            name
            for name, source in sources.items()
            if pattern.fullmatch(name)
            or any(pattern.fullmatch(label) for label in self._labels_of(self._read(name, source)))
        ]
        LOGGER.debug("resolved %d of %d components for pattern=%s", len(matched), len(sources), pattern.pattern)
        return matched

    def find_labels(self) -> tuple[str, ...]:
        """Return every distinct label carried by catalog components, sorted."""

        labels: set[str] = set()
        for name, source in self._locate().items():
            labels.update(self._labels_of(self._read(name, source)))
        return tuple(sorted(labels))

    def component_labels(self, name: str) -> tuple[str, ...]:
        """Return the comma-separated labels declared by ``name``.

        Args:
            name: Component whose ``label`` field is split.

        Returns:
            tuple[str, ...]: Trimmed, non-empty label parts in declaration order.
        """

        return self._labels_of(self.component_json_schema(name))

    def _labels_of(self, document: str) -> tuple[str, ...]:
        """Split the ``label`` rows of ``document`` into unique label parts.

        Only single-key rows are considered, matching the summary projection.

        Args:
            document: Raw JSON text of one component.

        Returns:
            tuple[str, ...]: Label parts in declaration order.
        """

        parts: list[str] = []
        for row in self._parser(COMPONENT_GROUP, document, strict=False):
            raw = row.get("label") if len(row) == 1 else None
            if raw is None:
                continue
            parts.extend(part.strip() for part in raw.split(",") if part.strip())
        return tuple(dict.fromkeys(parts))


class DirectoryComponentCatalog(DocumentCatalog[Path]):
    """Catalog reading one ``<name>.json`` document per component from disk."""

    def __init__(self, catalog_root: Path, *, parser: SchemaParser = parse_json_schema) -> None:
        super().__init__(parser=parser)
        self.catalog_root = catalog_root
        self._scanner = CatalogScanner(catalog_root)

    def _locate(self) -> Mapping[str, Path]:
        return self._scanner.component_documents()

    def _read(self, name: str, source: Path) -> str:
        LOGGER.debug("loading component=%s path=%s", name, source)
        return load_document_text(source, name=name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.catalog_root)!r})"


class InMemoryComponentCatalog(DocumentCatalog[str]):
    """Catalog over an in-memory mapping of component name to JSON document."""

    def __init__(
        self,
        documents: Mapping[str, str | Mapping[str, JSONValue]],
        *,
        parser: SchemaParser = parse_json_schema,
    ) -> None:
        super().__init__(parser=parser)
        self._documents: dict[str, str] = {}
        for name, document in documents.items():
            if isinstance(document, str):
                self._documents[name] = document
            else:
                try:
                    self._documents[name] = json.dumps(document)
                except (TypeError, ValueError) as exc:
                    raise CatalogLookupError(f"component '{name}': document is not JSON serialisable") from exc

    def _locate(self) -> Mapping[str, str]:
        return self._documents

    def _read(self, name: str, source: str) -> str:
        return source


__all__ = [
    "ComponentCatalog",
    "DirectoryComponentCatalog",
    "DocumentCatalog",
    "InMemoryComponentCatalog",
]
