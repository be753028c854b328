# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for directory-backed catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import CatalogLookupError

DOCUMENT_SUFFIX: Final[str] = ".json"


@dataclass(slots=True)
class CatalogScanner:
    """Scan the catalog directory tree for component documents."""

    catalog_root: Path

    def component_documents(self) -> dict[str, Path]:
        """Return component document paths keyed by component name.

        Files whose name starts with ``_`` are skipped. When two documents share
        a stem the one with the lexicographically smaller path wins.

        Returns:
            dict[str, Path]: Mapping sorted by component name.

        Raises:
            CatalogLookupError: If ``catalog_root`` is not a directory.
        """
        if not self.catalog_root.is_dir():
            raise CatalogLookupError(f"{self.catalog_root}: catalog directory does not exist")
        documents: dict[str, Path] = {}
        for json_path in sorted(self.catalog_root.rglob(f"*{DOCUMENT_SUFFIX}")):
            if json_path.name.startswith("_"):
                continue
            documents.setdefault(json_path.stem, json_path)
        return dict(sorted(documents.items()))


__all__ = ["DOCUMENT_SUFFIX", "CatalogScanner"]
