# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading component documents from disk."""

from __future__ import annotations

from pathlib import Path

from .errors import CatalogLookupError, ComponentNotFoundError


def load_document_text(path: Path, *, name: str) -> str:
    """Return the raw JSON text stored at ``path``.

    Args:
        path: Filesystem path to the component document.
        name: Component name used in error reporting.

    Returns:
        str: Document contents decoded as UTF-8.

    Raises:
        ComponentNotFoundError: If the document does not exist.
        CatalogLookupError: If the document cannot be read.
    """
    if not path.is_file():
        raise ComponentNotFoundError(name)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLookupError(f"{path}: failed to read component document") from exc


__all__ = ["load_document_text"]
