# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by component catalog operations."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for every error raised by the component catalog."""


class CatalogLookupError(CatalogError):
    """Raised when component names or documents cannot be resolved."""


class ComponentNotFoundError(CatalogLookupError):
    """Raised when a component name is unknown to the catalog."""

    def __init__(self, name: str) -> None:
        """Create the error for the missing component ``name``.

        Args:
            name: Component name that failed to resolve.
        """

        super().__init__(f"unknown component '{name}'")
        self.name = name


class SchemaParseError(CatalogError):
    """Raised when a component document cannot be parsed into schema rows."""

    def __init__(self, message: str, *, group: str) -> None:
        """Create the error for ``group`` with a descriptive ``message``.

        Args:
            message: Human-readable description of the parse failure.
            group: Schema group that was being parsed.
        """

        super().__init__(message)
        self.group = group


class ConfigError(CatalogError):
    """Raised when catalog configuration is invalid."""


__all__ = (
    "CatalogError",
    "CatalogLookupError",
    "ComponentNotFoundError",
    "ConfigError",
    "SchemaParseError",
)
