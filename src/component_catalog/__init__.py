# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the component catalog."""

from __future__ import annotations

from typing import Final

from .catalog import ComponentCatalog, DirectoryComponentCatalog, InMemoryComponentCatalog
from .config import CatalogSettings, load_settings
from .controller import CatalogController, ComponentDetail
from .errors import (
    CatalogError,
    CatalogLookupError,
    ComponentNotFoundError,
    ConfigError,
    SchemaParseError,
)
from .schema import parse_json_schema
from .types import STATUS_RELEASE, ComponentSummary, LabelIndex
from .wildcard import wildcard_to_regex

__all__: Final[tuple[str, ...]] = (
    "STATUS_RELEASE",
    "CatalogController",
    "CatalogError",
    "CatalogLookupError",
    "CatalogSettings",
    "ComponentCatalog",
    "ComponentDetail",
    "ComponentNotFoundError",
    "ComponentSummary",
    "ConfigError",
    "DirectoryComponentCatalog",
    "InMemoryComponentCatalog",
    "LabelIndex",
    "SchemaParseError",
    "load_settings",
    "parse_json_schema",
    "wildcard_to_regex",
)
