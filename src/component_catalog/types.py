# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the component catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

SchemaRow: TypeAlias = dict[str, str]
ComponentSummary: TypeAlias = dict[str, str]
LabelIndex: TypeAlias = dict[str, tuple[str, ...]]

COMPONENT_GROUP: Final[str] = "component"
PROPERTIES_GROUP: Final[str] = "properties"

# Components listed from the catalog are those shipped with the release.
STATUS_RELEASE: Final[str] = "release"

SUMMARY_FIELDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "description": "description",
        "label": "label",
        "javaType": "type",
        "groupId": "groupId",
        "artifactId": "artifactId",
        "version": "version",
    },
)

__all__ = [
    "COMPONENT_GROUP",
    "PROPERTIES_GROUP",
    "STATUS_RELEASE",
    "SUMMARY_FIELDS",
    "ComponentSummary",
    "JSONPrimitive",
    "JSONValue",
    "LabelIndex",
    "SchemaRow",
]
