# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Flatten component JSON documents into key/value schema rows."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Protocol, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .errors import SchemaParseError
from .types import JSONValue, SchemaRow


class SchemaParser(Protocol):
    """Callable contract satisfied by :func:`parse_json_schema`."""

    def __call__(self, group: str, document: str, *, strict: bool = False) -> list[SchemaRow]:
        """Return the rows of ``group`` parsed from ``document``."""


def parse_json_schema(group: str, document: str, *, strict: bool = False) -> list[SchemaRow]:
    """Parse ``group`` of a component JSON document into flat rows.

    Scalar entries of the group become single-key rows (``{"label": "file"}``).
    Object entries become one row per entry carrying the entry key under
    ``name`` followed by its scalar attributes, which is the layout of option
    groups such as ``properties``. ``null`` values are dropped so that absent
    fields never surface as placeholders.

    Args:
        group: Top-level group to extract, e.g. ``"component"``.
        document: Raw JSON text describing one component.
        strict: When ``True`` a missing group is an error; otherwise an empty
            list is returned.

    Returns:
        list[SchemaRow]: Rows in document order.

    Raises:
        SchemaParseError: If the document is not valid JSON, is not an object,
            or the group has the wrong shape (or is missing under ``strict``).
    """

    try:
        payload = cast(JSONValue, json.loads(document))
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"malformed component document: {exc}", group=group) from exc

    validator = Draft202012Validator(_document_schema(group, strict=strict))
    try:
        validator.validate(payload)
    except JsonSchemaValidationError as exc:
        raise SchemaParseError(f"invalid component document: {exc.message}", group=group) from exc

    root = cast(Mapping[str, JSONValue], payload)
    section = root.get(group)
    if section is None:
        return []
    rows: list[SchemaRow] = []
    for key, value in cast(Mapping[str, JSONValue], section).items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            row: SchemaRow = {"name": key}
            for attribute, item in value.items():
                if item is not None:
                    row[attribute] = _as_text(item)
            rows.append(row)
        else:
            rows.append({key: _as_text(value)})
    return rows


def _document_schema(group: str, *, strict: bool) -> dict[str, object]:
    """Return the structural JSON schema applied before flattening ``group``.

    Args:
        group: Group name that must be a JSON object when present.
        strict: Whether the group is required.

    Returns:
        dict[str, object]: Draft 2020-12 schema document.
    """

    group_type: str | list[str] = "object" if strict else ["object", "null"]
    schema: dict[str, object] = {
        "type": "object",
        "properties": {group: {"type": group_type}},
    }
    if strict:
        schema["required"] = [group]
    return schema


def _as_text(value: JSONValue) -> str:
    """Render a JSON value as the string stored in a schema row."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Mapping, Sequence)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


__all__ = ["SchemaParser", "parse_json_schema"]
