# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from component_catalog.types import JSONValue

FTP_DOCUMENT: dict[str, JSONValue] = {
    "component": {
        "kind": "component",
        "scheme": "ftp",
        "description": "FTP endpoint",
        "label": "file",
        "javaType": "org.example.component.file.FtpComponent",
        "groupId": "org.example",
        "artifactId": "example-ftp",
        "version": "1.2.0",
    },
    "properties": {
        "host": {"kind": "path", "type": "string", "description": "Hostname of the FTP server"},
        "binary": {"kind": "parameter", "type": "boolean", "defaultValue": False},
    },
}

TIMER_DOCUMENT: dict[str, JSONValue] = {
    "component": {
        "kind": "component",
        "scheme": "timer",
        "label": "core",
    },
}


def _write_json(path: Path, payload: JSONValue) -> None:
    """Serialize *payload* as formatted JSON to *path*.

    Args:
        path: Destination file path.
        payload: JSON-serializable payload to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Return a catalog directory holding the ``ftp`` and ``timer`` components."""
    root = tmp_path / "catalog"
    _write_json(root / "ftp.json", FTP_DOCUMENT)
    _write_json(root / "core" / "timer.json", TIMER_DOCUMENT)
    _write_json(root / "_defaults.json", {"component": {"label": "ignored"}})
    return root


@pytest.fixture
def ftp_document() -> dict[str, JSONValue]:
    """Return the ``ftp`` component document."""
    return json.loads(json.dumps(FTP_DOCUMENT))


@pytest.fixture
def timer_document() -> dict[str, JSONValue]:
    """Return the ``timer`` component document."""
    return json.loads(json.dumps(TIMER_DOCUMENT))
