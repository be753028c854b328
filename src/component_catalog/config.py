# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration model and TOML sources for the component catalog."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".component-catalog.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "component-catalog"

_ENV_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class CatalogSettings(BaseModel):
    """Settings controlling where the catalog lives and how output is rendered."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    catalog_root: Path = Field(default_factory=lambda: Path("catalog"))
    emoji: bool = True
    color: bool = True
    debug: bool = False

    def resolved_catalog_root(self, project_root: Path) -> Path:
        """Return ``catalog_root`` anchored at ``project_root`` when relative."""

        if self.catalog_root.is_absolute():
            return self.catalog_root
        return (project_root / self.catalog_root).resolve()


def load_settings(
    project_root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> CatalogSettings:
    """Load settings for ``project_root`` from defaults, TOML sources and overrides.

    Sources are applied in increasing precedence: built-in defaults, the
    ``[tool.component-catalog]`` table of ``pyproject.toml``, a standalone
    ``.component-catalog.toml``, then ``overrides``. ``${VAR}`` references in
    string values expand from ``env`` (``os.environ`` by default).

    Args:
        project_root: Directory searched for configuration files.
        overrides: Explicit values, typically collected from CLI options.
        env: Environment used for variable expansion.

    Returns:
        CatalogSettings: Validated settings.

    Raises:
        ConfigError: If a source cannot be parsed or a value is invalid.
    """

    environment = env if env is not None else os.environ
    merged: dict[str, Any] = {}
    merged.update(_pyproject_section(project_root / PYPROJECT_FILENAME))
    merged.update(_read_toml(project_root / CONFIG_FILENAME))
    merged = {key: _expand_env(value, environment) for key, value in merged.items()}
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return CatalogSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid component catalog configuration: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    """Return the ``[tool.component-catalog]`` table of ``path``, or ``{}`` when absent."""

    data = _read_toml(path)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return {key.replace("-", "_"): value for key, value in section.items()}


def _read_toml(path: Path) -> dict[str, Any]:
    """Parse ``path`` as TOML.

    Returns:
        dict[str, Any]: Parsed document, or ``{}`` when ``path`` is not a file.

    Raises:
        ConfigError: If the file is not valid TOML.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: failed to parse TOML: {exc}") from exc
    return {key.replace("-", "_"): value for key, value in data.items()}


def _expand_env(value: Any, env: Mapping[str, str]) -> Any:
    """Substitute ``${VAR}`` references in string values; unknown variables stay as written."""

    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda match: env.get(match.group(1), match.group(0)), value)
    return value


__all__ = [
    "CONFIG_FILENAME",
    "CatalogSettings",
    "load_settings",
]
