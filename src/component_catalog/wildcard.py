# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate shell-style wildcard filters into regular expressions."""

from __future__ import annotations

import re
from typing import Final

WILDCARD_CHARACTERS: Final[frozenset[str]] = frozenset("*?")


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Return a compiled regular expression equivalent to ``pattern``.

    ``*`` matches any run of characters and ``?`` matches exactly one; every
    other character is matched literally. Surrounding whitespace is ignored and
    matching is case-insensitive. Callers are expected to use ``fullmatch``.

    Args:
        pattern: Shell-style wildcard pattern such as ``"f*"`` or ``"ti?er"``.

    Returns:
        re.Pattern[str]: Compiled expression matching the same strings.
    """

    parts: list[str] = []
    for char in pattern.strip():
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE)


def has_wildcards(value: str) -> bool:
    """Return ``True`` when ``value`` contains wildcard metacharacters."""

    return any(char in WILDCARD_CHARACTERS for char in value)


__all__ = ["WILDCARD_CHARACTERS", "has_wildcards", "wildcard_to_regex"]
