# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for wildcard to regular expression translation."""

from __future__ import annotations

import pytest

from component_catalog.wildcard import has_wildcards, wildcard_to_regex


@pytest.mark.parametrize(
    ("pattern", "candidate", "expected"),
    [
        ("*", "anything", True),
        ("*", "", True),
        ("f*", "ftp", True),
        ("f*", "timer", False),
        ("ti?er", "timer", True),
        ("ti?er", "tiier", True),
        ("ti?er", "tier", False),
        ("file", "file", True),
        ("file", "files", False),
        ("FTP", "ftp", True),
        ("a.b", "a.b", True),
        ("a.b", "axb", False),
        ("sql+", "sql+", True),
        ("sql+", "sqll", False),
        ("  f*  ", "ftp", True),
    ],
)
def test_wildcard_to_regex_matches(pattern: str, candidate: str, expected: bool) -> None:
    assert (wildcard_to_regex(pattern).fullmatch(candidate) is not None) is expected


def test_has_wildcards_detects_metacharacters() -> None:
    assert has_wildcards("f*")
    assert has_wildcards("ti?er")
    assert not has_wildcards("file,remote")
