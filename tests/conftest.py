"""Shared fixtures."""

from __future__ import annotations

import textwrap

import pytest


@pytest.fixture
def parse():
    """Parse dedented source and return the root node (javascript by default)."""
    from unsnarl.grammar import parse_source

    def _parse(code: str, language: str = "javascript"):
        return parse_source(textwrap.dedent(code), language).root_node

    return _parse
