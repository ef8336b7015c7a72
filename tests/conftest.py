"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from lua_splitter.writer import InMemoryWriter

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def lua_parser() -> Parser:
    """Return a tree-sitter parser for Lua."""
    return get_parser("lua")


@pytest.fixture
def parse_statements(lua_parser: Parser) -> Callable[[str], tuple[list[Node], bytes]]:
    """Return a helper that parses source and yields its top-level statements and bytes."""

    def _parse(source: str) -> tuple[list[Node], bytes]:
        source_bytes = source.encode("utf-8")
        tree = lua_parser.parse(source_bytes)
        return list(tree.root_node.named_children), source_bytes

    return _parse


@pytest.fixture
def memory_writer() -> InMemoryWriter:
    return InMemoryWriter()
