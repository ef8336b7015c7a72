from tree_sitter import Node, Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from lua_splitter.core.errors import LuaParseError

LANGUAGE: SupportedLanguage = "lua"

_SNIPPET_WIDTH = 20


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def parse_lua(source: bytes) -> Tree:
    """Parse Lua source bytes, raising ``LuaParseError`` if the tree has errors."""
    parser = get_parser(LANGUAGE)
    tree = parser.parse(source)

    root = tree.root_node
    if root.has_error:
        error = _first_error(root) or root
        snippet = source[error.start_byte : error.start_byte + _SNIPPET_WIDTH].decode("utf-8", errors="replace")
        row, column = error.start_point
        raise LuaParseError(row, column, snippet.splitlines()[0] if snippet.strip() else "")

    return tree


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")
