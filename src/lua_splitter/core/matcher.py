"""Classification of top-level Lua statements into splittable shapes.

Three shapes are recognised, checked in this order:

* ``function name(...) ... end`` and ``local function name(...) ... end``, where
  the name may be a field or method chain (``function Foo.bar:baz()``).
* ``local name = function(...) ... end`` with exactly one name and one value.
* ``name = function(...) ... end`` or ``Foo.bar = function(...) ... end``.

Any other statement is left alone.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from lua_splitter.core.errors import UnsupportedIdentifierError
from lua_splitter.core.naming import symbol_name
from lua_splitter.core.parser import node_text
from lua_splitter.models import ByteRange, MemberAccess, NameChain, SimpleName, SplitShape, SplitTarget

logger = logging.getLogger(__name__)

# Some grammar releases emit a separate node type for ``local function``.
_DECLARATION_TYPES = frozenset({"function_declaration", "local_function_declaration"})

_INDEX_FIELDS = {
    "dot_index_expression": (".", "field"),
    "method_index_expression": (":", "method"),
}


def _significant_children(node: Node | None) -> list[Node]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type != "comment"]


def _first_named(node: Node, node_type: str) -> Node | None:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def _byte_range(node: Node) -> ByteRange:
    return ByteRange(start=node.start_byte, end=node.end_byte)


def is_name_chain(node: Node) -> bool:
    """True when *node* is an identifier or a ``.``/``:`` chain rooted at one."""
    if node.type == "identifier":
        return True
    if node.type not in _INDEX_FIELDS:
        return False
    _, member_field = _INDEX_FIELDS[node.type]
    table = node.child_by_field_name("table")
    member = node.child_by_field_name(member_field)
    if table is None or member is None or member.type != "identifier":
        return False
    return is_name_chain(table)


def name_chain_from_node(node: Node, source: bytes) -> NameChain:
    """Rebuild the name chain of an identifier, field or method access node.

    Raises ``UnsupportedIdentifierError`` for any other node kind.
    """
    if node.type == "identifier":
        return SimpleName(name=node_text(node, source))
    if node.type in _INDEX_FIELDS:
        indexer, member_field = _INDEX_FIELDS[node.type]
        table = node.child_by_field_name("table")
        member = node.child_by_field_name(member_field)
        if table is None or member is None:
            raise UnsupportedIdentifierError(node.type)
        return MemberAccess(
            base=name_chain_from_node(table, source),
            indexer=indexer,
            member=node_text(member, source),
        )
    raise UnsupportedIdentifierError(node.type)


def parameter_names(parameters: Node | None, source: bytes) -> list[str]:
    names: list[str] = []
    for param in _significant_children(parameters):
        if param.type == "identifier":
            names.append(node_text(param, source))
        else:
            names.append("...")
    return names


def _target(
    shape: SplitShape,
    name_node: Node,
    function_node: Node,
    statement: Node,
    is_local: bool,
    source: bytes,
) -> SplitTarget:
    chain = name_chain_from_node(name_node, source)
    symbol = symbol_name(chain)
    return SplitTarget(
        shape=shape,
        name=chain,
        symbol=symbol,
        parameters=parameter_names(function_node.child_by_field_name("parameters"), source),
        function=_byte_range(function_node),
        statement=_byte_range(statement),
        is_local=is_local,
        lhs_text=symbol,
    )


def _match_declaration(node: Node, source: bytes) -> SplitTarget | None:
    name = node.child_by_field_name("name")
    if name is None or node.child_by_field_name("parameters") is None or not is_name_chain(name):
        return None
    is_local = bool(node.children) and node.children[0].type == "local"
    return _target(SplitShape.DECLARATION, name, node, node, is_local, source)


def _match_binding(statement: Node, assignment: Node, shape: SplitShape, source: bytes) -> SplitTarget | None:
    targets = _significant_children(_first_named(assignment, "variable_list"))
    values = _significant_children(_first_named(assignment, "expression_list"))
    if len(targets) != 1 or len(values) != 1:
        return None

    target, value = targets[0], values[0]
    if value.type != "function_definition":
        return None
    if shape is SplitShape.LOCAL_LITERAL and target.type != "identifier":
        return None
    if not is_name_chain(target):
        return None
    return _target(shape, target, value, statement, shape is SplitShape.LOCAL_LITERAL, source)


def _match_local_binding(node: Node, source: bytes) -> SplitTarget | None:
    assignment = _first_named(node, "assignment_statement")
    if assignment is None:
        return None
    return _match_binding(node, assignment, SplitShape.LOCAL_LITERAL, source)


def _match_assignment(node: Node, source: bytes) -> SplitTarget | None:
    return _match_binding(node, node, SplitShape.ASSIGNED_LITERAL, source)


def match_statement(node: Node, source: bytes) -> SplitTarget | None:
    """Classify one top-level statement; ``None`` means it passes through untouched."""
    if node.type in _DECLARATION_TYPES:
        return _match_declaration(node, source)
    if node.type == "variable_declaration":
        return _match_local_binding(node, source)
    if node.type == "assignment_statement":
        return _match_assignment(node, source)
    return None


def find_split_targets(root: Node, source: bytes) -> list[SplitTarget]:
    """Walk the top-level statements of a chunk, in source order."""
    found: list[SplitTarget] = []
    for statement in root.named_children:
        target = match_statement(statement, source)
        if target is None:
            logger.debug("Skipping %s at byte %d", statement.type, statement.start_byte)
            continue
        found.append(target)
    return found
