class LuaSplitError(Exception):
    """Base class for errors raised while splitting a Lua source file."""


class LuaParseError(LuaSplitError):
    """Raised when the source contains syntax the Lua grammar cannot parse."""

    def __init__(self, row: int, column: int, snippet: str = "") -> None:
        self.row = row
        self.column = column
        self.snippet = snippet
        location = f"line {row + 1}, column {column + 1}"
        detail = f" near {snippet!r}" if snippet else ""
        super().__init__(f"Syntax error at {location}{detail}")


class UnsupportedIdentifierError(LuaSplitError):
    """Raised when a name node is not an identifier, field or method access."""

    def __init__(self, node_type: str) -> None:
        self.node_type = node_type
        super().__init__(f"Unsupported identifier: {node_type}")


class OverlappingReplacementError(LuaSplitError, ValueError):
    """Raised when two replacements cover overlapping source ranges."""
