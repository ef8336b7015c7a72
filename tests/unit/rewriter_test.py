"""Tests for module extraction and wrapper generation."""

import logging

import pytest

from lua_splitter.core.rewriter import (
    FALLBACK_MARKER,
    build_module,
    build_replacement,
    build_wrapper,
    prefix_function_literal,
    rewrite_declaration_header,
)
from lua_splitter.models import ByteRange, MemberAccess, SimpleName, SplitShape, SplitTarget


def _target(
    source: bytes,
    shape: SplitShape = SplitShape.DECLARATION,
    symbol: str = "add",
    parameters: list[str] | None = None,
    is_local: bool = False,
    function_start: int = 0,
) -> SplitTarget:
    return SplitTarget(
        shape=shape,
        name=SimpleName(name=symbol),
        symbol=symbol,
        parameters=parameters if parameters is not None else ["a", "b"],
        function=ByteRange(start=function_start, end=len(source)),
        statement=ByteRange(start=0, end=len(source)),
        is_local=is_local,
        lhs_text=symbol,
    )


class TestHeaderRewrite:
    def test_global_header(self) -> None:
        assert rewrite_declaration_header("function add(a, b) return a + b end") == (
            "return function(a, b) return a + b end"
        )

    def test_local_header(self) -> None:
        assert rewrite_declaration_header("local  function   helper (x)\n  return x\nend") == (
            "return function(x)\n  return x\nend"
        )

    def test_method_header(self) -> None:
        assert rewrite_declaration_header("function Util:scale(v) return v end") == "return function(v) return v end"

    def test_unrecognised_header_returns_none(self) -> None:
        assert rewrite_declaration_header("function--[[odd]]f(a) return a end") is None

    def test_literal_prefix(self) -> None:
        assert prefix_function_literal("function(x) return x end") == "return function(x) return x end"

    def test_literal_prefix_requires_function_keyword(self) -> None:
        assert prefix_function_literal("functional(x)") is None


class TestBuildModule:
    def test_declaration_module_keeps_body(self) -> None:
        source = b"function add(a, b) return a + b end"
        module = build_module(_target(source), source)
        assert module.filename == "add.lua"
        assert module.text == "return function(a, b) return a + b end\n"
        assert module.degraded is False

    def test_literal_module_slices_only_the_literal(self) -> None:
        source = b"local scale = function(x) return x * 2 end"
        target = _target(
            source,
            shape=SplitShape.LOCAL_LITERAL,
            symbol="scale",
            parameters=["x"],
            is_local=True,
            function_start=source.index(b"function"),
        )
        module = build_module(target, source)
        assert module.text == "return function(x) return x * 2 end\n"

    def test_unmatched_header_falls_back_to_stub(self, caplog: pytest.LogCaptureFixture) -> None:
        source = b"function--[[odd]]f(a) return a end"
        target = _target(source, symbol="f", parameters=["a"])
        with caplog.at_level(logging.WARNING, logger="lua_splitter.core.rewriter"):
            module = build_module(target, source)
        assert module.degraded is True
        assert module.filename == "f.lua"
        assert module.text == f"return function(a)\n{FALLBACK_MARKER}\nend\n"
        assert "header of f" in caplog.text
        assert any(record.levelno == logging.WARNING for record in caplog.records)


class TestBuildWrapper:
    def test_declaration_wrapper(self) -> None:
        source = b"function add(a, b) return a + b end"
        assert build_wrapper(_target(source)) == (
            "function add(a, b)\n  return require(__ASSET_ID_add__ )(a, b)\nend"
        )

    def test_local_declaration_wrapper_keeps_locality(self) -> None:
        source = b"local function helper(x) return x end"
        wrapper = build_wrapper(_target(source, symbol="helper", parameters=["x"], is_local=True))
        assert wrapper.startswith("local function helper(x)\n")

    def test_member_assignment_wrapper(self) -> None:
        source = b"Util.run = function(self) self:go() end"
        target = SplitTarget(
            shape=SplitShape.ASSIGNED_LITERAL,
            name=MemberAccess(base=SimpleName(name="Util"), indexer=".", member="run"),
            symbol="Util.run",
            parameters=["self"],
            function=ByteRange(start=11, end=len(source)),
            statement=ByteRange(start=0, end=len(source)),
            is_local=False,
            lhs_text="Util.run",
        )
        assert build_wrapper(target) == (
            "Util.run = function(self)\n  return require(__ASSET_ID_Util_run__ )(self)\nend"
        )

    def test_vararg_is_forwarded(self) -> None:
        source = b"function log(...) print(...) end"
        wrapper = build_wrapper(_target(source, symbol="log", parameters=["..."]))
        assert "require(__ASSET_ID_log__ )(...)" in wrapper

    def test_replacement_spans_statement(self) -> None:
        source = b"function add(a, b) return a + b end"
        replacement = build_replacement(_target(source))
        assert replacement.start == 0
        assert replacement.end == len(source)
        assert replacement.text.startswith("function add(a, b)")
