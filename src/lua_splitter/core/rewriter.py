import logging
import re

from lua_splitter.core.naming import asset_placeholder, module_filename
from lua_splitter.models import ModuleRecord, Replacement, SplitShape, SplitTarget

logger = logging.getLogger(__name__)

FALLBACK_MARKER = "-- lua-splitter: header not recognised, original body was not extracted"

_LOCAL_HEADER = re.compile(r"^\s*local\s+function\s+[^(]+\s*\(")
_HEADER = re.compile(r"^\s*function\s+[^(]+\s*\(")
_LITERAL_START = re.compile(r"^\s*function\b")


def _param_list(target: SplitTarget) -> str:
    return ", ".join(target.parameters)


def rewrite_declaration_header(text: str) -> str | None:
    """Swap ``[local] function name(`` for ``return function(``; ``None`` if neither form matches."""
    for pattern in (_LOCAL_HEADER, _HEADER):
        replaced, count = pattern.subn("return function(", text, count=1)
        if count:
            return replaced
    return None


def prefix_function_literal(text: str) -> str | None:
    if _LITERAL_START.match(text) is None:
        return None
    return "return " + text


def fallback_module(target: SplitTarget) -> str:
    return f"return function({_param_list(target)})\n{FALLBACK_MARKER}\nend"


def build_module(target: SplitTarget, source: bytes) -> ModuleRecord:
    """Produce the standalone module for a matched statement.

    When the header cannot be rewritten a stub module is returned instead and
    the record is flagged as ``degraded``.
    """
    span = target.function
    text = source[span.start : span.end].decode("utf-8")

    if target.shape is SplitShape.DECLARATION:
        module_text = rewrite_declaration_header(text)
    else:
        module_text = prefix_function_literal(text)

    degraded = module_text is None
    if module_text is None:
        logger.warning("Could not rewrite the header of %s; writing a stub module", target.symbol)
        module_text = fallback_module(target)

    return ModuleRecord(
        symbol=target.symbol,
        filename=module_filename(target.symbol),
        text=module_text.strip() + "\n",
        degraded=degraded,
    )


def build_wrapper(target: SplitTarget) -> str:
    params = _param_list(target)
    local = "local " if target.is_local else ""
    body = f"  return require({asset_placeholder(target.symbol)} )({params})"
    if target.shape is SplitShape.DECLARATION:
        header = f"{local}function {target.lhs_text}({params})"
    else:
        header = f"{local}{target.lhs_text} = function({params})"
    return f"{header}\n{body}\nend"


def build_replacement(target: SplitTarget) -> Replacement:
    return Replacement(start=target.statement.start, end=target.statement.end, text=build_wrapper(target))
