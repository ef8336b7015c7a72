import logging
from pathlib import Path

from lua_splitter.core.matcher import find_split_targets
from lua_splitter.core.parser import parse_lua
from lua_splitter.core.ports.writer import OutputWriter
from lua_splitter.core.rewriter import build_module, build_replacement
from lua_splitter.core.splice import apply_replacements
from lua_splitter.models import ModuleRecord, Replacement, SplitResult

logger = logging.getLogger(__name__)

MODIFIED_FILENAME = "modified.lua"


def split_source(text: str) -> SplitResult:
    """Extract every top-level function of *text* and rewrite its definition site.

    Raises ``LuaParseError`` if the source does not parse.
    """
    source = text.encode("utf-8")
    tree = parse_lua(source)

    modules: list[ModuleRecord] = []
    replacements: list[Replacement] = []
    seen: dict[str, str] = {}

    for target in find_split_targets(tree.root_node, source):
        module = build_module(target, source)
        previous = seen.get(module.filename)
        if previous is not None:
            logger.warning("%s and %s both map to %s; the later module wins", previous, module.symbol, module.filename)
        seen[module.filename] = module.symbol

        modules.append(module)
        replacements.append(build_replacement(target))

    modified = apply_replacements(source, replacements)
    return SplitResult(modules=modules, replacements=replacements, modified_text=modified.decode("utf-8"))


def write_split(result: SplitResult, writer: OutputWriter) -> str:
    """Write the modules, then the rewritten document; returns the document's location."""
    for module in result.modules:
        writer.write(module.filename, module.text)
    return writer.write(MODIFIED_FILENAME, result.modified_text)


def run_split(input_path: str | Path, writer: OutputWriter) -> tuple[SplitResult, str]:
    text = Path(input_path).read_text(encoding="utf-8")
    result = split_source(text)
    modified_location = write_split(result, writer)
    logger.info("Split %d function(s) out of %s", len(result.modules), input_path)
    return result, modified_location
