import re

from lua_splitter.models import NameChain, SimpleName

MODULE_SUFFIX = ".lua"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_:.]")
_SEPARATORS = re.compile(r"[:.]")


def symbol_name(chain: NameChain | None) -> str:
    """Build the display name of a chain, e.g. ``add``, ``Foo.run``, ``Util:scale``."""
    if chain is None:
        return "anonymous"
    if isinstance(chain, SimpleName):
        return chain.name
    return f"{symbol_name(chain.base)}{chain.indexer}{chain.member}"


def slug_for_file(symbol: str) -> str:
    """Turn ``Util:scale`` into ``Util_scale`` and ``Foo.run`` into ``Foo_run``."""
    return _SEPARATORS.sub("_", _UNSAFE_CHARS.sub("_", symbol))


def module_filename(symbol: str) -> str:
    return f"{slug_for_file(symbol)}{MODULE_SUFFIX}"


def asset_placeholder(symbol: str) -> str:
    """Marker left in wrapper code for a later build step to bind to the real module."""
    return f"__ASSET_ID_{slug_for_file(symbol)}__"
