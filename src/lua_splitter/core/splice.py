from collections.abc import Iterable

from lua_splitter.core.errors import OverlappingReplacementError
from lua_splitter.models import Replacement


def apply_replacements(source: bytes, replacements: Iterable[Replacement]) -> bytes:
    """Splice every replacement into *source*.

    Offsets always refer to the original buffer. Replacements are applied from
    the highest start offset down so that lower offsets stay valid.
    """
    ordered = sorted(replacements, key=lambda r: r.start, reverse=True)

    for later, earlier in zip(ordered, ordered[1:]):
        if earlier.end > later.start:
            raise OverlappingReplacementError(
                f"Replacement [{earlier.start}, {earlier.end}) overlaps [{later.start}, {later.end})"
            )

    result = source
    for replacement in ordered:
        if replacement.start > replacement.end or replacement.end > len(source):
            raise ValueError(f"Replacement range [{replacement.start}, {replacement.end}) is outside the source")
        result = result[: replacement.start] + replacement.text.encode("utf-8") + result[replacement.end :]
    return result
