"""Presentation helpers for rendering diagnostics.

Pure functions over already-resolved data; nothing here touches a
source map.
"""

from __future__ import annotations

from typing import Iterator, Sequence


def count_digits(n: int) -> int:
    return len(str(n)) if n > 0 else 1


def join_origins(parts: Sequence[str]) -> str:
    """Join origin descriptions as a suffix: ``" a"``, ``" a and b"``, ``" a, b and c"``."""
    if not parts:
        return ""
    if len(parts) == 1:
        return f" {parts[0]}"
    return " " + ", ".join(parts[:-1]) + f" and {parts[-1]}"


def pointer_padding(line: str, column: int) -> str:
    """Blank out ``line`` up to the 1-based byte ``column``.

    Tabs are kept so the caret lines up under tab-indented source.
    """
    skipped = line.encode("utf-8")[: max(column - 1, 0)].decode("utf-8", errors="ignore")
    return "".join("\t" if ch == "\t" else " " for ch in skipped)


def iter_causes(error: object) -> Iterator[BaseException]:
    """Yield the chain of underlying causes of ``error``, nearest first."""
    seen = {id(error)}
    current = error
    while isinstance(current, BaseException):
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__context__ is not None and not current.__suppress_context__:
            current = current.__context__
        else:
            return
        if id(current) in seen:
            return
        seen.add(id(current))
        yield current
