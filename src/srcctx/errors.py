from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .context import ContextError

if TYPE_CHECKING:
    from .source_map import SourceMap
    from .spans import Offset


E = TypeVar("E")
M = TypeVar("M")


class SourceMismatchError(ValueError):
    """Positions or indices from unrelated sources were combined.

    Always a programming error: an index used against a map that did not
    issue it, or two offsets from different sources joined together.
    """


class LoadError(Exception):
    """Base class for failures while loading sources into a map."""


@dataclass(slots=True)
class FindError(LoadError):
    root: Path
    extension: str
    cause: OSError

    def __str__(self) -> str:
        return f"Failed to search `{self.root}` for `*{self.extension}` files: {self.cause}"


@dataclass(slots=True)
class ReadError(LoadError):
    file: Path
    cause: Exception

    def __str__(self) -> str:
        return f"Failed to read from `{self.file}`: {self.cause}"


@dataclass(slots=True)
class SourceError(Exception, Generic[E]):
    """An error anchored to an offset, resolvable into a ContextError later.

    Needs no access to the source map, so scanners can build and raise it
    deep inside their loops.
    """

    error: E
    offset: Offset
    note: str
    context_offset: Offset | None = None

    def __str__(self) -> str:
        return f"{self.error} at byte offset {self.offset.byte}"

    def with_context(self, offset: Offset) -> SourceError[E]:
        """Attach a related position, e.g. an earlier definition."""
        if offset.source_index != self.offset.source_index:
            raise SourceMismatchError(
                f"context offset must belong to the same source: "
                f"{offset.source_index} != {self.offset.source_index}"
            )
        return replace(self, context_offset=offset)

    def map(self, fn: Callable[[E], M]) -> SourceError[M]:
        return SourceError(fn(self.error), self.offset, self.note, self.context_offset)

    def into_context_error(self, source_map: SourceMap) -> ContextError[E]:
        origin = source_map.context_error_origin(self.offset, self.note, self.context_offset)
        return ContextError.with_origins(self.error, [origin])
