from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from .errors import SourceError, SourceMismatchError


E = TypeVar("E")


@dataclass(frozen=True, slots=True, order=True)
class SourceIndex:
    """Handle to one entry of a specific :class:`~srcctx.SourceMap`.

    ``map_id`` identifies the issuing map; ``slot`` is the entry position.
    """

    map_id: int
    slot: int


@dataclass(frozen=True, slots=True, order=True)
class Offset:
    """A byte position inside one registered source."""

    source_index: SourceIndex
    byte: int

    @property
    def is_at_start(self) -> bool:
        return self.byte == 0

    def span(self, other: Offset) -> Span:
        """Span covering both offsets, regardless of argument order."""
        if self.source_index != other.source_index:
            raise SourceMismatchError(
                f"span offsets must be from the same source: "
                f"{self.source_index} != {other.source_index}"
            )
        a, b = sorted((self.byte, other.byte))
        return Span(Offset(self.source_index, a), b - a)

    def error(self, error: E, note: str) -> SourceError[E]:
        return SourceError(error, self, note)


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open byte range [start, start + byte_len) in a single source."""

    start: Offset
    byte_len: int

    @property
    def source_index(self) -> SourceIndex:
        return self.start.source_index

    @property
    def end(self) -> Offset:
        return Offset(self.start.source_index, self.start.byte + self.byte_len)

    @property
    def is_at_start(self) -> bool:
        return self.start.is_at_start

    def byte_range(self) -> range:
        return range(self.start.byte, self.start.byte + self.byte_len)

    def as_slice(self) -> slice:
        return slice(self.start.byte, self.start.byte + self.byte_len)
