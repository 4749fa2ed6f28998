from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

from .errors import SourceError
from .spans import Offset, SourceIndex


E = TypeVar("E")


def _utf8_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


@dataclass(frozen=True, slots=True)
class Input:
    """Read-only cursor over the UTF-8 bytes of one source.

    The cursor never moves: ``skip``, ``truncate`` and ``split`` return new
    inputs sharing the same buffer. ``start``/``stop`` are absolute byte
    positions in that buffer.

    ``len()`` is the number of bytes left, so an exhausted input is falsy.
    """

    source_index: SourceIndex
    data: bytes = field(repr=False)
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start

    def is_empty(self) -> bool:
        return self.stop == self.start

    @property
    def content(self) -> str:
        return self.data[self.start : self.stop].decode("utf-8")

    @property
    def offset(self) -> Offset:
        return Offset(self.source_index, self.start)

    def _cut(self, byte_len: int) -> int:
        if not 0 <= byte_len <= len(self):
            raise ValueError(f"byte length {byte_len} out of range for input of {len(self)} bytes")
        pos = self.start + byte_len
        if pos < self.stop and self.data[pos] & 0xC0 == 0x80:
            raise ValueError(f"byte offset {pos} is not on a character boundary")
        return pos

    def skip(self, byte_len: int) -> Input:
        return Input(self.source_index, self.data, self._cut(byte_len), self.stop)

    def truncate(self, byte_len: int) -> Input:
        return Input(self.source_index, self.data, self.start, self._cut(byte_len))

    def split(self, byte_len: int) -> tuple[Input, Input]:
        return self.truncate(byte_len), self.skip(byte_len)

    def end(self) -> Input:
        return self.skip(len(self))

    def char(self) -> str | None:
        if self.is_empty():
            return None
        width = _utf8_width(self.data[self.start])
        return self.data[self.start : min(self.start + width, self.stop)].decode("utf-8")

    def take_char(self) -> tuple[str, Input] | None:
        ch = self.char()
        if ch is None:
            return None
        return ch, self.skip(len(ch.encode("utf-8")))

    def skip_char(self, ch: str) -> Input | None:
        encoded = ch.encode("utf-8")
        if encoded and self.data.startswith(encoded, self.start, self.stop):
            return self.skip(len(encoded))
        return None

    def error(self, error: E, note: str) -> SourceError[E]:
        """Anchor ``error`` at the current position."""
        return SourceError(error, self.offset, note)
