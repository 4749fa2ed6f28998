from __future__ import annotations

import itertools
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .context import ContextErrorLocation, ContextErrorOrigin
from .cursor import Input
from .errors import FindError, ReadError, SourceMismatchError
from .origin import Origin
from .spans import Offset, SourceIndex, Span

_MAP_IDS = itertools.count()


@dataclass(frozen=True, slots=True)
class Inserted:
    index: SourceIndex


@dataclass(frozen=True, slots=True)
class Previous:
    """The origin was already registered; ``index`` is the existing entry."""

    index: SourceIndex


Insert = Inserted | Previous


@dataclass(frozen=True, slots=True)
class _SourceData:
    origin: Origin
    content: str
    data: bytes  # UTF-8 encoding of content; offsets index into this


class SourceMap:
    """Append-only registry of source contents.

    Every entry is keyed by its :class:`Origin`; registering an origin a
    second time hands back the existing index. Indices are tagged with the
    map's id and rejected by any other map.
    """

    def __init__(self) -> None:
        self._id = next(_MAP_IDS)
        self._slots: dict[Origin, int] = {}
        self._entries: list[_SourceData] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SourceMap(id={self._id}, entries={len(self._entries)})"

    def _entry(self, index: SourceIndex, what: str) -> _SourceData:
        if index.map_id != self._id:
            raise SourceMismatchError(
                f"{what} index must belong to source map {self._id}, got map {index.map_id}"
            )
        return self._entries[index.slot]

    def _index(self, slot: int) -> SourceIndex:
        return SourceIndex(map_id=self._id, slot=slot)

    def origin(self, index: SourceIndex) -> Origin:
        return self._entry(index, "origin").origin

    def content(self, index: SourceIndex) -> str:
        return self._entry(index, "content").content

    def input(self, index: SourceIndex) -> Input:
        entry = self._entry(index, "input")
        return Input(index, entry.data, 0, len(entry.data))

    def origins(self) -> Iterator[Origin]:
        return (entry.origin for entry in self._entries)

    def files(self) -> Iterator[Path]:
        for origin in self.origins():
            if origin.path is not None:
                yield origin.path

    def origin_index(self, origin: Origin) -> SourceIndex | None:
        slot = self._slots.get(origin)
        return None if slot is None else self._index(slot)

    def file_index(self, path: str | os.PathLike[str]) -> SourceIndex | None:
        return self.origin_index(Origin.file(path))

    def contains_file(self, path: str | os.PathLike[str]) -> bool:
        return Origin.file(path) in self._slots

    def insert(self, origin: Origin, content: str) -> Insert:
        slot = self._slots.get(origin)
        if slot is not None:
            return Previous(self._index(slot))
        slot = len(self._entries)
        self._entries.append(_SourceData(origin, content, content.encode("utf-8")))
        self._slots[origin] = slot
        return Inserted(self._index(slot))

    def _read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(path, exc) from exc

    def load_file(self, path: str | os.PathLike[str]) -> Insert:
        """Read ``path`` as UTF-8 and register it, unless already present."""
        p = Path(path)
        prev = self.file_index(p)
        if prev is not None:
            return Previous(prev)
        return self.insert(Origin.file(p), self._read_file(p))

    def _find_files(self, root: Path, extension: str) -> list[Path]:
        if root.is_file():
            candidates = [root]
        else:

            def fail(exc: OSError) -> None:
                raise exc

            candidates = []
            try:
                for dirpath, dirnames, filenames in os.walk(root, onerror=fail):
                    dirnames.sort()
                    candidates.extend(Path(dirpath, name) for name in sorted(filenames))
            except OSError as exc:
                raise FindError(root, extension, exc) from exc
        return [p for p in candidates if p.name.endswith(extension) and p.is_file()]

    def load_directory(self, root: str | os.PathLike[str], extension: str) -> list[Insert]:
        """Load every file under ``root`` whose name ends with ``extension``.

        All files are read before anything is registered, so a failure
        leaves the map exactly as it was.
        """
        root_path = Path(root)
        pending: list[tuple[Origin, str] | SourceIndex] = []
        for path in self._find_files(root_path, extension):
            prev = self.file_index(path)
            if prev is not None:
                pending.append(prev)
            else:
                pending.append((Origin.file(path), self._read_file(path)))

        results: list[Insert] = []
        for item in pending:
            if isinstance(item, SourceIndex):
                results.append(Previous(item))
            else:
                results.append(self.insert(*item))
        return results

    def span_str(self, span: Span) -> str:
        data = self._entry(span.source_index, "span").data
        return data[span.as_slice()].decode("utf-8")

    def _location(self, offset: Offset) -> ContextErrorLocation:
        data = self._entry(offset.source_index, "offset").data
        pos = offset.byte
        if not 0 <= pos <= len(data):
            raise ValueError(f"byte offset {pos} out of range for source of {len(data)} bytes")
        start = data.rfind(b"\n", 0, pos) + 1
        end = data.find(b"\n", pos)
        if end < 0:
            end = len(data)
        return ContextErrorLocation(
            line=data[start:end].decode("utf-8", errors="replace"),
            line_number=data.count(b"\n", 0, pos) + 1,
            column_number=pos - start + 1,
        )

    def context_error_origin(
        self,
        offset: Offset,
        note: str,
        context: Offset | None = None,
    ) -> ContextErrorOrigin:
        """Resolve ``offset`` (and optionally ``context``) to quoted source lines."""
        if context is not None and context.source_index != offset.source_index:
            raise SourceMismatchError(
                f"context offset must belong to the same source: "
                f"{context.source_index} != {offset.source_index}"
            )
        return ContextErrorOrigin(
            origin=self.origin(offset.source_index),
            note=note,
            location=self._location(offset),
            context=None if context is None else self._location(context),
        )
