from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OriginKind(str, Enum):
    # Origins sort by these string values, so files come before named ones.
    FILE = "file"
    NAMED = "named"


@dataclass(frozen=True, slots=True, order=True)
class Origin:
    """Where a block of source content came from.

    Either a file path or a synthetic name (``<stdin>``, a test label, a
    generated buffer). Origins identify provenance only, never content.
    """

    kind: OriginKind
    value: str

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> Origin:
        return cls(OriginKind.FILE, str(Path(path)))

    @classmethod
    def named(cls, name: str) -> Origin:
        return cls(OriginKind.NAMED, name)

    @property
    def is_file(self) -> bool:
        return self.kind is OriginKind.FILE

    @property
    def path(self) -> Path | None:
        if self.kind is OriginKind.FILE:
            return Path(self.value)
        return None

    def __str__(self) -> str:
        if self.kind is OriginKind.FILE:
            return self.value
        return f"`{self.value}`"
