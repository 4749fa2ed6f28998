from __future__ import annotations

from dataclasses import dataclass

from srcctx import Origin, SourceIndex, SourceMap


@dataclass
class Error(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


def chain(message: str, cause: BaseException) -> Error:
    err = Error(message)
    err.__cause__ = cause
    return err


def make_map(content: str, *, origin: Origin | None = None) -> tuple[SourceMap, SourceIndex]:
    source_map = SourceMap()
    outcome = source_map.insert(origin or Origin.named("test"), content)
    return source_map, outcome.index
