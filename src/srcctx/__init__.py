from __future__ import annotations

from .context import ContextError, ContextErrorLocation, ContextErrorOrigin
from .cursor import Input
from .errors import FindError, LoadError, ReadError, SourceError, SourceMismatchError
from .origin import Origin, OriginKind
from .source_map import Insert, Inserted, Previous, SourceMap
from .spans import Offset, SourceIndex, Span

__all__ = [
    "ContextError",
    "ContextErrorLocation",
    "ContextErrorOrigin",
    "FindError",
    "Input",
    "Insert",
    "Inserted",
    "LoadError",
    "Offset",
    "Origin",
    "OriginKind",
    "Previous",
    "ReadError",
    "SourceError",
    "SourceIndex",
    "SourceMap",
    "SourceMismatchError",
    "Span",
]
