from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from .display import count_digits, iter_causes, join_origins, pointer_padding
from .origin import Origin, OriginKind


E = TypeVar("E")
M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class ContextErrorLocation:
    """Snapshot of one source line.

    ``line_number`` and ``column_number`` are 1-based; the column counts
    bytes from the start of the line.
    """

    line: str
    line_number: int
    column_number: int


@dataclass(frozen=True, slots=True)
class ContextErrorOrigin:
    origin: Origin
    note: str
    location: ContextErrorLocation
    context: ContextErrorLocation | None = None

    def describe(self, *, as_suffix: bool = False) -> str:
        lnum = self.location.line_number
        col = self.location.column_number
        if self.origin.kind is OriginKind.FILE:
            prefix = "at " if as_suffix else ""
            return f"{prefix}{self.origin.value}:{lnum}:{col}"
        prefix = "in " if as_suffix else ""
        return f"{prefix}`{self.origin.value}`, line {lnum}, column {col}"

    def render(self) -> str:
        loc = self.location
        width = count_digits(loc.line_number)
        out = [f"--> {self.describe()}"]
        # Only context lines before the primary one are shown.
        ctx = self.context
        if ctx is not None and ctx.line_number < loc.line_number:
            out.append(f" {ctx.line_number:>{width}} | {ctx.line}")
            if ctx.line_number + 1 != loc.line_number:
                out.append(f" {'':>{width}} | ...")
        out.append(f" {loc.line_number:>{width}} | {loc.line}")
        padding = pointer_padding(loc.line, loc.column_number)
        out.append(f" {'':>{width}} | {padding}^ {self.note}")
        return "".join(f"{line}\n" for line in out)

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class ContextError(Exception, Generic[E]):
    """A fully resolved diagnostic.

    Owns the quoted source lines, so it stays printable after the source
    map that produced it is gone.
    """

    error: E
    origins: tuple[ContextErrorOrigin, ...] = ()

    def __post_init__(self) -> None:
        self.origins = tuple(self.origins)

    @classmethod
    def with_origins(cls, error: E, origins: Iterable[ContextErrorOrigin]) -> ContextError[E]:
        return cls(error, tuple(origins))

    def map(self, fn: Callable[[E], M]) -> ContextError[M]:
        return ContextError(fn(self.error), self.origins)

    def __str__(self) -> str:
        suffix = join_origins([o.describe(as_suffix=True) for o in self.origins])
        return f"{self.error}{suffix}"

    def display_with_context(self) -> str:
        parts = [f"error: {self.error}\n"]
        parts.extend(f"cause: {cause}\n" for cause in iter_causes(self.error))
        parts.extend(o.render() for o in self.origins)
        return "".join(parts)
