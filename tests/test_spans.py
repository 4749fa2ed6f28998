from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from helpers import make_map
from srcctx import Offset, Origin, OriginKind, SourceMap, SourceMismatchError, Span


@given(st.integers(min_value=0, max_value=64), st.integers(min_value=0, max_value=64))
def test_span_is_order_independent(a: int, b: int) -> None:
    m, idx = make_map("x" * 64)
    inp = m.input(idx)
    oa = inp.skip(a).offset
    ob = inp.skip(b).offset

    assert oa.span(ob) == ob.span(oa)
    span = oa.span(ob)
    assert span.byte_len == abs(a - b)
    assert span.start.byte == min(a, b)
    assert span.end.byte == span.start.byte + span.byte_len
    assert span.byte_range() == range(min(a, b), max(a, b))


def test_span_accessors() -> None:
    m, idx = make_map("hello world")
    inp = m.input(idx)
    span = inp.skip(6).offset.span(inp.offset)

    assert span.source_index == idx
    assert span.is_at_start
    assert span.start == inp.offset
    assert span.end == inp.skip(6).offset
    assert "hello world"[span.as_slice()] == "hello "
    assert m.span_str(span) == "hello "


def test_span_across_sources_is_rejected() -> None:
    m = SourceMap()
    a = m.insert(Origin.named("a"), "aaa").index
    b = m.insert(Origin.named("b"), "bbb").index
    with pytest.raises(SourceMismatchError):
        m.input(a).offset.span(m.input(b).offset)


def test_offsets_order_within_source() -> None:
    m, idx = make_map("abc")
    inp = m.input(idx)
    assert inp.offset < inp.skip(1).offset < inp.end().offset
    assert Span(inp.offset, 0) < Span(inp.offset, 1)
    assert Offset(idx, 2) == inp.skip(2).offset


def test_origin_ordering_and_identity() -> None:
    origins = [Origin.named("b"), Origin.file("z"), Origin.named("a"), Origin.file("a")]
    assert sorted(origins) == [
        Origin.file("a"),
        Origin.file("z"),
        Origin.named("a"),
        Origin.named("b"),
    ]
    assert Origin.file("dir//x.txt") == Origin.file("dir/x.txt")
    assert Origin.file("x") != Origin.named("x")
    assert len({Origin.file("x"), Origin.file("x"), Origin.named("x")}) == 2
    assert Origin.file("dir/x.txt").path is not None
    assert Origin.named("x").path is None


def test_origin_kind_sorts_by_value() -> None:
    assert OriginKind.FILE.value < OriginKind.NAMED.value
    assert Origin.file("zzz") < Origin.named("aaa")
