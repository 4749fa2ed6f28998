from __future__ import annotations

import pytest

from helpers import make_map
from srcctx import Origin, SourceIndex, SourceMap


@pytest.fixture
def abc_map() -> tuple[SourceMap, SourceIndex]:
    return make_map("abc\ndef\nghi")


@pytest.fixture
def abc_file_map() -> tuple[SourceMap, SourceIndex]:
    return make_map("abc\ndef\nghi", origin=Origin.file("test"))
