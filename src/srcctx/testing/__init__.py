from __future__ import annotations

from .normalize import normalize

__all__ = ["normalize"]
