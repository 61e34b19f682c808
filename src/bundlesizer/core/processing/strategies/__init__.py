from __future__ import annotations

from .base import CompressionStrategy
from .brotli import BROTLI_MAX_QUALITY, BrotliStrategy
from .gzip import GzipStrategy

__all__ = [
    "CompressionStrategy",
    "BrotliStrategy",
    "BROTLI_MAX_QUALITY",
    "GzipStrategy",
]
