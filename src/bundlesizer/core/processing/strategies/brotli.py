from __future__ import annotations

"""
Brotli Compression Strategy.

Default estimator. Quality 11 matches what CDNs serve for static assets
compressed ahead of time.
"""

import brotli

from bundlesizer.core.processing.strategies.base import CompressionStrategy

BROTLI_MAX_QUALITY: int = 11


class BrotliStrategy(CompressionStrategy):
    """
    Estimate transfer size with the Brotli encoder.
    """

    name = "brotli"

    def __init__(self, quality: int = BROTLI_MAX_QUALITY) -> None:
        if not 0 <= quality <= BROTLI_MAX_QUALITY:
            raise ValueError(f"Brotli quality must be within 0..{BROTLI_MAX_QUALITY}, got {quality}")
        self.quality = quality

    def estimate(self, data: bytes) -> int:
        if not data:
            return 0
        return len(brotli.compress(data, quality=self.quality))
