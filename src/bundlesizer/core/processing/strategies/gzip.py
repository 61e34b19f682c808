from __future__ import annotations

"""
Gzip Compression Strategy.

Alternative estimator for deployments that only serve gzip.
"""

import gzip

from bundlesizer.core.processing.strategies.base import CompressionStrategy


class GzipStrategy(CompressionStrategy):
    """
    Estimate transfer size with gzip at a fixed level.
    """

    name = "gzip"

    def __init__(self, level: int = 9) -> None:
        if not 1 <= level <= 9:
            raise ValueError(f"Gzip level must be within 1..9, got {level}")
        self.level = level

    def estimate(self, data: bytes) -> int:
        if not data:
            return 0
        # mtime=0 keeps the header, and therefore the size, reproducible
        return len(gzip.compress(data, compresslevel=self.level, mtime=0))
