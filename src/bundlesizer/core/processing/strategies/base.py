from __future__ import annotations

"""
Base Definitions for Compression Strategies.

Provides the abstract interface used by the artifact sizer to estimate the
transfer size of a byte buffer.
"""

from abc import ABC, abstractmethod


class CompressionStrategy(ABC):
    """
    Abstract base class for compressed-size estimators.

    Implementations must be deterministic: the same bytes always produce the
    same estimate, so reports are reproducible across runs.
    """

    name: str = ""

    @abstractmethod
    def estimate(self, data: bytes) -> int:
        """
        Compute the compressed size of a byte buffer.

        Args:
            data: Raw artifact content.

        Returns:
            int: Size in bytes after compression.
        """
        pass
