from __future__ import annotations

"""
Size Metric Domain Model.

A size metric pairs the raw byte size of an artifact (or of a transitive
closure of artifacts) with its compressed-size estimate. Both components
combine independently by addition.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SizeMetric:
    """
    Immutable (raw, compressed) byte pair.

    Attributes:
        original_size: Raw size on disk in bytes.
        compressed_size: Estimated size after compression in bytes.
    """
    original_size: int = 0
    compressed_size: int = 0

    @classmethod
    def zero(cls) -> "SizeMetric":
        """Return the identity element of metric addition."""
        return cls(0, 0)

    def __add__(self, other: Any) -> "SizeMetric":
        if not isinstance(other, SizeMetric):
            return NotImplemented
        return SizeMetric(
            original_size=self.original_size + other.original_size,
            compressed_size=self.compressed_size + other.compressed_size,
        )

    def __radd__(self, other: Any) -> "SizeMetric":
        # Lets the builtin sum() start from its integer 0
        if other == 0:
            return self
        return self.__add__(other)

    def to_dict(self) -> Dict[str, int]:
        return {
            "original_size": self.original_size,
            "compressed_size": self.compressed_size,
        }
