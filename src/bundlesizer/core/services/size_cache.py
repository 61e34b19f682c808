from __future__ import annotations

"""
In-Memory Size Cache.

Append-only map from manifest identifier to an already computed SizeMetric.
One instance is shared by every entry computed in a run, so chunks sized
for an earlier entry short-circuit later ones.
"""

import logging
from typing import Dict, Optional

from bundlesizer.domain.size_models import SizeMetric

logger = logging.getLogger(__name__)


class SizeCache:
    """
    Single-owner memo table for the graph size aggregation.

    Entries are never removed. Overwriting an identifier is allowed because
    the report driver files an entry's combined total under its own key,
    which may replace an earlier leaf-only record.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, SizeMetric] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, name: str) -> Optional[SizeMetric]:
        """
        Return the cached metric for an identifier, counting hit or miss.

        Args:
            name: Manifest identifier.

        Returns:
            Optional[SizeMetric]: Cached value, or None on a miss.
        """
        metric = self._entries.get(name)
        if metric is None:
            self.misses += 1
        else:
            self.hits += 1
        return metric

    def get(self, name: str) -> Optional[SizeMetric]:
        """Return the cached metric without touching the counters."""
        return self._entries.get(name)

    def set(self, name: str, metric: SizeMetric) -> None:
        self._entries[name] = metric
        logger.debug(
            f"SizeCache: {name} = {metric.original_size} B "
            f"({metric.compressed_size} B compressed)"
        )

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
