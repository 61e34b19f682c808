from __future__ import annotations

"""
Compression Estimator Registry.

Routes a configured algorithm name to its CompressionStrategy. The report
engine only ever talks to the strategy interface.
"""

import logging
from typing import Dict, List, Optional, Type

from bundlesizer.core.processing.strategies import (
    BrotliStrategy,
    CompressionStrategy,
    GzipStrategy,
)

logger = logging.getLogger(__name__)

_STRATEGIES: Dict[str, Type[CompressionStrategy]] = {
    "brotli": BrotliStrategy,
    "gzip": GzipStrategy,
}


def available_algorithms() -> List[str]:
    """Names accepted by get_strategy, in registration order."""
    return list(_STRATEGIES)


def get_strategy(name: str, quality: Optional[int] = None) -> CompressionStrategy:
    """
    Instantiate the compression strategy registered under a name.

    Args:
        name: Algorithm identifier ('brotli' or 'gzip').
        quality: Optional algorithm-specific quality/level.

    Returns:
        CompressionStrategy: Ready-to-use estimator.

    Raises:
        ValueError: If the algorithm is unknown or the quality is out of range.
    """
    key = (name or "").strip().lower()
    strategy_cls = _STRATEGIES.get(key)
    if strategy_cls is None:
        raise ValueError(
            f"Unknown compression algorithm '{name}'. "
            f"Expected one of: {', '.join(_STRATEGIES)}"
        )

    strategy = strategy_cls() if quality is None else strategy_cls(quality)
    logger.debug(f"Compression strategy selected: {key} (quality={quality})")
    return strategy
