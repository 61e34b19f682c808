from __future__ import annotations

"""
Human-Readable Size Formatting.

Display-only helpers; formatted strings are never used for comparison or
accumulation.
"""

from typing import Dict, List

_SYMBOLS: Dict[int, List[str]] = {
    10: ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"],
    2: ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"],
}


def format_size(num_bytes: int, base: int = 10, precision: int = 2) -> str:
    """
    Format a byte count as a short human-readable string.

    Uses SI (1000) steps by default, or IEC (1024) steps when base is 2.
    Trailing zeros are dropped: 1500 -> '1.5 kB', 1000 -> '1 kB'.

    Args:
        num_bytes: Non-negative byte count.
        base: 10 for kB/MB/..., 2 for KiB/MiB/...
        precision: Maximum number of decimals.

    Returns:
        str: Formatted size.
    """
    if num_bytes < 0:
        raise ValueError(f"Size must be non-negative, got {num_bytes}")
    if base not in _SYMBOLS:
        raise ValueError(f"Base must be 2 or 10, got {base}")

    symbols = _SYMBOLS[base]
    step = 1000 if base == 10 else 1024

    if num_bytes < step:
        return f"{int(num_bytes)} B"

    exponent = 0
    value = float(num_bytes)
    while value >= step and exponent < len(symbols) - 1:
        value /= step
        exponent += 1

    value = round(value, precision)
    # 999_999 rounds to '1000 kB'; promote it to the next unit
    if value >= step and exponent < len(symbols) - 1:
        value = round(value / step, precision)
        exponent += 1

    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return f"{text} {symbols[exponent]}"
