from __future__ import annotations

"""
Unit tests for human-readable size formatting.
"""

import pytest

from bundlesizer.utils.formatting import format_size


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 B"),
    (150, "150 B"),
    (999, "999 B"),
    (1000, "1 kB"),
    (1500, "1.5 kB"),
    (2_350_000, "2.35 MB"),
    (999_999, "1 MB"),
    (3 * 10 ** 9, "3 GB"),
])
def test_si_units(num_bytes: int, expected: str) -> None:
    assert format_size(num_bytes) == expected


@pytest.mark.parametrize("num_bytes, expected", [
    (1023, "1023 B"),
    (1024, "1 KiB"),
    (1536, "1.5 KiB"),
    (5 * 1024 ** 2, "5 MiB"),
])
def test_iec_units(num_bytes: int, expected: str) -> None:
    assert format_size(num_bytes, base=2) == expected


def test_rejects_negative_and_unknown_base() -> None:
    with pytest.raises(ValueError):
        format_size(-1)
    with pytest.raises(ValueError):
        format_size(10, base=8)
