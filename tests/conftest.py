from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Builders for throwaway build directories (manifest + artifacts).
3. A deterministic compression strategy with predictable sizes.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from bundlesizer.core.processing.strategies import CompressionStrategy  # noqa: E402
from bundlesizer.core.services.artifact_sizer import ArtifactSizer  # noqa: E402
from bundlesizer.core.services.size_cache import SizeCache  # noqa: E402
from bundlesizer.infra.fs import load_manifest  # noqa: E402
from bundlesizer.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class RatioStrategy(CompressionStrategy):
    """Compresses every artifact to exactly 40% of its raw size (floored)."""

    name = "ratio"

    def estimate(self, data: bytes) -> int:
        return len(data) * 2 // 5


BuildFactory = Callable[[Dict[str, Any], Dict[str, int]], Path]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Tear down any logging configured by a CLI run inside a test."""
    yield
    shutdown_logging()


@pytest.fixture
def ratio_strategy() -> RatioStrategy:
    return RatioStrategy()


@pytest.fixture
def make_build(tmp_path: Path) -> BuildFactory:
    """
    Return a factory writing 'dist/manifest.json' plus artifacts of given sizes.

    Artifacts are filled with a single repeated byte; paths are relative to
    the manifest directory, as the bundler emits them.
    """

    def _factory(manifest: Dict[str, Any], artifacts: Dict[str, int]) -> Path:
        dist = tmp_path / "dist"
        dist.mkdir(exist_ok=True)
        for rel_path, size in artifacts.items():
            target = dist / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"x" * size)

        manifest_path = dist / "manifest.json"
        manifest_path.write_text(json.dumps(manifest), encoding="utf-8")
        return manifest_path

    return _factory


@pytest.fixture
def concrete_build(make_build: BuildFactory) -> Path:
    """Entry 'a.js' (100 bytes) importing leaf 'b.js' (50 bytes)."""
    return make_build(
        {
            "a.js": {"file": "a.js", "isEntry": True, "imports": ["b.js"]},
            "b.js": {"file": "b.js"},
        },
        {"a.js": 100, "b.js": 50},
    )


@pytest.fixture
def sizing_context(ratio_strategy: RatioStrategy) -> Callable[[Path], Dict[str, Any]]:
    """Load a manifest and pair it with a fresh cache and a ratio-based sizer."""

    def _context(manifest_path: Path) -> Dict[str, Any]:
        return {
            "manifest": load_manifest(str(manifest_path)),
            "cache": SizeCache(),
            "sizer": ArtifactSizer(str(manifest_path), ratio_strategy),
        }

    return _context
