from __future__ import annotations

"""
Unit tests for the Graph Size Aggregator.

Verifies:
1. Leaf and empty-chunk sizes equal the artifact's own size.
2. Transitive totals and import-order independence.
3. Shared leaves are measured once across entries.
4. Fatal failures: missing artifact, unknown import, import cycle.
"""

from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from bundlesizer.core.pipeline.engine import size_entries
from bundlesizer.core.services.aggregator import compute_size
from bundlesizer.core.services.size_cache import SizeCache
from bundlesizer.domain.errors import (
    ArtifactReadError,
    CyclicImportError,
    ManifestLookupError,
)
from bundlesizer.domain.size_models import SizeMetric

Context = Callable[[Path], Dict[str, Any]]


def _size(ctx: Dict[str, Any], name: str, cache: SizeCache | None = None) -> SizeMetric:
    """Run the aggregator for one manifest key."""
    return compute_size(
        ctx["manifest"][name],
        name,
        ctx["manifest"],
        cache if cache is not None else ctx["cache"],
        ctx["sizer"],
    )


def test_leaf_size_is_own_size(make_build, sizing_context: Context) -> None:
    """A node without imports reports exactly its artifact and is cached."""
    ctx = sizing_context(make_build({"leaf.js": {"file": "leaf.js"}}, {"leaf.js": 250}))

    result = _size(ctx, "leaf.js")

    assert result == SizeMetric(250, 100)
    assert ctx["cache"].get("leaf.js") == SizeMetric(250, 100)


def test_chunk_with_empty_imports_is_own_size(make_build, sizing_context: Context) -> None:
    """An empty import list sums to the identity and the chunk is not cached."""
    ctx = sizing_context(make_build({"c.js": {"file": "c.js", "imports": []}}, {"c.js": 75}))

    result = _size(ctx, "c.js")

    assert result == SizeMetric(75, 30)
    assert "c.js" not in ctx["cache"]


def test_concrete_entry_with_one_leaf(concrete_build: Path, sizing_context: Context) -> None:
    """a.js (100/40) importing b.js (50/20) totals 150/60."""
    ctx = sizing_context(concrete_build)

    assert _size(ctx, "a.js") == SizeMetric(150, 60)


def test_import_order_does_not_change_total(make_build, sizing_context: Context) -> None:
    """Permuting an imports list yields the same total."""
    artifacts = {"e.js": 10, "x.js": 20, "y.js": 35, "z.js": 55}
    leaves = {n: {"file": n} for n in ("x.js", "y.js", "z.js")}

    forward = sizing_context(make_build(
        {"e.js": {"file": "e.js", "isEntry": True, "imports": ["x.js", "y.js", "z.js"]}, **leaves},
        artifacts,
    ))
    first = _size(forward, "e.js")

    backward = sizing_context(make_build(
        {"e.js": {"file": "e.js", "isEntry": True, "imports": ["z.js", "x.js", "y.js"]}, **leaves},
        artifacts,
    ))
    second = _size(backward, "e.js")

    assert first == second == SizeMetric(120, 4 + 8 + 14 + 22)


def test_shared_leaf_measured_once_across_entries(make_build, sizing_context: Context) -> None:
    """Entries A and B both import leaf C; C is read a single time."""
    ctx = sizing_context(make_build(
        {
            "A.js": {"file": "A.js", "isEntry": True, "imports": ["C.js"]},
            "B.js": {"file": "B.js", "isEntry": True, "imports": ["C.js"]},
            "C.js": {"file": "C.js"},
        },
        {"A.js": 10, "B.js": 20, "C.js": 100},
    ))

    size_entries(ctx["manifest"], ctx["cache"], ctx["sizer"])

    assert ctx["sizer"].reads == 3
    assert ctx["cache"].hits == 1
    assert ctx["cache"].get("A.js") == SizeMetric(110, 4 + 40)
    assert ctx["cache"].get("B.js") == SizeMetric(120, 8 + 40)


def test_warm_cache_gives_same_total_as_cold(make_build, sizing_context: Context) -> None:
    """Repeating a top-level call with a pre-warmed cache is idempotent."""
    ctx = sizing_context(make_build(
        {
            "main.js": {"file": "main.js", "isEntry": True, "imports": ["vendor.js", "util.js"]},
            "vendor.js": {"file": "vendor.js", "imports": ["util.js"]},
            "util.js": {"file": "util.js"},
        },
        {"main.js": 300, "vendor.js": 500, "util.js": 40},
    ))

    cold = _size(ctx, "main.js", SizeCache())
    warm_cache = SizeCache()
    _size(ctx, "main.js", warm_cache)
    warm = _size(ctx, "main.js", warm_cache)

    assert cold == warm


def test_leaf_reached_twice_in_one_graph_counts_twice(make_build, sizing_context: Context) -> None:
    """Diamond imports sum per importer: util.js contributes through both paths."""
    ctx = sizing_context(make_build(
        {
            "app.js": {"file": "app.js", "isEntry": True, "imports": ["left.js", "right.js"]},
            "left.js": {"file": "left.js", "imports": ["util.js"]},
            "right.js": {"file": "right.js", "imports": ["util.js"]},
            "util.js": {"file": "util.js"},
        },
        {"app.js": 5, "left.js": 10, "right.js": 15, "util.js": 100},
    ))

    result = _size(ctx, "app.js")

    assert result.original_size == 5 + 10 + 15 + 100 + 100
    # util.js measured once, then served from the cache
    assert ctx["sizer"].reads == 4


def test_top_level_entry_is_measured_even_if_seen_before(make_build, sizing_context: Context) -> None:
    """An entry imported by an earlier entry is measured again at top level."""
    ctx = sizing_context(make_build(
        {
            "src/a.js": {"file": "a.js", "isEntry": True, "imports": ["src/b.js"]},
            "src/b.js": {"file": "b.js", "isEntry": True, "imports": []},
        },
        {"a.js": 10, "b.js": 20},
    ))

    size_entries(ctx["manifest"], ctx["cache"], ctx["sizer"])

    assert ctx["sizer"].reads == 3
    assert ctx["cache"].get("src/a.js") == SizeMetric(30, 12)
    assert ctx["cache"].get("src/b.js") == SizeMetric(20, 8)


def test_missing_artifact_is_fatal(make_build, sizing_context: Context) -> None:
    """A 'file' that does not exist aborts instead of counting zero."""
    ctx = sizing_context(make_build(
        {
            "a.js": {"file": "a.js", "isEntry": True, "imports": ["gone.js"]},
            "gone.js": {"file": "assets/gone.js"},
        },
        {"a.js": 10},
    ))

    with pytest.raises(ArtifactReadError) as exc_info:
        _size(ctx, "a.js")

    assert exc_info.value.path.endswith("gone.js")


def test_unknown_import_is_lookup_failure(make_build, sizing_context: Context) -> None:
    """An import missing from the manifest raises a KeyError-compatible error."""
    ctx = sizing_context(make_build(
        {"a.js": {"file": "a.js", "isEntry": True, "imports": ["nowhere.js"]}},
        {"a.js": 10},
    ))

    with pytest.raises(ManifestLookupError) as exc_info:
        _size(ctx, "a.js")

    assert isinstance(exc_info.value, KeyError)
    assert exc_info.value.name == "nowhere.js"
    assert exc_info.value.importer == "a.js"


def test_import_cycle_is_detected(make_build, sizing_context: Context) -> None:
    """a -> b -> a stops with the cycle path instead of recursing forever."""
    ctx = sizing_context(make_build(
        {
            "a.js": {"file": "a.js", "isEntry": True, "imports": ["b.js"]},
            "b.js": {"file": "b.js", "imports": ["a.js"]},
        },
        {"a.js": 10, "b.js": 10},
    ))

    with pytest.raises(CyclicImportError) as exc_info:
        _size(ctx, "a.js")

    assert exc_info.value.cycle == ["a.js", "b.js", "a.js"]


def test_self_import_is_detected(make_build, sizing_context: Context) -> None:
    ctx = sizing_context(make_build(
        {"a.js": {"file": "a.js", "isEntry": True, "imports": ["a.js"]}},
        {"a.js": 10},
    ))

    with pytest.raises(CyclicImportError):
        _size(ctx, "a.js")
