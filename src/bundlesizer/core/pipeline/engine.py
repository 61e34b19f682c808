from __future__ import annotations

"""
Report Engine.

Drives a complete size report: loads the manifest, sizes every entry bundle
against one shared cache, and selects the entries to report. All domain
errors propagate unchanged; there is no partial or degraded result.
"""

import logging
from typing import Any, Dict, List, Optional

from bundlesizer.core.processing.compressor import get_strategy
from bundlesizer.core.services.aggregator import compute_size
from bundlesizer.core.services.artifact_sizer import ArtifactSizer
from bundlesizer.core.services.size_cache import SizeCache
from bundlesizer.domain.manifest_models import Manifest
from bundlesizer.domain.report_models import BundleSize, ReportResult
from bundlesizer.infra.fs import load_manifest

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_report(config: Dict[str, Any], base_dir: Optional[str] = None) -> ReportResult:
    """
    Execute a report run from a validated configuration.

    Args:
        config: Normalized configuration (see validate_config).
        base_dir: Optional working directory override, applied to the
                  manifest path and to every artifact path.

    Returns:
        ReportResult: Sized entries in manifest order.
    """
    manifest_path = config["manifest_path"]
    manifest = load_manifest(manifest_path, base_dir=base_dir)

    strategy = get_strategy(config["compression"], config.get("quality"))
    sizer = ArtifactSizer(manifest_path, strategy, base_dir=base_dir)
    cache = SizeCache()

    size_entries(manifest, cache, sizer)

    bundles = select_bundles(
        manifest,
        cache,
        prefix=config.get("entry_prefix", ""),
        report_all=bool(config.get("report_all", False)),
    )

    logger.info(
        f"Sized {len(cache)} chunks from {manifest_path} "
        f"({sizer.reads} artifact reads, {cache.hits} cache hits)"
    )
    return ReportResult(
        manifest_path=manifest_path,
        compression=strategy.name,
        sized_count=len(cache),
        artifact_reads=sizer.reads,
        bundles=bundles,
    )


def size_entries(manifest: Manifest, cache: SizeCache, sizer: ArtifactSizer) -> None:
    """
    Compute the transitive size of every entry node.

    Each entry total is filed in the cache under the entry's identifier once
    its top-level call returns.

    Args:
        manifest: Parsed manifest.
        cache: Shared size cache, populated in place.
        sizer: Artifact measurement service.
    """
    for name, node in manifest.items():
        if not node.is_entry:
            continue

        total = compute_size(node, name, manifest, cache, sizer)
        cache.set(name, total)
        logger.debug(
            f"Entry {name}: {total.original_size} B raw, {total.compressed_size} B compressed"
        )


def select_bundles(
        manifest: Manifest,
        cache: SizeCache,
        prefix: str,
        report_all: bool = False,
) -> List[BundleSize]:
    """
    Pick the sized entries to report, in manifest order.

    Args:
        manifest: Parsed manifest.
        cache: Cache populated by size_entries.
        prefix: Identifier namespace of project-authored entries.
        report_all: Report every entry regardless of prefix.

    Returns:
        List[BundleSize]: Selected entries with their transitive sizes.
    """
    bundles: List[BundleSize] = []
    for name, node in manifest.items():
        if not node.is_entry:
            continue
        if not report_all and not name.startswith(prefix):
            continue

        size = cache.get(name)
        if size is None:
            continue
        bundles.append(BundleSize(name=name, file=node.file, size=size))
    return bundles
