from __future__ import annotations

"""
Graph Size Aggregator.

Computes the combined size of a manifest node and the closure of its static
imports. Results for leaf nodes are memoized in the shared SizeCache, and an
import that is already cached is added from the cache instead of being
measured again.

Only leaves are filed by this module. The combined total of a chunk is
returned to the caller, which decides whether to store it (the report driver
stores each entry total under the entry's own identifier).
"""

import logging
from typing import List, Optional

from bundlesizer.core.services.artifact_sizer import ArtifactSizer
from bundlesizer.core.services.size_cache import SizeCache
from bundlesizer.domain.errors import CyclicImportError, ManifestLookupError
from bundlesizer.domain.manifest_models import Manifest, ManifestNode
from bundlesizer.domain.size_models import SizeMetric

logger = logging.getLogger(__name__)


def compute_size(
        node: ManifestNode,
        name: str,
        manifest: Manifest,
        cache: SizeCache,
        sizer: ArtifactSizer,
        _resolving: Optional[List[str]] = None,
) -> SizeMetric:
    """
    Aggregate the size of a node plus everything it statically imports.

    The node's own artifact is always measured first, even when its
    identifier is already cached: the function receives a descriptor and
    only consults the cache for imports. Imports are then visited strictly
    in declaration order.

    Args:
        node: Resolved descriptor to size.
        name: Identifier the node was resolved from; leaf results are cached
              under it.
        manifest: Mapping used to resolve import identifiers.
        cache: Size cache shared across the whole run.
        sizer: Artifact measurement service.

    Returns:
        SizeMetric: Own size plus the sum of all import sizes.

    Raises:
        ArtifactReadError: If any visited artifact is missing.
        ManifestLookupError: If an import is not a manifest key.
        CyclicImportError: If the import graph loops back on itself.
    """
    resolving = _resolving if _resolving is not None else []

    own = sizer.measure(node, name)

    if node.imports is None:
        cache.set(name, own)
        return own

    resolving.append(name)
    deps_total = SizeMetric.zero()
    for import_name in node.imports:
        cached = cache.lookup(import_name)
        if cached is not None:
            logger.debug(f"Cache hit for {import_name} (imported by {name})")
            deps_total = deps_total + cached
            continue

        if import_name in resolving:
            cycle = resolving[resolving.index(import_name):] + [import_name]
            raise CyclicImportError(cycle)

        child = manifest.get(import_name)
        if child is None:
            raise ManifestLookupError(import_name, name)

        deps_total = deps_total + compute_size(
            child, import_name, manifest, cache, sizer, resolving
        )
    resolving.pop()

    return own + deps_total
