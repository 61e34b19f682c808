from __future__ import annotations

"""
Artifact Measurement Service.

Measures the own size of a single manifest node: raw bytes on disk plus the
compressed-size estimate of its content. This is the only place where the
sizing core touches storage.
"""

import logging
from typing import Optional

from bundlesizer.core.processing.strategies import CompressionStrategy
from bundlesizer.domain.errors import ArtifactReadError
from bundlesizer.domain.manifest_models import ManifestNode
from bundlesizer.domain.size_models import SizeMetric
from bundlesizer.infra.fs import artifact_size, read_artifact_bytes, resolve_artifact_path

logger = logging.getLogger(__name__)


class ArtifactSizer:
    """
    Reads and compresses node artifacts relative to a manifest location.

    Attributes:
        manifest_path: Manifest the artifact paths are relative to.
        strategy: Compression estimator applied to each artifact.
        reads: Number of artifacts measured so far.
    """

    def __init__(
            self,
            manifest_path: str,
            strategy: CompressionStrategy,
            base_dir: Optional[str] = None,
    ) -> None:
        self.manifest_path = manifest_path
        self.strategy = strategy
        self._base_dir = base_dir
        self.reads = 0

    def resolve(self, file_path: str) -> str:
        """Absolute location of a node's artifact."""
        return resolve_artifact_path(self.manifest_path, file_path, self._base_dir)

    def measure(self, node: ManifestNode, name: str = "") -> SizeMetric:
        """
        Compute the own size of a node, ignoring its imports.

        Args:
            node: Descriptor whose 'file' is measured.
            name: Manifest identifier of the node, used in error messages.

        Returns:
            SizeMetric: Raw size and compressed estimate of the artifact.

        Raises:
            ArtifactReadError: If the node declares no artifact, or the
                               artifact is missing or unreadable.
        """
        if node.file is None:
            raise ArtifactReadError(name or "<unnamed node>", "manifest node has no 'file' path")

        path = self.resolve(node.file)
        original_size = artifact_size(path)
        compressed_size = self.strategy.estimate(read_artifact_bytes(path))
        self.reads += 1

        logger.debug(
            f"Measured {node.file}: {original_size} B raw, "
            f"{compressed_size} B {self.strategy.name}"
        )
        return SizeMetric(original_size=original_size, compressed_size=compressed_size)
