from __future__ import annotations

"""
Report Domain Data Models.

Structures passed from the report engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from bundlesizer.domain.size_models import SizeMetric

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BundleSize:
    """
    Transitive size of one reported entry bundle.

    Attributes:
        name: Manifest identifier of the entry.
        file: Artifact path of the entry chunk itself.
        size: Combined metric of the entry and its static import closure.
    """
    name: str
    file: str
    size: SizeMetric


@dataclass(frozen=True)
class ReportResult:
    """
    Outcome of a complete report run.

    Attributes:
        manifest_path: Manifest the report was computed from.
        compression: Name of the compression strategy used for estimates.
        sized_count: Number of identifiers held by the size cache at the end.
        artifact_reads: Number of artifact read/compress passes performed.
        bundles: Reported entries, in manifest order.
    """
    manifest_path: str
    compression: str
    sized_count: int
    artifact_reads: int = 0
    bundles: List[BundleSize] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "manifest_path": self.manifest_path,
            "compression": self.compression,
            "sized_count": self.sized_count,
            "artifact_reads": self.artifact_reads,
            "bundles": [
                {"name": b.name, "file": b.file, **b.size.to_dict()}
                for b in self.bundles
            ],
        }
