from __future__ import annotations

"""
Build Manifest Domain Models.

Maps the JSON manifest emitted by the bundler (one object keyed by chunk
identifier) onto immutable node descriptors. Only the structural fields
('file', 'imports', 'isEntry') are read; everything else the bundler emits
is ignored. The graph itself is not validated here, so dangling imports,
cycles and nodes without an artifact surface later, when they are visited.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ManifestNode:
    """
    A single manifest entry.

    Attributes:
        file: Artifact path, relative to the manifest's directory. None when
              the node does not declare one; measuring such a node fails.
        imports: Static imports in declaration order, or None for a leaf node.
        is_entry: True when the bundler flagged this node as an entry point.
    """
    file: Optional[str] = None
    imports: Optional[Tuple[str, ...]] = None
    is_entry: bool = False

    @property
    def is_leaf(self) -> bool:
        """A node without an 'imports' field has no further dependencies."""
        return self.imports is None


Manifest = Dict[str, ManifestNode]

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_manifest(raw: Any) -> Manifest:
    """
    Convert a decoded manifest JSON document into node descriptors.

    Key order of the JSON object is preserved. Unknown fields are ignored.

    Args:
        raw: Result of json.load on the manifest file.

    Returns:
        Manifest: Ordered mapping of identifier to descriptor.

    Raises:
        ValueError: If the document, a node, or a node's 'imports' has the wrong shape.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"expected a JSON object at top level, found {type(raw).__name__}")

    manifest: Manifest = {}
    for name, entry in raw.items():
        manifest[name] = parse_node(name, entry)
    return manifest


def parse_node(name: str, entry: Any) -> ManifestNode:
    """Build one ManifestNode from its raw JSON object."""
    if not isinstance(entry, dict):
        raise ValueError(f"node '{name}' is not an object")

    file_path = entry.get("file")

    imports: Optional[Tuple[str, ...]] = None
    if "imports" in entry:
        value = entry["imports"]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"node '{name}' field 'imports' must be a list of strings")
        imports = tuple(value)

    return ManifestNode(
        file=file_path if isinstance(file_path, str) and file_path else None,
        imports=imports,
        # Presence of the flag marks an entry, whatever its value
        is_entry="isEntry" in entry,
    )
