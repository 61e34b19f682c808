from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Storage collaborators of the sizing core: manifest loading, artifact path
resolution and raw artifact access. Failures are converted into domain
errors and never retried; a missing artifact means the build is broken.
"""

import json
import logging
import os
from typing import Optional

from bundlesizer.domain.errors import ArtifactReadError, ManifestReadError
from bundlesizer.domain.manifest_models import Manifest, parse_manifest

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_artifact_path(manifest_path: str, file_path: str, base_dir: Optional[str] = None) -> str:
    """
    Resolve an artifact path declared in the manifest.

    Artifact paths are relative to the manifest's own directory, which is in
    turn resolved against the working directory (or base_dir when given).

    Args:
        manifest_path: Path of the manifest file as supplied by the caller.
        file_path: The node's 'file' value.
        base_dir: Optional override for the working directory.

    Returns:
        str: Absolute artifact path.
    """
    root = base_dir if base_dir is not None else os.getcwd()
    return os.path.abspath(os.path.join(root, os.path.dirname(manifest_path), file_path))


def resolve_manifest_path(manifest_path: str, base_dir: Optional[str] = None) -> str:
    """Resolve the manifest path against the working directory (or base_dir when given)."""
    root = base_dir if base_dir is not None else os.getcwd()
    return os.path.abspath(os.path.join(root, manifest_path))

# -----------------------------------------------------------------------------
# MANIFEST I/O
# -----------------------------------------------------------------------------

def load_manifest(manifest_path: str, base_dir: Optional[str] = None) -> Manifest:
    """
    Read and parse a UTF-8 JSON build manifest.

    Args:
        manifest_path: Path to the manifest file.
        base_dir: Optional override for the working directory a relative
                  manifest_path is resolved against.

    Returns:
        Manifest: Ordered identifier-to-node mapping.

    Raises:
        ManifestReadError: If the file is missing, unreadable, not JSON,
                           or not shaped like a manifest.
    """
    try:
        with open(resolve_manifest_path(manifest_path, base_dir), "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ManifestReadError(manifest_path, e.strerror or str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestReadError(manifest_path, f"invalid JSON ({e})") from e

    try:
        manifest = parse_manifest(raw)
    except ValueError as e:
        raise ManifestReadError(manifest_path, str(e)) from e

    logger.debug(f"Loaded manifest {manifest_path} with {len(manifest)} nodes")
    return manifest

# -----------------------------------------------------------------------------
# ARTIFACT I/O
# -----------------------------------------------------------------------------

def artifact_size(path: str) -> int:
    """Return the on-disk size of an artifact in bytes."""
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise ArtifactReadError(path, e.strerror or str(e)) from e


def read_artifact_bytes(path: str) -> bytes:
    """Return the full binary content of an artifact."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ArtifactReadError(path, e.strerror or str(e)) from e
