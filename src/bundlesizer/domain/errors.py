from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure raised by the sizing core derives from BundleSizerError so the
CLI boundary can translate them into a single non-zero exit code. None of
these errors are recovered inside the core: a single bad node aborts the run.
"""

from typing import Sequence


class BundleSizerError(Exception):
    """Base class for all fatal report errors."""


class ManifestReadError(BundleSizerError):
    """The manifest is missing, unreadable, not valid JSON or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load manifest '{path}': {reason}")
        self.path = path
        self.reason = reason


class ManifestLookupError(BundleSizerError, KeyError):
    """An 'imports' entry references an identifier absent from the manifest."""

    def __init__(self, name: str, importer: str) -> None:
        super().__init__(name)
        self.name = name
        self.importer = importer

    def __str__(self) -> str:
        return f"Chunk '{self.importer}' imports unknown manifest key '{self.name}'"


class ArtifactReadError(BundleSizerError):
    """The artifact file of a manifest node could not be read from storage."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read artifact '{path}': {reason}")
        self.path = path
        self.reason = reason


class CyclicImportError(BundleSizerError):
    """The static import graph contains a cycle."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Import cycle detected: " + " -> ".join(self.cycle))
