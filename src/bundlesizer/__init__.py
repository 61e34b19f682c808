"""Transitive bundle size reporting for module-bundler build manifests."""

__version__ = "0.1.0"
