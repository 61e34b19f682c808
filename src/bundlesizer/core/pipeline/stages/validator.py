from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged run configuration before the report engine sees it:
type coercion for values coming from JSON files or the command line,
default injection for missing keys, and range checks for the compression
quality.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from bundlesizer.domain.config import COMPRESSION_LEVELS, get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a run configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the list of warnings produced.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return _resolve_quality(defaults, warnings, strict), warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    merged["manifest_path"] = _as_str(
        merged.get("manifest_path"), defaults["manifest_path"], "manifest_path", warnings, strict
    )
    # An empty prefix is meaningful: it selects every entry
    prefix = merged.get("entry_prefix")
    if prefix is None:
        merged["entry_prefix"] = defaults["entry_prefix"]
    elif not isinstance(prefix, str):
        merged["entry_prefix"] = _as_str(
            prefix, defaults["entry_prefix"], "entry_prefix", warnings, strict
        )

    for field in ("report_all", "json_output"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    # 3. Domain-Specific Normalization
    compression = _as_str(
        merged.get("compression"), defaults["compression"], "compression", warnings, strict
    ).lower()
    if compression not in COMPRESSION_LEVELS:
        msg = f"Unsupported compression '{compression}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{defaults['compression']}'.")
        compression = defaults["compression"]
    merged["compression"] = compression

    size_base = _as_int(merged.get("size_base"), defaults["size_base"], "size_base", warnings, strict)
    if size_base not in (2, 10):
        msg = f"Invalid field 'size_base': expected 2 or 10, received {size_base}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        size_base = defaults["size_base"]
    merged["size_base"] = size_base

    return _resolve_quality(merged, warnings, strict), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(
        value: Any,
        fallback: Optional[int],
        field: str,
        warnings: List[str],
        strict: bool,
) -> Optional[int]:
    """Coerce numeric strings into integers; booleans are rejected."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if not strict and isinstance(value, str):
        try:
            converted = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
            return converted
        except ValueError:
            pass

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _resolve_quality(config: Dict[str, Any], warnings: List[str], strict: bool) -> Dict[str, Any]:
    """Fill in the per-algorithm default quality and clamp it into range."""
    levels = COMPRESSION_LEVELS[config["compression"]]
    quality = _as_int(config.get("quality"), None, "quality", warnings, strict)

    if quality is None:
        quality = levels["default"]
    elif not levels["min"] <= quality <= levels["max"]:
        msg = (
            f"Quality {quality} out of range for {config['compression']} "
            f"({levels['min']}..{levels['max']})."
        )
        if strict:
            raise ValueError(msg)
        quality = max(levels["min"], min(levels["max"], quality))
        warnings.append(f"{msg} Clamped to {quality}.")

    config["quality"] = quality
    return config
