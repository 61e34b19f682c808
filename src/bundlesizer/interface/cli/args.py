from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict

from bundlesizer import __version__
from bundlesizer.core.processing.compressor import available_algorithms

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the bundlesizer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="bundlesizer",
        description=(
            "Report the transitive raw and compressed size of every entry "
            "bundle in a bundler build manifest."
        ),
    )

    # --- Input ---
    p.add_argument(
        "manifest_path",
        nargs="?",
        default=None,
        help="Path to the build manifest (default: ./data/vite/manifest.json).",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON config file (default: ./bundlesizer.json when present).",
    )

    # --- Selection ---
    p.add_argument(
        "--prefix",
        dest="entry_prefix",
        default=None,
        help="Only report entries whose identifier starts with this prefix (default: 'src/').",
    )
    p.add_argument(
        "--all",
        dest="report_all",
        action="store_true",
        help="Report every entry bundle, ignoring the prefix.",
    )

    # --- Compression estimate ---
    p.add_argument(
        "--compression",
        choices=available_algorithms(),
        default=None,
        help="Compression used for the size estimate (default: brotli).",
    )
    p.add_argument(
        "--quality",
        type=int,
        default=None,
        help="Compression quality (brotli 0-11, gzip 1-9).",
    )

    # --- Rendering ---
    p.add_argument(
        "--base",
        dest="size_base",
        type=int,
        choices=(2, 10),
        default=None,
        help="Unit base for human-readable sizes: 10 (kB) or 2 (KiB).",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the report as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None means 'not given on the command line'.
    """
    overrides: Dict[str, Any] = {
        "manifest_path": args.manifest_path,
        "entry_prefix": args.entry_prefix,
        "compression": args.compression,
        "quality": args.quality,
        "size_base": args.size_base,
    }

    # store_true flags only override when set
    if args.report_all:
        overrides["report_all"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
