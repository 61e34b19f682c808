from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one CLI run: logging bootstrap, configuration resolution
(defaults, config file, command-line overrides), report execution and
rendering. Every fatal domain error ends the run with a non-zero exit code;
no partial report is printed.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from bundlesizer.core.pipeline.engine import run_report
from bundlesizer.core.pipeline.stages.validator import validate_config
from bundlesizer.domain.config import CONFIG_KEYS, load_config
from bundlesizer.domain.errors import BundleSizerError
from bundlesizer.domain.report_models import ReportResult
from bundlesizer.infra.logging import LoggingConfig, configure_logging, get_logger
from bundlesizer.interface.cli import args as cli_args
from bundlesizer.utils.formatting import format_size

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on a fatal report error, 2 on unusable input,
             130 when interrupted.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr; stdout carries the report)
    logging_conf = LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf)

    # 3. Resolve configuration hierarchy
    try:
        base_conf = load_config(args.config_path)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot load config file: {e}")
        print(f"ERROR: cannot load config file: {e}", file=sys.stderr)
        return 2

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    manifest_path = clean_conf["manifest_path"]
    if not os.path.isfile(manifest_path):
        msg = f"Manifest not found: {manifest_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Report execution phase
    logger.debug(f"Sizing entries of {manifest_path}")
    try:
        result = run_report(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except BundleSizerError as e:
        logger.critical(f"Report failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if clean_conf["json_output"]:
        print(json.dumps(_report_payload(result, clean_conf["size_base"]), ensure_ascii=False, indent=2))
    else:
        for line in render_text_report(result, clean_conf["size_base"]):
            print(line)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base config.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def render_text_report(result: ReportResult, size_base: int = 10) -> List[str]:
    """
    Render a report as terminal lines.

    The first line carries the number of sized chunks, then one line per
    reported entry in manifest order.

    Args:
        result: Completed report.
        size_base: 10 for SI units, 2 for IEC units.

    Returns:
        List[str]: Lines to print.
    """
    label = f"{result.compression}Size"
    lines = [f"sized chunks: {result.sized_count}"]
    for bundle in result.bundles:
        lines.append(
            f"{bundle.name}: "
            f"originalSize: {format_size(bundle.size.original_size, base=size_base)} "
            f"{label}: {format_size(bundle.size.compressed_size, base=size_base)}"
        )
    return lines


def _report_payload(result: ReportResult, size_base: int) -> Dict[str, Any]:
    """JSON view: raw integers plus their formatted strings."""
    payload = result.to_dict()
    for bundle in payload["bundles"]:
        bundle["original_size_human"] = format_size(bundle["original_size"], base=size_base)
        bundle["compressed_size_human"] = format_size(bundle["compressed_size"], base=size_base)
    return payload

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
