from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the demo runner and translates the raw
argparse namespace into facade settings.
"""

import argparse
from typing import Any, Dict, List, Optional

from logify.domain.levels import Level, parse_level

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Logify demo.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="logify-demo",
        description="Exercise every Logify call shape against the console and log files.",
    )

    # --- Destinations ---
    p.add_argument(
        "--base-tag",
        dest="base_tag",
        default="TestLog",
        help="Application tag printed on every line.",
    )
    p.add_argument(
        "--log-path",
        dest="log_path",
        default="out/logs",
        help="Root directory of the daily rotating log files.",
    )
    p.add_argument(
        "--no-file",
        action="store_true",
        help="Log to the console only.",
    )
    p.add_argument(
        "--system-style",
        action="store_true",
        help="Let the host 'logging' configuration render console lines.",
    )

    # --- Filtering ---
    p.add_argument(
        "--levels",
        nargs="*",
        default=None,
        help="Loggable levels (D I W E or names). Default: all.",
    )
    p.add_argument(
        "--tags",
        nargs="*",
        default=None,
        help="Loggable tags. Default: all.",
    )

    # --- Timing workload ---
    p.add_argument(
        "--iterations",
        type=int,
        default=10,
        help="Number of sleeps in the measured block.",
    )
    p.add_argument(
        "--sleep-ms",
        dest="sleep_ms",
        type=int,
        default=60,
        help="Duration of each sleep in milliseconds.",
    )

    return p


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map parsed arguments to initialize() keywords and filter lists.

    Raises:
        ValueError: If a level code is unknown.
    """
    levels: Optional[List[Level]] = None
    if args.levels:
        levels = [parse_level(v) for v in args.levels]

    return {
        "base_tag": args.base_tag,
        "log_path": None if args.no_file else args.log_path,
        "use_system_style": bool(args.system_style),
        "levels": levels,
        "tags": list(args.tags) if args.tags else None,
    }
