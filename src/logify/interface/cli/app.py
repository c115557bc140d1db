from __future__ import annotations

"""
Command Line Demo Application.

Initializes the default facade from command-line options and runs the
showcase sequence: one line per level, a tagged line, an exception, a
stack trace and a measured workload.
"""

import sys
import time
from typing import List, Optional

import logify
from logify.interface.cli import args as cli_args

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the demo workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 2 for invalid options).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    try:
        settings = cli_args.args_to_settings(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logify.initialize(
        settings["base_tag"],
        settings["log_path"],
        settings["use_system_style"],
    )
    logify.set_loggable_levels(settings["levels"] or [])
    logify.set_loggable_tags(settings["tags"] or [])

    run_demo(args.iterations, args.sleep_ms)
    return 0


def run_demo(iterations: int, sleep_ms: int) -> int:
    """Emit the showcase sequence and return the measured milliseconds."""
    logify.d("debug")
    logify.i("info")
    logify.w("warn")
    logify.e("error")

    logify.tag("CustomTag").i("information")
    logify.e(OSError("Network error!!!"))
    logify.stack_trace()

    def workload() -> None:
        for _ in range(iterations):
            time.sleep(sleep_ms / 1000.0)

    return logify.measure_time_millis(workload)
