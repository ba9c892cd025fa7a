"""
Command-line interface for exec-munin.

Loads the configuration, installs signal handlers and runs the scheduler
until the process is told to stop. Standard output is reserved for PUTVAL
records, so all logging goes to standard error.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import DEFAULT_CONFIG_PATH, build_shim_config
from ..plugins import PluginRunner, PutvalEmitter
from ..scheduling import RoundScheduler
from ..system import SignalHandler
from ..validation import ConfigLoadError, handle_cli_error

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout carries the PUTVAL stream."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exec-munin",
        description="Run Munin plugins and translate their values for collectd's exec plugin.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file to read (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Main command-line entry point.

    Returns:
        0 once a shutdown signal has stopped the scheduler

    Raises:
        SystemExit: With status 1 if the configuration cannot be loaded
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_shim_config(args.config)
    except ConfigLoadError as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )

    if not config.scripts:
        logger.warning("No usable scripts configured; rounds will emit nothing.")

    runner = PluginRunner(config, PutvalEmitter(sys.stdout))
    scheduler = RoundScheduler(config, runner)

    signal_handler = SignalHandler(scheduler.request_shutdown, runner.terminate_active)
    signal_handler.setup_signal_handlers()
    try:
        scheduler.run_forever()
    finally:
        signal_handler.cleanup_signal_handlers()

    return 0


if __name__ == "__main__":
    sys.exit(main_cli())
