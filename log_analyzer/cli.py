"""log-analyzer — interactive store for pipe-delimited log entries."""

import logging
import sys
from argparse import ArgumentParser

from log_analyzer.config import Config, load_config, load_yaml_config
from log_analyzer.shell import LogShell
from log_analyzer.store import LogStore

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-analyzer",
        description="Add, search, and summarize log entries kept in a pipe-delimited file.",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Log file to load on start and save on exit (default: logs.txt)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize levels (ANSI)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, Config.log_level),
        format="%(asctime)s [log-analyzer] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    config = load_config(args, load_yaml_config(args.config))
    logging.getLogger().setLevel(config.log_level)
    logger.info("Config: log_file=%s, recent_default=%d, color=%s",
                config.log_file, config.recent_default, config.color)

    store = LogStore()
    try:
        store.load(config.log_file)
    except OSError as e:
        logger.error("Could not load log file %s: %s", config.log_file, e)
        print(f"Could not load log file: {e}")

    LogShell(store, config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
