"""CLI for zone file analysis."""
from __future__ import annotations

import argparse
import logging
import sys

from .analysis import run
from .config import Config, ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract domain names from (gzipped) DNS zone files",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--directory", help="directory with zone files")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--parallel", type=int, help="number of zones to process in parallel")
    parser.add_argument(
        "--verbose", action="store_true", default=None, help="log every parsed record"
    )
    parser.add_argument(
        "--progress", action="store_true", default=None, help="enable progress bar"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse; defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: Parsed CLI options:
            - directory (str | None): Directory with zone files.
            - config (str | None): Path to YAML config file.
            - parallel (int | None): Worker count.
            - verbose (bool | None): Log every record.
            - progress (bool | None): Show a progress bar.
            - log_level (str): Logging level.
    """
    return build_parser().parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Merge the optional config file with command-line flags.

    Raises:
        ConfigError: If the merged settings are invalid.
        FileNotFoundError: If `--config` names a missing file.
    """
    config = Config(args.config)
    config.override(
        directory=args.directory,
        parallel=args.parallel,
        verbose=args.verbose,
        progress=args.progress,
    )
    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on invalid settings.
    """
    args = parse_args(argv)
    level = "DEBUG" if args.verbose else args.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
    except (ConfigError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        build_parser().print_help(sys.stderr)
        return 1

    try:
        run(config)
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
