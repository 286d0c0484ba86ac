"""Command-line interface for chksum.

Usage:
    # Digest files and directories
    chksum sha2-256 README.md src/

    # Digest standard input
    printf 'hello' | chksum md5 --stdin

    # Force coloured failure lines, debug logging
    chksum --color always -vv sha1 missing.txt

Exit status is 0 when every target was hashed, 74 when at least one failed,
2 for command-line errors and 78 for configuration errors.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

from chksum import dispatch
from chksum.algorithms import Algorithm, available_algorithms
from chksum.color import ColorMode, enable_ansi, should_colorize
from chksum.config import load_config
from chksum.errors import ConfigError
from chksum.exitcodes import EXIT_CONFIG, EXIT_IOERR, EXIT_USAGE

DIST_NAME = "chksum-cli"

# ---------------------------------------------------------------------------
# Logging: one stderr handler on the "chksum" logger, replaced per main()
# ---------------------------------------------------------------------------

logger = logging.getLogger("chksum")

_stderr_handler: logging.Handler | None = None


def configure_logging(level: int) -> None:
    """Route "chksum" log records to the current sys.stderr at *level*."""
    global _stderr_handler
    if _stderr_handler is not None:
        logger.removeHandler(_stderr_handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(process)d] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"
        )
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    _stderr_handler = handler


def _verbosity_level(verbose: int) -> Optional[int]:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return None


def _package_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0+unknown"


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_color_option(parser: argparse.ArgumentParser, default: object) -> None:
    parser.add_argument(
        "-c",
        "--color",
        type=ColorMode.parse,
        default=default,
        metavar="{auto,always,never}",
        help="Show colored output (default: auto, or the configured value)",
    )


def build_parser() -> tuple[argparse.ArgumentParser, dict[str, argparse.ArgumentParser]]:
    """Build the top-level parser plus one subparser per available algorithm."""
    parser = argparse.ArgumentParser(
        prog="chksum",
        description="Calculate digests of files, directories or stdin.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    _add_color_option(parser, default=None)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (default: $CHKSUM_CONFIG or ~/.chksum/config.yaml)",
    )

    # --color is also accepted after the subcommand; SUPPRESS keeps an absent
    # sub-level flag from overwriting the top-level value.
    color_parent = argparse.ArgumentParser(add_help=False)
    _add_color_option(color_parent, default=argparse.SUPPRESS)

    sub = parser.add_subparsers(dest="command", required=True, metavar="ALGORITHM")
    subparsers: dict[str, argparse.ArgumentParser] = {}
    for algo in available_algorithms():
        p = sub.add_parser(
            algo.value,
            help=f"Calculate {algo.title} digest.",
            description=f"Calculate {algo.title} digest.",
            parents=[color_parent],
        )
        p.add_argument("paths", nargs="*", metavar="PATH", help="Path to file or directory.")
        p.add_argument(
            "-s", "--stdin", action="store_true", help="Calculate digest from stdin."
        )
        subparsers[algo.value] = p
    return parser, subparsers


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """Parse *argv*, hash every target, return the process exit code."""
    parser, subparsers = build_parser()
    args = parser.parse_args(argv)
    sub = subparsers[args.command]

    if args.paths and args.stdin:
        sub.error("argument -s/--stdin: not allowed with argument PATH")
    if not args.paths and not args.stdin:
        sub.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"chksum: {e}", file=sys.stderr)
        return EXIT_CONFIG

    level = _verbosity_level(args.verbose)
    configure_logging(level if level is not None else cfg.log_level_value)
    if cfg.source is not None:
        logger.debug("Loaded config from %s", cfg.source)

    color_mode = args.color if args.color is not None else cfg.color
    colorize = should_colorize(color_mode, sys.stderr)
    if colorize:
        enable_ansi()

    algorithm = Algorithm.from_name(args.command)
    targets = dispatch.resolve_targets(args.paths, args.stdin)

    try:
        return dispatch.run(algorithm, targets, sys.stdout, sys.stderr, colorize=colorize)
    except OSError as exc:
        logger.critical("Cannot write report line: %s", exc)
        _discard_stdout()
        return EXIT_IOERR


def _discard_stdout() -> None:
    """Point fd 1 at devnull so the interpreter's exit-time flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
