"""Run one algorithm over a list of targets.

Targets are processed strictly in order, one at a time.  Each result is
reported as soon as it is known, and a failed target never stops the ones
after it.  The exit code is decided only once every target has been tried.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from typing import BinaryIO, Optional, TextIO

from chksum.algorithms import Algorithm
from chksum.digest import compute_digest
from chksum.exitcodes import aggregate_exitcode
from chksum.report import Outcome, print_result
from chksum.target import Target

logger = logging.getLogger(__name__)


def resolve_targets(
    paths: Sequence[str | os.PathLike[str]],
    use_stdin: bool,
) -> list[Target]:
    """Turn the CLI selection into an ordered target list.

    Raises:
        ValueError: If both or neither of paths / stdin are selected.
    """
    if use_stdin and paths:
        raise ValueError("Paths and --stdin are mutually exclusive")
    if use_stdin:
        return [Target.stdin()]
    if not paths:
        raise ValueError("At least one path or --stdin is required")
    return [Target.from_path(p) for p in paths]


def hash_target(
    algorithm: Algorithm,
    target: Target,
    stdin: Optional[BinaryIO] = None,
) -> Outcome:
    """Hash one target, capturing a read failure instead of raising it."""
    try:
        digest = compute_digest(algorithm, target, stdin=stdin)
    except OSError as exc:
        logger.debug("Failed to hash %s: %s", target, exc)
        return Outcome(target, error=exc)
    logger.debug("Digest for %s: %s", target, digest)
    return Outcome(target, digest=digest)


def _hash_and_report(
    algorithm: Algorithm,
    targets: Sequence[Target],
    stdout: TextIO,
    stderr: TextIO,
    colorize: bool,
    stdin: Optional[BinaryIO],
) -> Iterator[Outcome]:
    """Yield each outcome only after its line has been written."""
    for target in targets:
        outcome = hash_target(algorithm, target, stdin=stdin)
        print_result(stdout, stderr, outcome, colorize)
        yield outcome


def run(
    algorithm: Algorithm,
    targets: Sequence[Target],
    stdout: TextIO,
    stderr: TextIO,
    colorize: bool = False,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """Hash and report every target; return the aggregate exit code.

    Raises:
        OSError: If writing a report line fails.
        ValueError: If *targets* is empty.
    """
    if not targets:
        raise ValueError("No targets to hash")
    status = aggregate_exitcode(
        _hash_and_report(algorithm, targets, stdout, stderr, colorize, stdin)
    )
    logger.info("%s: %d target(s) hashed, exit status %d", algorithm.title, len(targets), status)
    return status
