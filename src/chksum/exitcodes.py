"""Process exit codes.

Codes follow BSD ``sysexits.h``.  Target failures of any kind collapse to
``EXIT_IOERR``; the per-line error text is the only place the cause shows.
"""

from __future__ import annotations

from collections.abc import Iterable

from chksum.report import Outcome

EXIT_OK = 0
EXIT_USAGE = 2  # argparse's own code for bad command lines
EXIT_IOERR = 74
EXIT_CONFIG = 78


def exitcode(outcome: Outcome) -> int:
    """Exit code for a single outcome."""
    return EXIT_OK if outcome.ok else EXIT_IOERR


def aggregate_exitcode(outcomes: Iterable[Outcome]) -> int:
    """``EXIT_OK`` only if every outcome succeeded.

    Always consumes the whole iterable, so a lazy producer runs to the end
    even after a failure.

    Raises:
        ValueError: If *outcomes* is empty.
    """
    seen = False
    failed = False
    for outcome in outcomes:
        seen = True
        if exitcode(outcome) != EXIT_OK:
            failed = True
    if not seen:
        raise ValueError("Cannot derive an exit code from zero outcomes")
    return EXIT_IOERR if failed else EXIT_OK
