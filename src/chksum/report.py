"""Per-target result lines.

Success goes to stdout as ``<target>: <hex digest>``.  Failure goes to stderr
as ``<target>: <error message>`` with the message lowercased so the text
reads the same whatever capitalisation the OS uses; the whole failure line
may be wrapped in red when colour is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from colorama import Fore, Style

from chksum.digest import Digest
from chksum.target import Target, TargetKind


@dataclass(frozen=True)
class Outcome:
    """Result of hashing one target: exactly one of digest / error is set."""

    target: Target
    digest: Optional[Digest] = None
    error: Optional[OSError] = None

    def __post_init__(self) -> None:
        if (self.digest is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of digest or error")

    @property
    def ok(self) -> bool:
        return self.error is None


def describe_error(exc: OSError, target: Optional[Target] = None) -> str:
    """Render an OSError as a lowercase single-line message.

    Uses the OS ``strerror`` when available.  If the failing file is not the
    target itself (a file deep inside a directory), its name is appended.
    """
    msg = exc.strerror or str(exc) or type(exc).__name__
    filename = exc.filename
    if filename is not None and not _is_target_path(filename, target):
        msg = f"{msg}: {filename}"
    return " ".join(msg.split()).lower()


def _is_target_path(filename: object, target: Optional[Target]) -> bool:
    if target is None or target.kind is not TargetKind.PATH:
        return False
    return str(filename) in (target.display(), str(target.path))


def format_success(outcome: Outcome) -> str:
    return f"{outcome.target}: {outcome.digest:x}"


def format_failure(outcome: Outcome, colorize: bool = False) -> str:
    line = f"{outcome.target}: {describe_error(outcome.error, outcome.target)}"
    if colorize:
        line = f"{Fore.RED}{line}{Style.RESET_ALL}"
    return line


def print_result(
    stdout: TextIO,
    stderr: TextIO,
    outcome: Outcome,
    colorize: bool = False,
) -> None:
    """Write the single report line for *outcome* to stdout or stderr.

    The stream is flushed straight away so stdout and stderr lines keep
    target order, and a failing write surfaces here rather than at exit.

    Raises:
        OSError: If writing to or flushing the stream fails.  Never swallowed.
    """
    if outcome.ok:
        stream = stdout
        stream.write(format_success(outcome) + "\n")
    else:
        stream = stderr
        stream.write(format_failure(outcome, colorize) + "\n")
    stream.flush()
