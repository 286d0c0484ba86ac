"""Hashing targets.

A target is one input unit for which a digest is computed:

- **path**: a file or directory on disk, displayed as the path itself
- **stdin**: the standard input stream, displayed as ``<stdin>``
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

STDIN_LABEL = "<stdin>"


class TargetKind(Enum):
    """Which input source a target names."""

    PATH = "path"
    STDIN = "stdin"


@dataclass(frozen=True)
class Target:
    """A single thing to hash."""

    kind: TargetKind
    raw: Optional[str] = None  # path text exactly as given

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Target:
        return cls(kind=TargetKind.PATH, raw=os.fspath(path))

    @property
    def path(self) -> Optional[Path]:
        """Path used for I/O; None for stdin."""
        return Path(self.raw) if self.raw is not None else None

    @classmethod
    def stdin(cls) -> Target:
        return cls(kind=TargetKind.STDIN)

    def display(self) -> str:
        """Label used in report lines."""
        if self.kind is TargetKind.PATH:
            return self.raw
        if self.kind is TargetKind.STDIN:
            return STDIN_LABEL
        raise ValueError(f"Unknown target kind: {self.kind!r}")

    def __str__(self) -> str:
        return self.display()
