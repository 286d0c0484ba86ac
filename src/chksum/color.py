"""Colour mode for failure lines.

The mode is resolved once per process into a plain boolean which is then
passed explicitly to the reporter.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Optional, TextIO

import colorama


class ColorMode(Enum):
    """When to colourise output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, raw: str) -> ColorMode:
        """Case-insensitive lookup; raises ValueError for anything else."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid color mode '{raw}' (expected one of: {choices})") from None

    def __str__(self) -> str:
        return self.value


def should_colorize(
    mode: ColorMode,
    stream: TextIO,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Decide whether lines written to *stream* get ANSI styling.

    ``auto`` honours ``NO_COLOR`` first, then ``FORCE_COLOR``, then falls
    back to whether *stream* is a terminal.
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    if env.get("FORCE_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def enable_ansi() -> None:
    """Let ANSI sequences through on legacy Windows consoles (no-op elsewhere)."""
    colorama.just_fix_windows_console()
