"""Canonical directory names for chksum.

Single source of truth for the dot-directory name used by chksum.

Layout:
  ~/.chksum/              home_dir()      user configuration
  ~/.chksum/config.yaml   default_config_path()
"""

from __future__ import annotations

from pathlib import Path

DOT_DIR = ".chksum"
CONFIG_NAME = "config.yaml"


def home_dir() -> Path:
    """Return ~/.chksum/."""
    return Path.home() / DOT_DIR


def default_config_path() -> Path:
    """Return ~/.chksum/config.yaml (may not exist)."""
    return home_dir() / CONFIG_NAME
