"""chksum configuration: loads ~/.chksum/config.yaml and env overrides.

The file is optional and only ever read.  Example::

    # ~/.chksum/config.yaml
    color: auto        # auto | always | never
    log_level: warning # debug | info | warning | error

Precedence, highest first: command-line flag, environment variable
(``CHKSUM_COLOR``, ``CHKSUM_LOG_LEVEL``), config file, built-in default.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from chksum.color import ColorMode
from chksum.errors import ConfigError, ConfigMissing, InvalidConfigValue
from chksum.paths import default_config_path

logger = logging.getLogger(__name__)

ENV_CONFIG = "CHKSUM_CONFIG"
ENV_COLOR = "CHKSUM_COLOR"
ENV_LOG_LEVEL = "CHKSUM_LOG_LEVEL"

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

KNOWN_KEYS = {"color", "log_level"}


@dataclass
class ChksumConfig:
    """Resolved configuration."""

    color: ColorMode = ColorMode.AUTO
    log_level: str = "warning"
    source: Optional[Path] = None  # file the values came from, if any

    @property
    def log_level_value(self) -> int:
        return LOG_LEVELS[self.log_level]


def _parse_color(raw: object, source: str) -> ColorMode:
    try:
        return ColorMode.parse(str(raw))
    except ValueError:
        raise InvalidConfigValue("color", raw, [m.value for m in ColorMode], source) from None


def _parse_log_level(raw: object, source: str) -> str:
    level = str(raw).strip().lower()
    if level not in LOG_LEVELS:
        raise InvalidConfigValue("log_level", raw, list(LOG_LEVELS), source)
    return level


def resolve_config_path(
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> tuple[Path, bool]:
    """Pick the config file to read.

    Returns ``(path, required)``; *required* is true when the user named the
    file (flag or env) and a missing file is therefore an error.
    """
    env = os.environ if environ is None else environ
    if explicit is not None:
        return explicit, True
    if env.get(ENV_CONFIG):
        return Path(env[ENV_CONFIG]).expanduser(), True
    return default_config_path(), False


def load_file(path: Path) -> dict:
    """Read and validate the YAML mapping in *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    for key in sorted(set(data) - KNOWN_KEYS):
        logger.debug("Ignoring unknown config key %r in %s", key, path)
    return data


def load_config(
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ChksumConfig:
    """Load config file (if any) and apply environment overrides.

    Raises:
        ConfigMissing: If an explicitly named file does not exist.
        ConfigError: If the file or an override holds an invalid value.
    """
    env = os.environ if environ is None else environ
    path, required = resolve_config_path(explicit, env)
    cfg = ChksumConfig()

    if path.is_file():
        data = load_file(path)
        source = str(path)
        if "color" in data:
            cfg.color = _parse_color(data["color"], source)
        if "log_level" in data:
            cfg.log_level = _parse_log_level(data["log_level"], source)
        cfg.source = path
    elif required:
        raise ConfigMissing(str(path))

    if env.get(ENV_COLOR):
        cfg.color = _parse_color(env[ENV_COLOR], ENV_COLOR)
    if env.get(ENV_LOG_LEVEL):
        cfg.log_level = _parse_log_level(env[ENV_LOG_LEVEL], ENV_LOG_LEVEL)

    return cfg
