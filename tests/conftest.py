"""Shared test fixtures for chksum."""

import io
import re
from pathlib import Path

import pytest

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir and clear env vars that change behaviour."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("CHKSUM_CONFIG", "CHKSUM_COLOR", "CHKSUM_LOG_LEVEL", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small directory tree with files at two levels."""
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "b.txt").write_bytes(b"bravo")
    (root / "a.txt").write_bytes(b"alpha")
    (root / "sub" / "c.txt").write_bytes(b"charlie")
    return root


class BrokenStream(io.StringIO):
    """Text stream whose writes always fail."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()


@pytest.fixture(autouse=True)
def reset_chksum_logger():
    """Undo handlers and levels that cli.main() installs."""
    import logging

    import chksum.cli as cli_mod

    yield
    logger = logging.getLogger("chksum")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    cli_mod._stderr_handler = None
