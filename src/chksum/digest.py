"""Digest computation for files, directories and streams.

A directory digest covers the contents of every regular file beneath it,
fed into one hash object in a stable order: entries of each directory are
visited sorted by name, recursing into subdirectories as they come.  Names
and metadata are not hashed, so an empty directory digests like empty input.

Every function here raises ``OSError`` when a target cannot be read; callers
decide whether that is fatal.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from chksum.algorithms import Algorithm
from chksum.target import Target, TargetKind

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536  # 64 KB read chunks


@dataclass(frozen=True)
class Digest:
    """A finished digest value."""

    algorithm: Algorithm
    value: bytes

    def hexdigest(self) -> str:
        """Lowercase fixed-width hex string."""
        return self.value.hex()

    def __str__(self) -> str:
        return self.hexdigest()

    def __format__(self, spec: str) -> str:
        if spec in ("", "x"):
            return self.hexdigest()
        raise ValueError(f"Unsupported format spec for Digest: {spec!r}")


def _update_from_stream(h, stream: BinaryIO) -> None:
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        h.update(chunk)


def _update_from_file(h, path: Path) -> None:
    with open(path, "rb") as f:
        _update_from_stream(h, f)


def _update_from_dir(h, path: Path) -> None:
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        entry_path = Path(entry.path)
        if entry.is_dir():
            _update_from_dir(h, entry_path)
        else:
            _update_from_file(h, entry_path)


def chksum_stream(algorithm: Algorithm, stream: BinaryIO) -> Digest:
    """Digest everything readable from a binary stream."""
    h = algorithm.new()
    _update_from_stream(h, stream)
    return Digest(algorithm, h.digest())


def chksum_file(algorithm: Algorithm, path: Path) -> Digest:
    """Digest a single file.

    Raises:
        FileNotFoundError: If path does not exist.
        IsADirectoryError: If path is a directory.
    """
    h = algorithm.new()
    _update_from_file(h, path)
    return Digest(algorithm, h.digest())


def chksum_dir(algorithm: Algorithm, path: Path) -> Digest:
    """Digest every file under a directory, in name order."""
    h = algorithm.new()
    _update_from_dir(h, path)
    return Digest(algorithm, h.digest())


def chksum_path(algorithm: Algorithm, path: Path) -> Digest:
    """Digest a file or a directory tree.

    Raises:
        FileNotFoundError: If path does not exist.
        PermissionError: If path or anything beneath it is unreadable.
    """
    if path.is_dir():
        return chksum_dir(algorithm, path)
    return chksum_file(algorithm, path)


def compute_digest(
    algorithm: Algorithm,
    target: Target,
    stdin: Optional[BinaryIO] = None,
) -> Digest:
    """Compute the digest for one target.

    Args:
        algorithm: Algorithm to use.
        target: What to hash.
        stdin: Byte stream backing a stdin target (defaults to
            ``sys.stdin.buffer``).

    Raises:
        OSError: If the target cannot be read.
    """
    logger.debug("Hashing %s with %s", target, algorithm.title)
    if target.kind is TargetKind.PATH:
        return chksum_path(algorithm, target.path)
    if target.kind is TargetKind.STDIN:
        return chksum_stream(algorithm, stdin if stdin is not None else sys.stdin.buffer)
    raise ValueError(f"Unknown target kind: {target.kind!r}")
