"""Supported digest algorithms.

A closed enumeration.  Whether a member can actually be used depends on the
running interpreter's ``hashlib`` (e.g. MD5 is missing from FIPS-restricted
OpenSSL builds), so the CLI only offers the algorithms that are available.
"""

from __future__ import annotations

import hashlib
from enum import Enum

from chksum.errors import UnsupportedAlgorithm


class Algorithm(Enum):
    """Digest algorithm, valued by its CLI subcommand name."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA2_224 = "sha2-224"
    SHA2_256 = "sha2-256"
    SHA2_384 = "sha2-384"
    SHA2_512 = "sha2-512"

    @property
    def hashlib_name(self) -> str:
        return _HASHLIB_NAMES[self]

    @property
    def title(self) -> str:
        """Human-readable name, e.g. ``SHA-2 256``."""
        return _TITLES[self]

    def is_available(self) -> bool:
        try:
            hashlib.new(self.hashlib_name)
        except ValueError:
            return False
        return True

    def new(self):
        """Return a fresh hashlib object for this algorithm.

        Raises:
            UnsupportedAlgorithm: If hashlib refuses the algorithm.
        """
        try:
            return hashlib.new(self.hashlib_name)
        except ValueError as e:
            raise UnsupportedAlgorithm(self.value, [a.value for a in available_algorithms()]) from e

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        """Look up an available algorithm by CLI name (case-insensitive)."""
        key = name.strip().lower()
        for algo in cls:
            if algo.value == key and algo.is_available():
                return algo
        raise UnsupportedAlgorithm(name, [a.value for a in available_algorithms()])


_HASHLIB_NAMES: dict[Algorithm, str] = {
    Algorithm.MD5: "md5",
    Algorithm.SHA1: "sha1",
    Algorithm.SHA2_224: "sha224",
    Algorithm.SHA2_256: "sha256",
    Algorithm.SHA2_384: "sha384",
    Algorithm.SHA2_512: "sha512",
}

_TITLES: dict[Algorithm, str] = {
    Algorithm.MD5: "MD5",
    Algorithm.SHA1: "SHA-1",
    Algorithm.SHA2_224: "SHA-2 224",
    Algorithm.SHA2_256: "SHA-2 256",
    Algorithm.SHA2_384: "SHA-2 384",
    Algorithm.SHA2_512: "SHA-2 512",
}


def available_algorithms() -> list[Algorithm]:
    """Algorithms usable in this interpreter, in declaration order."""
    return [algo for algo in Algorithm if algo.is_available()]
