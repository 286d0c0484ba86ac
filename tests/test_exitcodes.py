"""Tests for chksum.exitcodes: single and aggregate exit status."""

import pytest

from chksum.algorithms import Algorithm
from chksum.digest import Digest
from chksum.exitcodes import EXIT_IOERR, EXIT_OK, aggregate_exitcode, exitcode
from chksum.report import Outcome
from chksum.target import Target


def ok(name: str = "ok") -> Outcome:
    return Outcome(Target.from_path(name), digest=Digest(Algorithm.SHA2_256, b"\x00"))


def bad(name: str = "bad") -> Outcome:
    return Outcome(Target.from_path(name), error=FileNotFoundError(2, "No such file", name))


class TestConstants:
    def test_values(self):
        assert EXIT_OK == 0
        assert EXIT_IOERR == 74


class TestSingle:
    def test_ok(self):
        assert exitcode(ok()) == EXIT_OK

    def test_error(self):
        assert exitcode(bad()) == EXIT_IOERR

    def test_any_oserror_kind_same_code(self):
        o = Outcome(Target.stdin(), error=PermissionError(13, "Permission denied"))
        assert exitcode(o) == EXIT_IOERR


class TestAggregate:
    def test_all_ok(self):
        assert aggregate_exitcode([ok("a"), ok("b"), ok("c")]) == EXIT_OK

    def test_single_failure(self):
        assert aggregate_exitcode([bad()]) == EXIT_IOERR

    def test_later_failure_not_masked(self):
        assert aggregate_exitcode([ok(), ok(), bad()]) == EXIT_IOERR

    def test_earlier_failure_not_masked(self):
        assert aggregate_exitcode([bad(), ok(), ok()]) == EXIT_IOERR

    def test_generator_input(self):
        assert aggregate_exitcode(o for o in [ok(), bad()]) == EXIT_IOERR

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            aggregate_exitcode([])

    def test_consumes_every_outcome(self):
        produced = []

        def outcomes():
            for o in (bad("first"), ok("second"), ok("third")):
                produced.append(o.target.display())
                yield o

        assert aggregate_exitcode(outcomes()) == EXIT_IOERR
        assert produced == ["first", "second", "third"]
