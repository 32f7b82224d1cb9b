"""Tests, suites, failure records and run summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .errors import ErrorCode, FrameworkError, set_error

InitializeFunc = Callable[[], int]
CleanupFunc = Callable[[], int]
TestFunc = Callable[[], None]
SetUpFunc = Callable[[], None]
TearDownFunc = Callable[[], None]


def _fail(code: ErrorCode) -> FrameworkError:
    set_error(code)
    return FrameworkError(code)


@dataclass(eq=False)
class Test:
    """A named test function that can be switched on or off."""

    name: str
    func: TestFunc
    active: bool = True


@dataclass(eq=False)
class Suite:
    """An ordered collection of tests with optional fixtures."""

    name: str
    init: Optional[InitializeFunc] = None
    cleanup: Optional[CleanupFunc] = None
    setup: Optional[SetUpFunc] = None
    teardown: Optional[TearDownFunc] = None
    active: bool = True
    tests: list[Test] = field(default_factory=list)
    tests_failed: int = 0
    tests_succeeded: int = 0

    def __iter__(self) -> Iterator[Test]:
        return iter(self.tests)

    def __len__(self) -> int:
        return len(self.tests)

    @property
    def number_of_tests(self) -> int:
        return len(self.tests)

    def add_test(self, name: str, func: TestFunc) -> Test:
        """Append a new active test.

        A duplicate name is still added, but the framework error is set
        to DUP_TEST; such a test is not reachable by name.
        """
        if name is None:
            raise _fail(ErrorCode.NO_TESTNAME)
        if func is None:
            raise _fail(ErrorCode.NOTEST)
        duplicate = any(t.name == name for t in self.tests)
        test = Test(name, func)
        self.tests.append(test)
        set_error(ErrorCode.DUP_TEST if duplicate else ErrorCode.SUCCESS)
        return test

    def get_test(self, name: str) -> Optional[Test]:
        """Return the first test with this name, or None."""
        if name is None:
            raise _fail(ErrorCode.NO_TESTNAME)
        set_error(ErrorCode.SUCCESS)
        return next((t for t in self.tests if t.name == name), None)

    def test_at(self, pos: int) -> Optional[Test]:
        """Return the test at a 1-based position, or None if out of range."""
        set_error(ErrorCode.SUCCESS)
        if 1 <= pos <= len(self.tests):
            return self.tests[pos - 1]
        return None

    def test_pos(self, test: Test) -> int:
        """Return the 1-based position of a test, or 0 if not present."""
        if test is None:
            raise _fail(ErrorCode.NOTEST)
        set_error(ErrorCode.SUCCESS)
        return next((i for i, t in enumerate(self.tests, 1) if t is test), 0)

    def test_pos_by_name(self, name: str) -> int:
        """Return the 1-based position of the first test named so, or 0."""
        if name is None:
            raise _fail(ErrorCode.NO_TESTNAME)
        set_error(ErrorCode.SUCCESS)
        return next((i for i, t in enumerate(self.tests, 1) if t.name == name), 0)


@dataclass
class FailureRecord:
    """One failed assertion or run-time failure."""

    line_number: int
    file_name: Optional[str]
    condition: Optional[str]
    test: Optional[Test] = None
    suite: Optional[Suite] = None


@dataclass
class RunSummary:
    """Counts gathered during a test run."""

    suites_run: int = 0
    suites_failed: int = 0
    suites_inactive: int = 0
    tests_run: int = 0
    tests_failed: int = 0
    tests_inactive: int = 0
    asserts: int = 0
    asserts_failed: int = 0
    failure_records: int = 0

    def tests_succeeded(self) -> int:
        """Tests run without failure."""
        return self.tests_run - self.tests_failed

    def asserts_succeeded(self) -> int:
        """Assertions that passed."""
        return self.asserts - self.asserts_failed