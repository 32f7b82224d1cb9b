"""The test registry and the functions that manage the active registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .errors import ErrorCode, FrameworkError, set_error
from .model import (
    CleanupFunc,
    InitializeFunc,
    SetUpFunc,
    Suite,
    TearDownFunc,
    Test,
    TestFunc,
)


def _fail(code: ErrorCode) -> FrameworkError:
    set_error(code)
    return FrameworkError(code)


@dataclass(eq=False)
class Registry:
    """An ordered collection of suites."""

    suites: list[Suite] = field(default_factory=list)

    def __iter__(self) -> Iterator[Suite]:
        return iter(self.suites)

    def __len__(self) -> int:
        return len(self.suites)

    @property
    def number_of_suites(self) -> int:
        return len(self.suites)

    def number_of_tests(self) -> int:
        """Total number of tests in all suites."""
        return sum(len(suite) for suite in self.suites)

    def add_suite(
        self,
        name: str,
        init: Optional[InitializeFunc] = None,
        cleanup: Optional[CleanupFunc] = None,
        setup: Optional[SetUpFunc] = None,
        teardown: Optional[TearDownFunc] = None,
    ) -> Suite:
        """Append a new active suite.

        A duplicate name is still added, but the framework error is set
        to DUP_SUITE; such a suite is not reachable by name.
        """
        if name is None:
            raise _fail(ErrorCode.NO_SUITENAME)
        duplicate = any(s.name == name for s in self.suites)
        suite = Suite(name, init, cleanup, setup, teardown)
        self.suites.append(suite)
        set_error(ErrorCode.DUP_SUITE if duplicate else ErrorCode.SUCCESS)
        return suite

    def get_suite(self, name: str) -> Optional[Suite]:
        """Return the first suite with this name, or None."""
        if name is None:
            raise _fail(ErrorCode.NO_SUITENAME)
        set_error(ErrorCode.SUCCESS)
        return next((s for s in self.suites if s.name == name), None)

    def suite_at(self, pos: int) -> Optional[Suite]:
        """Return the suite at a 1-based position, or None if out of range."""
        set_error(ErrorCode.SUCCESS)
        if 1 <= pos <= len(self.suites):
            return self.suites[pos - 1]
        return None

    def suite_pos(self, suite: Suite) -> int:
        """Return the 1-based position of a suite, or 0 if not present."""
        if suite is None:
            raise _fail(ErrorCode.NOSUITE)
        set_error(ErrorCode.SUCCESS)
        return next((i for i, s in enumerate(self.suites, 1) if s is suite), 0)

    def suite_pos_by_name(self, name: str) -> int:
        """Return the 1-based position of the first suite named so, or 0."""
        if name is None:
            raise _fail(ErrorCode.NO_SUITENAME)
        set_error(ErrorCode.SUCCESS)
        return next((i for i, s in enumerate(self.suites, 1) if s.name == name), 0)


@dataclass
class _Active:
    registry: Optional[Registry] = None


_active = _Active()


def _require_registry() -> Registry:
    if _active.registry is None:
        raise _fail(ErrorCode.NOREGISTRY)
    return _active.registry


def _require_suite(suite: Optional[Suite]) -> Suite:
    _require_registry()
    if suite is None:
        raise _fail(ErrorCode.NOSUITE)
    return suite


def initialize_registry() -> None:
    """Replace the active registry with a new, empty one."""
    _active.registry = Registry()
    set_error(ErrorCode.SUCCESS)


def cleanup_registry() -> None:
    """Discard the active registry; may be called repeatedly."""
    _active.registry = None


def registry_initialized() -> bool:
    """Whether an active registry exists."""
    return _active.registry is not None


def get_registry() -> Optional[Registry]:
    """Return the active registry, or None if none is set."""
    return _active.registry


def set_registry(registry: Optional[Registry]) -> Optional[Registry]:
    """Make a registry the active one and return the one it replaced."""
    old = _active.registry
    _active.registry = registry
    return old


def create_new_registry() -> Registry:
    """Create an independent, empty registry."""
    return Registry()


def add_suite(
    name: str,
    init: Optional[InitializeFunc] = None,
    cleanup: Optional[CleanupFunc] = None,
    setup: Optional[SetUpFunc] = None,
    teardown: Optional[TearDownFunc] = None,
) -> Suite:
    """Add a suite to the active registry."""
    return _require_registry().add_suite(name, init, cleanup, setup, teardown)


def get_suite(name: str) -> Optional[Suite]:
    """Return the first suite in the active registry with this name."""
    return _require_registry().get_suite(name)


def get_suite_at_pos(pos: int) -> Optional[Suite]:
    """Return the suite at a 1-based position in the active registry."""
    return _require_registry().suite_at(pos)


def get_suite_pos(suite: Suite) -> int:
    """Return the 1-based position of a suite in the active registry, or 0."""
    return _require_registry().suite_pos(suite)


def get_suite_pos_by_name(name: str) -> int:
    """Return the 1-based position of the first suite named so, or 0."""
    return _require_registry().suite_pos_by_name(name)


def add_test(suite: Suite, name: str, func: TestFunc) -> Test:
    """Add a test to a suite; the active registry must exist."""
    return _require_suite(suite).add_test(name, func)


def get_test(suite: Suite, name: str) -> Optional[Test]:
    """Return the first test in a suite with this name, or None."""
    return _require_suite(suite).get_test(name)


def get_test_at_pos(suite: Suite, pos: int) -> Optional[Test]:
    """Return the test at a 1-based position in a suite, or None."""
    return _require_suite(suite).test_at(pos)


def get_test_pos(suite: Suite, test: Test) -> int:
    """Return the 1-based position of a test in a suite, or 0."""
    return _require_suite(suite).test_pos(test)


def get_test_pos_by_name(suite: Suite, name: str) -> int:
    """Return the 1-based position of the first test named so, or 0."""
    return _require_suite(suite).test_pos_by_name(name)