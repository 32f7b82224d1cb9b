"""Bulk registration of suites and tests from plain descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .errors import ErrorCode, get_error
from .model import CleanupFunc, InitializeFunc, SetUpFunc, TearDownFunc, TestFunc
from .registry import add_suite, add_test


@dataclass(frozen=True)
class TestInfo:
    """Name and function of a test to register."""

    __test__ = False  # keep test collectors from treating this as a test class

    name: str
    func: TestFunc


@dataclass(frozen=True)
class SuiteInfo:
    """A suite description: name, optional fixtures and its tests."""

    name: str
    init: Optional[InitializeFunc] = None
    cleanup: Optional[CleanupFunc] = None
    setup: Optional[SetUpFunc] = None
    teardown: Optional[TearDownFunc] = None
    tests: Sequence[TestInfo] = field(default_factory=tuple)


def register_suites(suite_infos: Optional[Iterable[SuiteInfo]]) -> ErrorCode:
    """Register every described suite and its tests in the active registry.

    Returns the framework error code left by the last registration, which
    is DUP_SUITE or DUP_TEST when a duplicate name was added. Failures to
    add a suite or test raise FrameworkError.
    """
    for info in suite_infos or ():
        suite = add_suite(info.name, info.init, info.cleanup, info.setup, info.teardown)
        for test in info.tests:
            add_test(suite, test.name, test.func)
    return get_error()


def register_nsuites(*args: Optional[Iterable[SuiteInfo]]) -> ErrorCode:
    """Register several collections of suite descriptions.

    None arguments are ignored. Registration stops after the first
    collection that does not finish with SUCCESS, and that code is returned.
    """
    result = ErrorCode.SUCCESS
    for suite_infos in args:
        if suite_infos is None:
            continue
        result = register_suites(suite_infos)
        if result is not ErrorCode.SUCCESS:
            break
    return result