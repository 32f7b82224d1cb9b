"""Tabular listings of suites and tests for the console interface."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .errors import ErrorCode, FrameworkError, set_error
from .model import Suite
from .registry import Registry, get_registry

_YES = "Yes"
_NO = "No"
_NAME_WIDTH = 34


def _yes_no(flag: object) -> str:
    return _YES if flag else _NO


def _number_width(number: int) -> int:
    return len(str(number))


def _flag_width(label: str) -> int:
    return max(len(label), len(_YES), len(_NO)) + 1


def format_suites(registry: Registry) -> str:
    """Return the table of suites in a registry."""
    if registry.number_of_suites == 0:
        return "\nNo suites are registered.\n"

    w0 = _number_width(registry.number_of_suites) + 1
    w1 = _NAME_WIDTH
    w2 = _flag_width("Init?")
    w3 = _flag_width("Cleanup?")
    w4 = max(len("#Tests"), _number_width(registry.number_of_tests()) + 1) + 1
    w5 = _flag_width("Active?")

    parts = [
        "\n--------------------- Registered Suites -----------------------------",
        f"\n{'#':>{w0}}  {'Suite Name':<{w1}}{'Init?':>{w2}}{'Cleanup?':>{w3}}"
        f"{'#Tests':>{w4}}{'Active?':>{w5}}\n",
    ]
    for i, suite in enumerate(registry, 1):
        parts.append(
            f"\n{i:>{w0}}. {suite.name[: w1 - 1]:<{w1}}"
            f"{_yes_no(suite.init):>{w2 - 1}}"
            f"{_yes_no(suite.cleanup):>{w3}}"
            f"{suite.number_of_tests:>{w4}}"
            f"{_yes_no(suite.active):>{w5}}"
        )
    parts.append("\n---------------------------------------------------------------------\n")
    parts.append(f"Total Number of Suites : {registry.number_of_suites}\n")
    return "".join(parts)


def format_tests(suite: Suite) -> str:
    """Return the table of tests in a suite."""
    if suite.number_of_tests == 0:
        return f"\nSuite {suite.name} contains no tests.\n"

    w0 = _number_width(suite.number_of_tests) + 1
    w1 = _NAME_WIDTH
    w2 = _flag_width("Active?")

    parts = [
        "\n----------------- Test List ------------------------------",
        f"\nSuite: {suite.name}\n",
        f"\n{'#':>{w0}}  {'Test Name':<{w1}}{'Active?':>{w2}}\n",
    ]
    for i, test in enumerate(suite, 1):
        parts.append(
            f"\n{i:>{w0}}. {test.name[: w1 - 1]:<{w1}}{_yes_no(test.active):>{w2 - 1}}"
        )
    parts.append("\n----------------------------------------------------------\n")
    parts.append(f"Total Number of Tests : {suite.number_of_tests}\n")
    return "".join(parts)


def list_suites(registry: Optional[Registry] = None, out: Optional[TextIO] = None) -> None:
    """Write the suite table; the active registry is used when none is given."""
    if registry is None:
        registry = get_registry()
        if registry is None:
            set_error(ErrorCode.NOREGISTRY)
            raise FrameworkError(ErrorCode.NOREGISTRY)
    (out if out is not None else sys.stdout).write(format_suites(registry))


def list_tests(suite: Suite, out: Optional[TextIO] = None) -> None:
    """Write the table of tests in a suite."""
    if suite is None:
        set_error(ErrorCode.NOSUITE)
        raise FrameworkError(ErrorCode.NOSUITE)
    (out if out is not None else sys.stdout).write(format_tests(suite))