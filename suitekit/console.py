"""Interactive console interface for running and managing registered tests."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Protocol, TextIO

from .basic import VERSION
from .console_lists import list_suites, list_tests
from .console_reporter import ConsoleReporter, show_failures
from .errors import ErrorCode, set_error
from .model import FailureRecord, Suite, Test
from .registry import Registry, get_registry

_MAIN_TITLE = "***************** SUITEKIT CONSOLE - MAIN MENU ****************************"
_MAIN_OPTIONS = (
    "(R)un  (S)elect  (L)ist  (A)ctivate  (F)ailures  (O)ptions  (H)elp  (Q)uit"
)
_SUITE_TITLE = "***************** SUITEKIT CONSOLE - SUITE MENU *************************"
_SUITE_OPTIONS = (
    "(R)un (S)elect (L)ist (A)ctivate (F)ailures (U)p (O)ptions (H)elp (Q)uit"
)
_OPTIONS_TITLE = "***************** SUITEKIT CONSOLE - OPTIONS ************************"
_PROMPT = "Enter command: "

_MAIN_HELP = (
    "Commands:  R - run all tests in all suites",
    "           S - Select a suite to run or modify",
    "           L - List all registered suites",
    "           A - Activate or deactivate a suite (toggle)",
    "           F - Show failures from last test run",
    "           O - Set options",
    "           H - Show this help message",
    "           Q - Quit the application",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atol(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Status(Enum):
    """Outcome of a menu loop."""

    CONTINUE = 1
    MOVE_UP = 2
    STOP = 3


class Runner(Protocol):
    """What the console needs from a test runner."""

    fail_on_inactive: bool

    @property
    def failures(self) -> Iterable[FailureRecord]: ...

    def run_all(self, registry: Registry, reporter: ConsoleReporter) -> object: ...

    def run_suite(self, suite: Suite, reporter: ConsoleReporter) -> object: ...

    def run_test(self, suite: Suite, test: Test, reporter: ConsoleReporter) -> object: ...


@dataclass
class ConsoleSession:
    """Menu-driven session reading commands from a stream.

    End of input is treated as a request to quit.
    """

    registry: Registry
    runner: Runner
    stdin: Optional[TextIO] = None
    stdout: Optional[TextIO] = None
    reporter: ConsoleReporter = field(default_factory=ConsoleReporter)

    def __post_init__(self) -> None:
        if self.reporter.out is None:
            self.reporter.out = self._out

    @property
    def _in(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_command(self) -> Optional[str]:
        line = self._in.readline()
        if line == "":
            return None
        return line[:1].upper()

    def run(self) -> Status:
        """Run the main menu until the user quits."""
        status = Status.CONTINUE
        while status is Status.CONTINUE:
            self._write(f"\n\n{_MAIN_TITLE}\n{_MAIN_OPTIONS}\n{_PROMPT}")
            choice = self._read_command()
            if choice is None or choice == "Q":
                status = Status.STOP
            elif choice == "R":
                self.reporter.reset()
                self.runner.run_all(self.registry, self.reporter)
            elif choice == "S":
                suite = self.select_suite()
                if suite is not None:
                    self._write(f"Suite '{suite.name}' selected.\n")
                    if self.suite_menu(suite) is Status.STOP:
                        status = Status.STOP
                else:
                    self._write("\nSuite not found.\n")
            elif choice == "L":
                list_suites(self.registry, self._out)
            elif choice == "A":
                while (suite := self.select_suite()) is not None:
                    suite.active = not suite.active
            elif choice == "F":
                show_failures(self.runner.failures, self._out)
            elif choice == "O":
                self.options_menu()
            elif choice in ("H", "?"):
                self._write("\n" + "\n".join(_MAIN_HELP) + "\n")
        return status

    def select_suite(self) -> Optional[Suite]:
        """Ask for a suite number and return that suite, or None."""
        if self.registry.number_of_suites == 0:
            self._write("\nNo suites are registered.")
            return None
        list_suites(self.registry, self._out)
        self._write(
            f"\nEnter number of suite to select (1-{self.registry.number_of_suites}) : "
        )
        return self.registry.suite_at(_atol(self._in.readline()))

    def select_test(self, suite: Suite) -> Optional[Test]:
        """Ask for a test number in a suite and return that test, or None."""
        if suite.number_of_tests == 0:
            self._write(f"\nSuite {suite.name} contains no tests.")
            return None
        list_tests(suite, self._out)
        self._write(
            f"\nEnter number of test to select (1-{suite.number_of_tests}) : "
        )
        return suite.test_at(_atol(self._in.readline()))

    def suite_menu(self, suite: Suite) -> Status:
        """Run the menu for one suite; returns MOVE_UP or STOP."""
        status = Status.CONTINUE
        while status is Status.CONTINUE:
            self._write(f"\n{_SUITE_TITLE}\n{_SUITE_OPTIONS}\n{_PROMPT}")
            choice = self._read_command()
            if choice is None or choice == "Q":
                status = Status.STOP
            elif choice == "R":
                self.reporter.reset()
                self.runner.run_suite(suite, self.reporter)
            elif choice == "S":
                test = self.select_test(suite)
                if test is not None:
                    self.reporter.reset()
                    self.runner.run_test(suite, test, self.reporter)
                else:
                    self._write("\nTest not found.\n")
            elif choice == "L":
                list_tests(suite, self._out)
            elif choice == "A":
                while (test := self.select_test(suite)) is not None:
                    test.active = not test.active
            elif choice == "F":
                show_failures(self.runner.failures, self._out)
            elif choice in ("M", "U"):
                status = Status.MOVE_UP
            elif choice == "O":
                self.options_menu()
            elif choice in ("H", "?"):
                self._write(
                    "\n"
                    f"Commands:  R - run all tests in suite {suite.name}\n"
                    "           S - Select and run a test\n"
                    f"           L - List all tests registered in suite {suite.name}\n"
                    "           A - Activate or deactivate a test (toggle)\n"
                    "           F - Show failures from last test run\n"
                    "           M - Move up to main menu\n"
                    "           O - Set options\n"
                    "           H - Show this help message\n"
                    "           Q - Quit the application\n"
                )
        return status

    def options_menu(self) -> Status:
        """Let the user toggle options; returns MOVE_UP when done."""
        status = Status.CONTINUE
        while status is Status.CONTINUE:
            flag = "Yes" if self.runner.fail_on_inactive else "No"
            self._write(f"\n{_OPTIONS_TITLE}\n")
            self._write(
                f"   1 - Inactive suites/tests treated as runtime failures     {flag}"
            )
            self._write(
                "\n********************************************************************\n"
            )
            self._write("Enter number of option to change : ")
            line = self._in.readline()
            if line[:1] == "1":
                self.runner.fail_on_inactive = not self.runner.fail_on_inactive
            else:
                status = Status.MOVE_UP
        return status


def run_tests(
    registry: Optional[Registry],
    runner: Runner,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[Status]:
    """Start an interactive console session on a registry.

    The active registry is used when none is given. Without any registry
    a message goes to standard error, the framework error is set to
    NOREGISTRY and None is returned.
    """
    out = stdout if stdout is not None else sys.stdout
    out.write(f"\n\n     suitekit - A unit testing framework - Version {VERSION}\n")
    if registry is None:
        registry = get_registry()
    if registry is None:
        sys.stderr.write("\n\nFATAL ERROR - Test registry is not initialized.\n")
        set_error(ErrorCode.NOREGISTRY)
        return None
    return ConsoleSession(registry, runner, stdin, stdout).run()