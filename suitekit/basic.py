"""Plain-text reporter that writes test run progress to a stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, TextIO

from .basic_format import format_failures
from .model import FailureRecord, Suite, Test

VERSION = "0.1.0"


class RunMode(Enum):
    """How much the basic reporter prints."""

    NORMAL = 0
    SILENT = 1
    VERBOSE = 2


@dataclass
class BasicReporter:
    """Run event handlers producing plain-text output."""

    mode: RunMode = RunMode.NORMAL
    out: Optional[TextIO] = None
    err: Optional[TextIO] = None
    _running_suite: Optional[Suite] = field(default=None, init=False, repr=False)

    @property
    def _out(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self.err if self.err is not None else sys.stderr

    def banner(self) -> None:
        """Begin a run: forget the current suite and print the banner unless silent."""
        self._running_suite = None
        if self.mode is not RunMode.SILENT:
            self._out.write(
                f"\n\n     suitekit - A unit testing framework - Version {VERSION}\n\n"
            )

    def report_missing_registry(self) -> None:
        """Report on the error stream that no registry exists, unless silent."""
        if self.mode is not RunMode.SILENT:
            self._err.write("\n\nFATAL ERROR - Test registry is not initialized.\n")

    def on_test_start(self, test: Test, suite: Suite) -> None:
        """In verbose mode, announce the test and, when it changes, the suite."""
        if self.mode is not RunMode.VERBOSE:
            return
        if self._running_suite is not suite:
            self._out.write(f"\nSuite: {suite.name}")
            self._running_suite = suite
        self._out.write(f"\n  Test: {test.name} ...")

    def on_test_complete(
        self,
        test: Test,
        suite: Suite,
        failures: Optional[Iterable[FailureRecord]],
    ) -> None:
        """Report the outcome of a test and list its failures."""
        records = list(failures or ())
        if not records:
            if self.mode is RunMode.VERBOSE:
                self._out.write("passed")
            return
        if self.mode is RunMode.VERBOSE:
            self._out.write("FAILED")
        elif self.mode is RunMode.NORMAL:
            self._out.write(f"\nSuite {suite.name}, Test {test.name} had failures:")
        if self.mode is not RunMode.SILENT:
            self._out.write(format_failures(records, indent="    "))

    def on_all_tests_complete(self, results_text: str) -> None:
        """Print the run results."""
        self._out.write(f"\n\n{results_text}\n")

    def on_suite_init_failure(self, suite: Suite) -> None:
        """Warn that a suite's initialization failed, unless silent."""
        if self.mode is not RunMode.SILENT:
            self._out.write(f"\nWARNING - Suite initialization failed for '{suite.name}'.")

    def on_suite_cleanup_failure(self, suite: Suite) -> None:
        """Warn that a suite's cleanup failed, unless silent."""
        if self.mode is not RunMode.SILENT:
            self._out.write(f"\nWARNING - Suite cleanup failed for '{suite.name}'.")