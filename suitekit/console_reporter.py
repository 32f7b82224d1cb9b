"""Run event handlers and failure listing for the console interface."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, TextIO

from .model import FailureRecord, Suite, Test


def _stream(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


def show_failures(
    failures: Iterable[FailureRecord], out: Optional[TextIO] = None
) -> None:
    """Write the failures of the last run, with suite and test names."""
    stream = _stream(out)
    records = list(failures or ())
    if not records:
        stream.write("\nNo failures.\n")
        return
    stream.write("\n--------------- Test Run Failures -------------------------")
    stream.write("\n   src_file:line# : (suite:test) : failure_condition\n")
    for i, f in enumerate(records, 1):
        suite_name = f.suite.name if f.suite is not None and f.suite.name else ""
        test_name = f.test.name if f.test is not None and f.test.name else ""
        stream.write(
            f"\n{i}. {f.file_name or ''}:{f.line_number} : "
            f"({suite_name} : {test_name}) : {f.condition or ''}"
        )
    stream.write("\n-----------------------------------------------------------")
    stream.write(f"\nTotal Number of Failures : {len(records)}\n")


@dataclass
class ConsoleReporter:
    """Run event handlers that print progress for the console interface."""

    out: Optional[TextIO] = None
    _running_suite: Optional[Suite] = field(default=None, init=False, repr=False)

    def reset(self) -> None:
        """Forget the running suite before a new run."""
        self._running_suite = None

    def on_test_start(self, test: Test, suite: Suite) -> None:
        """Announce the test and, when it changes, the suite."""
        stream = _stream(self.out)
        if self._running_suite is not suite:
            stream.write(f"\nRunning Suite : {suite.name}")
            self._running_suite = suite
        stream.write(f"\n     Running Test : {test.name}")

    def on_test_complete(
        self,
        test: Test,
        suite: Suite,
        failures: Optional[Iterable[FailureRecord]],
    ) -> None:
        """Nothing is printed when a test completes."""

    def on_all_tests_complete(self, results_text: str) -> None:
        """Print the run results."""
        _stream(self.out).write(f"\n\n{results_text}\n")

    def on_suite_init_failure(self, suite: Suite) -> None:
        """Warn that a suite's initialization failed."""
        _stream(self.out).write(
            f"\nWARNING - Suite initialization failed for '{suite.name}'."
        )

    def on_suite_cleanup_failure(self, suite: Suite) -> None:
        """Warn that a suite's cleanup failed."""
        _stream(self.out).write(f"\nWARNING - Suite cleanup failed for '{suite.name}'.")