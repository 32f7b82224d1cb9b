import io

from suitekit.console_reporter import ConsoleReporter, show_failures
from suitekit.model import FailureRecord, Suite


def _noop():
    pass


def test_show_failures_empty():
    out = io.StringIO()
    show_failures([], out)
    assert out.getvalue() == "\nNo failures.\n"


def test_show_failures_lists_each_with_names():
    suite = Suite("S")
    test = suite.add_test("T", _noop)
    failures = [
        FailureRecord(5, "f.c", "cond", test, suite),
        FailureRecord(9, None, None),
    ]
    out = io.StringIO()
    show_failures(failures, out)
    text = out.getvalue()
    assert "\n1. f.c:5 : (S : T) : cond" in text
    assert "\n2. :9 : ( : ) : " in text
    assert text.endswith(f"Total Number of Failures : {len(failures)}\n")


def test_suite_header_once_per_suite():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    suite = Suite("S")
    a = suite.add_test("a", _noop)
    b = suite.add_test("b", _noop)
    reporter.on_test_start(a, suite)
    reporter.on_test_start(b, suite)
    text = out.getvalue()
    assert text.count("Running Suite : S") == 1
    assert text.count("Running Test : ") == 2


def test_reset_reprints_suite_header():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    suite = Suite("S")
    a = suite.add_test("a", _noop)
    reporter.on_test_start(a, suite)
    reporter.reset()
    reporter.on_test_start(a, suite)
    assert out.getvalue().count("Running Suite : S") == 2


def test_test_complete_prints_nothing():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    suite = Suite("S")
    a = suite.add_test("a", _noop)
    reporter.on_test_complete(a, suite, [FailureRecord(1, "f", "c", a, suite)])
    assert out.getvalue() == ""


def test_all_complete_wraps_results():
    out = io.StringIO()
    ConsoleReporter(out).on_all_tests_complete("RESULTS")
    assert out.getvalue() == "\n\nRESULTS\n"


def test_suite_failure_warnings():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    suite = Suite("S")
    reporter.on_suite_init_failure(suite)
    reporter.on_suite_cleanup_failure(suite)
    text = out.getvalue()
    assert "WARNING - Suite initialization failed for 'S'." in text
    assert "WARNING - Suite cleanup failed for 'S'." in text