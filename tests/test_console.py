import io

from suitekit.console import ConsoleSession, Status, run_tests
from suitekit.errors import ErrorCode, get_error, set_error
from suitekit.model import FailureRecord
from suitekit.registry import Registry, set_registry


def _noop():
    pass


class FakeRunner:
    def __init__(self):
        self.calls = []
        self.failures = []
        self.fail_on_inactive = False

    def run_all(self, registry, reporter):
        self.calls.append(("all", registry))

    def run_suite(self, suite, reporter):
        self.calls.append(("suite", suite))

    def run_test(self, suite, test, reporter):
        self.calls.append(("test", suite, test))


def _registry():
    registry = Registry()
    suite = registry.add_suite("s1")
    suite.add_test("t1", _noop)
    suite.add_test("t2", _noop)
    registry.add_suite("empty")
    return registry


def _session(text, registry=None, runner=None):
    registry = registry or _registry()
    runner = runner or FakeRunner()
    out = io.StringIO()
    session = ConsoleSession(registry, runner, io.StringIO(text), out)
    return session, registry, runner, out


def test_quit_stops():
    session, _, runner, out = _session("q\n")
    assert session.run() is Status.STOP
    assert "Enter command: " in out.getvalue()
    assert runner.calls == []


def test_end_of_input_stops():
    session, _, _, _ = _session("")
    assert session.run() is Status.STOP


def test_run_all():
    session, registry, runner, _ = _session("r\nq\n")
    session.run()
    assert runner.calls == [("all", registry)]


def test_select_suite_and_run_it():
    session, registry, runner, out = _session("s\n1\nr\nu\nq\n")
    assert session.run() is Status.STOP
    assert runner.calls == [("suite", registry.suites[0])]
    assert "Suite 's1' selected." in out.getvalue()


def test_select_unknown_suite():
    session, _, _, out = _session("s\n9\nq\n")
    session.run()
    assert "Suite not found." in out.getvalue()


def test_activate_toggles_suite():
    session, registry, _, _ = _session("a\n1\n\nq\n")
    session.run()
    assert registry.suites[0].active is False
    assert registry.suites[1].active is True


def test_suite_menu_toggles_test_and_quits():
    session, registry, _, _ = _session("s\n1\na\n2\n\nq\n")
    assert session.run() is Status.STOP
    tests = registry.suites[0].tests
    assert [t.active for t in tests] == [True, False]


def test_suite_menu_runs_selected_test():
    session, registry, runner, _ = _session("s\n1\ns\n 2abc\nq\n")
    session.run()
    suite = registry.suites[0]
    assert runner.calls == [("test", suite, suite.tests[1])]


def test_select_test_in_empty_suite():
    session, registry, _, out = _session("")
    assert session.select_test(registry.suites[1]) is None
    assert "Suite empty contains no tests." in out.getvalue()


def test_options_toggle_fail_on_inactive():
    session, _, runner, _ = _session("o\n1\n\nq\n")
    session.run()
    assert runner.fail_on_inactive is True


def test_help_lists_commands():
    session, _, _, out = _session("h\nq\n")
    session.run()
    assert "Q - Quit the application" in out.getvalue()


def test_failures_are_shown():
    registry = _registry()
    suite = registry.suites[0]
    runner = FakeRunner()
    runner.failures = [FailureRecord(5, "f.py", "x == 1", suite.tests[0], suite)]
    session, _, _, out = _session("f\nq\n", registry, runner)
    session.run()
    assert "1. f.py:5 : (s1 : t1) : x == 1" in out.getvalue()


def test_run_tests_without_registry(capsys):
    old = set_registry(None)
    try:
        set_error(ErrorCode.SUCCESS)
        result = run_tests(None, FakeRunner(), io.StringIO("q\n"), io.StringIO())
        assert result is None
        assert get_error() is ErrorCode.NOREGISTRY
        assert "Test registry is not initialized" in capsys.readouterr().err
    finally:
        set_registry(old)
        set_error(ErrorCode.SUCCESS)


def test_run_tests_with_registry():
    registry = _registry()
    runner = FakeRunner()
    out = io.StringIO()
    assert run_tests(registry, runner, io.StringIO("r\nq\n"), out) is Status.STOP
    assert runner.calls == [("all", registry)]