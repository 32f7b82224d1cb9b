import io

import pytest

from suitekit.console_lists import list_suites, list_tests
from suitekit.errors import ErrorCode, FrameworkError
from suitekit.model import Suite
from suitekit.registry import Registry, cleanup_registry, set_registry


def _noop():
    pass


def _registry():
    reg = Registry()
    a = reg.add_suite("alpha", init=lambda: 0)
    a.add_test("one", _noop)
    a.add_test("two", _noop)
    b = reg.add_suite("beta", cleanup=lambda: 0)
    b.active = False
    return reg


def _suites_text(reg):
    out = io.StringIO()
    list_suites(reg, out)
    return out.getvalue()


def _tests_text(suite):
    out = io.StringIO()
    list_tests(suite, out)
    return out.getvalue()


def test_empty_registry_message():
    assert _suites_text(Registry()) == "\nNo suites are registered.\n"


def test_suite_listing_frame():
    text = _suites_text(_registry())
    assert text.startswith(
        "\n--------------------- Registered Suites -----------------------------"
    )
    assert text.endswith("Total Number of Suites : 2\n")


def test_suite_rows_content_and_alignment():
    lines = _suites_text(_registry()).split("\n")
    rows = [line for line in lines if line.lstrip()[:2] in ("1.", "2.")]
    assert len(rows) == 2
    assert "alpha" in rows[0] and "beta" in rows[1]
    assert len(rows[0]) == len(rows[1])
    assert rows[0].endswith("Yes")
    assert rows[1].endswith("No")
    header = next(line for line in lines if "Suite Name" in line)
    assert header.endswith("Active?")
    assert len(header) == len(rows[0]) + 1


def test_suite_name_truncated():
    reg = Registry()
    reg.add_suite("n" * 60)
    text = _suites_text(reg)
    assert "n" * 33 in text
    assert "n" * 34 not in text


def test_list_suites_uses_active_registry():
    reg = _registry()
    old = set_registry(reg)
    try:
        out = io.StringIO()
        list_suites(None, out)
        assert out.getvalue() == _suites_text(reg)
    finally:
        set_registry(old)


def test_list_suites_without_any_registry():
    old = set_registry(None)
    try:
        with pytest.raises(FrameworkError) as info:
            list_suites(None, io.StringIO())
        assert info.value.code is ErrorCode.NOREGISTRY
    finally:
        set_registry(old)
        if old is None:
            cleanup_registry()


def test_empty_suite_message():
    assert _tests_text(Suite("lonely")) == "\nSuite lonely contains no tests.\n"


def test_test_listing_frame():
    suite = _registry().suites[0]
    text = _tests_text(suite)
    assert text.startswith("\n----------------- Test List ------------------------------")
    assert "\nSuite: alpha\n" in text
    assert text.endswith("Total Number of Tests : 2\n")


def test_test_rows():
    suite = _registry().suites[0]
    suite.tests[1].active = False
    lines = _tests_text(suite).split("\n")
    rows = [line for line in lines if line.lstrip()[:2] in ("1.", "2.")]
    assert len(rows) == 2
    assert "one" in rows[0] and rows[0].endswith("Yes")
    assert "two" in rows[1] and rows[1].endswith("No")
    assert len(rows[0]) == len(rows[1])


def test_test_name_truncated():
    suite = Suite("s")
    suite.add_test("t" * 50, _noop)
    text = _tests_text(suite)
    assert "t" * 33 in text
    assert "t" * 34 not in text


def test_list_tests_without_suite():
    with pytest.raises(FrameworkError) as info:
        list_tests(None, io.StringIO())
    assert info.value.code is ErrorCode.NOSUITE