# suitekit

suitekit is a small unit-testing framework built around a **test registry**.
Tests are plain callables grouped into **suites**, and suites live in a
registry. Around the registry the package provides:

- plain-text reporting of run events (`suitekit.basic`)
- an interactive, menu-driven console session (`suitekit.console`)
- tabular listings of suites and tests, and failure listings

The package uses only the standard library.

## Installation

suitekit needs Python 3.10 or later. To run its own test suite, install the
`test` extra, which brings in pytest.

## Registering suites and tests

```python
from suitekit.registry import initialize_registry, add_suite, add_test


def init_suite():
    return 0


def clean_suite():
    return 0


def test_addition():
    ...


initialize_registry()
suite = add_suite("arithmetic", init_suite, clean_suite)
add_test(suite, "addition", test_addition)
```

`add_suite(name, init, cleanup, setup, teardown)` takes optional fixture
callables; all but the name default to `None`. Calling these functions
without an active registry raises `FrameworkError` with code `NOREGISTRY`.
A `None` name or test function also raises `FrameworkError`.

Lookup functions work against the active registry. Positions start at 1 and
follow the order of registration. A position or name that is not found gives
`None` (or `0` for the position functions):

- `get_suite(name)`
- `get_suite_at_pos(pos)`
- `get_suite_pos(suite)`
- `get_suite_pos_by_name(name)`
- `get_test(suite, name)`
- `get_test_at_pos(suite, pos)`
- `get_test_pos(suite, test)`
- `get_test_pos_by_name(suite, name)`

Duplicate names are allowed. The suite or test is still added, but the
framework error is set to `DUP_SUITE` or `DUP_TEST`, and a lookup by that
name finds the first one registered.

`Registry` objects have the same operations as methods (`add_suite`,
`get_suite`, `suite_at`, `suite_pos`, `suite_pos_by_name`,
`number_of_tests`), and `Suite` objects have `add_test`, `get_test`,
`test_at`, `test_pos` and `test_pos_by_name`. A registry can be built
separately with `create_new_registry()` and made active with
`set_registry(registry)`, which returns the one it replaced.
`cleanup_registry()` discards the active registry and
`registry_initialized()` tells whether one exists.

## Bulk registration

`suitekit.suiteinfo` lets you describe suites as data:

- `TestInfo(name, func)` describes one test.
- `SuiteInfo(name, init, cleanup, setup, teardown, tests)` describes one suite.
- `register_suites(suite_infos)` registers one collection in the active
  registry and returns the error code left by the last registration.
- `register_nsuites(*args)` registers several collections, ignores `None`
  arguments, and stops at the first collection that does not end with
  `SUCCESS`.

## Errors

`suitekit.errors` defines `ErrorCode` values (for example `NOREGISTRY`,
`NOSUITE`, `DUP_TEST`, `FOPEN_FAILED`) and keeps the most recent one:

- `get_error()` returns the most recent code and `get_error_msg()` its text.
- `error_description(code)` gives the text for any code; codes past the end
  of the table give `"Undefined Error"`.
- `set_error_action(action)` takes an `ErrorAction` (`IGNORE`, `FAIL`,
  `ABORT`). With `ABORT`, recording any code other than `SUCCESS` raises
  `FrameworkAbort`.

## Reporting

- `suitekit.model` holds `Test`, `Suite`, `FailureRecord` and `RunSummary`
  (with `tests_succeeded()` and `asserts_succeeded()`).
- `suitekit.basic.BasicReporter` prints run events to a stream in
  `RunMode.SILENT`, `NORMAL` or `VERBOSE`: a banner, test starts and
  outcomes, failures, and suite init/cleanup warnings.
- `suitekit.basic_format.show_failures(failures, out)` prints a numbered list
  of failures as `file:line  - condition`.
- `suitekit.console_lists.list_suites(registry, out)` and
  `list_tests(suite, out)` print the suites or tests as a table.
- `suitekit.console_reporter.show_failures(failures, out)` prints failures
  with their suite and test names; `ConsoleReporter` prints run progress.

## Interactive console

`suitekit.console.run_tests(registry, runner, stdin, stdout)` starts a
`ConsoleSession`. From its menus you can run all tests, select a suite and
run or toggle its tests, list suites and tests, toggle suites, show the
failures of the last run, and toggle the "inactive suites/tests treated as
runtime failures" option. End of input quits the session. With no registry
given, the active one is used; if there is none, a message goes to standard
error and the error is set to `NOREGISTRY`.

## What suitekit does not do

suitekit does not itself execute tests, track assertions or fill in
`RunSummary` counts. The console expects a runner object that you supply,
with `run_all(registry, reporter)`, `run_suite(suite, reporter)`,
`run_test(suite, test, reporter)`, a `failures` attribute and a
`fail_on_inactive` flag. The reporters are event handlers for such a runner
to call. suitekit has no command-line program, and it does not write XML
listings or result files.