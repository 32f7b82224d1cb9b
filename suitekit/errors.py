"""Framework error codes, their descriptions and the global error state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Error codes reported by the framework."""

    SUCCESS = 0
    NOMEMORY = 1
    NOREGISTRY = 10
    REGISTRY_EXISTS = 11
    NOSUITE = 20
    NO_SUITENAME = 21
    SINIT_FAILED = 22
    SCLEAN_FAILED = 23
    DUP_SUITE = 24
    SUITE_INACTIVE = 25
    NOTEST = 30
    NO_TESTNAME = 31
    DUP_TEST = 32
    TEST_NOT_IN_SUITE = 33
    TEST_INACTIVE = 34
    FOPEN_FAILED = 40
    FCLOSE_FAILED = 41
    BAD_FILENAME = 42
    WRITE_ERROR = 43


class ErrorAction(Enum):
    """What the framework does when an error is recorded."""

    IGNORE = 0
    FAIL = 1
    ABORT = 2


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "No Error.",
    ErrorCode.NOMEMORY: "Memory allocation failed.",
    ErrorCode.NOREGISTRY: "Test registry does not exist.",
    ErrorCode.REGISTRY_EXISTS: "Registry already exists.",
    ErrorCode.NOSUITE: "NULL suite not allowed.",
    ErrorCode.NO_SUITENAME: "Suite name cannot be NULL.",
    ErrorCode.SINIT_FAILED: "Suite initialization function failed.",
    ErrorCode.SCLEAN_FAILED: "Suite cleanup function failed.",
    ErrorCode.DUP_SUITE: "Suite having name already registered.",
    ErrorCode.SUITE_INACTIVE: "Requested suite is not active.",
    ErrorCode.NOTEST: "NULL test or test function not allowed.",
    ErrorCode.NO_TESTNAME: "Test name cannot be NULL.",
    ErrorCode.DUP_TEST: "Test having this name already in suite.",
    ErrorCode.TEST_NOT_IN_SUITE: "Test not registered in specified suite.",
    ErrorCode.TEST_INACTIVE: "Requested test is not active",
    ErrorCode.FOPEN_FAILED: "Error opening file.",
    ErrorCode.FCLOSE_FAILED: "Error closing file.",
    ErrorCode.BAD_FILENAME: "Bad file name.",
    ErrorCode.WRITE_ERROR: "Error during write to file.",
}

_UNDEFINED = "Undefined Error"
_MAX_INDEX = 44  # codes above the last defined slot share the undefined text


def error_description(code: int) -> str:
    """Return the message for an error code.

    Negative codes map to the success message, codes past the table to
    "Undefined Error", and unused codes inside the table to "".
    """
    value = int(code)
    if value < 0:
        return _DESCRIPTIONS[ErrorCode.SUCCESS]
    if value >= _MAX_INDEX:
        return _UNDEFINED
    try:
        return _DESCRIPTIONS[ErrorCode(value)]
    except ValueError:
        return ""


class FrameworkError(Exception):
    """Raised when a framework operation fails."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        super().__init__(message if message is not None else error_description(code))


class FrameworkAbort(FrameworkError):
    """Raised when an error is recorded while the action is ABORT."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(
            code, f"Aborting due to error #{int(code)}: {error_description(code)}"
        )


@dataclass
class _ErrorState:
    code: ErrorCode = ErrorCode.SUCCESS
    action: ErrorAction = ErrorAction.IGNORE


_state = _ErrorState()


def set_error(code: ErrorCode) -> None:
    """Record the current framework error.

    Raises FrameworkAbort if the code is not SUCCESS and the action is ABORT.
    """
    code = ErrorCode(code)
    if code is not ErrorCode.SUCCESS and _state.action is ErrorAction.ABORT:
        raise FrameworkAbort(code)
    _state.code = code


def get_error() -> ErrorCode:
    """Return the most recently recorded error code."""
    return _state.code


def get_error_msg() -> str:
    """Return the message for the most recently recorded error code."""
    return error_description(_state.code)


def set_error_action(action: ErrorAction) -> None:
    """Set how the framework reacts to recorded errors."""
    _state.action = ErrorAction(action)


def get_error_action() -> ErrorAction:
    """Return the current error action."""
    return _state.action