import enum
import functools
from typing import Any, Callable, TypeVar, cast

_FuncT = TypeVar('_FuncT', bound=Callable[..., Any])


class ErrorCode(enum.IntEnum):
    NONE = 0
    NOT_LIST = 1
    IS_LIST = 2
    NOT_RIFF = 3
    CORRUPT = 4
    CANT_OPEN = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.NONE: 'Success',
    ErrorCode.NOT_LIST: 'Requested list form from data chunk',
    ErrorCode.IS_LIST: 'Requested data form from list chunk',
    ErrorCode.NOT_RIFF: 'File does not begin with a RIFF chunk',
    ErrorCode.CORRUPT: 'Invalid or corrupt formatting',
    ErrorCode.CANT_OPEN: "Couldn't open file",
}


class RaffError(Exception):
    """Base class for codec failures.

    Each subclass carries the `ErrorCode` reported through `last_error()`.
    """

    code = ErrorCode.NONE

    def __init__(self, detail: str = '') -> None:
        message = self.code.message
        super().__init__(f'{message}: {detail}' if detail else message)
        self.detail = detail


class NotContainerFormat(RaffError):
    code = ErrorCode.NOT_RIFF


class CorruptFormat(RaffError):
    code = ErrorCode.CORRUPT


class NotAList(RaffError):
    code = ErrorCode.NOT_LIST


class IsAList(RaffError):
    code = ErrorCode.IS_LIST


class CannotOpenSource(RaffError):
    code = ErrorCode.CANT_OPEN


class CannotOpenSink(RaffError):
    code = ErrorCode.CANT_OPEN


class ContainerClosed(ValueError):
    def __init__(self) -> None:
        super().__init__('operation on a closed container')


# Process-wide, like errno. Not safe to share between threads.
_last_error = ErrorCode.NONE


def last_error() -> ErrorCode:
    """Return the code recorded by the most recent public operation."""
    return _last_error


def error_message() -> str:
    """Return the message associated with the last error code."""
    return _last_error.message


def set_last_error(code: ErrorCode) -> None:
    global _last_error
    _last_error = code


def reports_errors(func: _FuncT) -> _FuncT:
    """Record the outcome of `func` in the last-error state."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            result = func(*args, **kwargs)
        except RaffError as exc:
            set_last_error(exc.code)
            raise
        set_last_error(ErrorCode.NONE)
        return result

    return cast(_FuncT, wrapper)
