"""Helpers to add context to errors."""

from __future__ import annotations

from collections.abc import Callable


class WrappedError(Exception):
    """An error carrying a context message in front of its cause."""

    def __init__(self, msg: str, cause: BaseException) -> None:
        super().__init__(f"{msg}: {cause}")
        self.msg = msg
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self.__cause__  # type: ignore[return-value]


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def wrap(err: BaseException | None, msg: str) -> WrappedError | None:
    """Wrap ``err`` with ``msg``; ``None`` stays ``None``."""
    if err is None:
        return None
    return WrappedError(msg, err)


def wrapf(err: BaseException | None, fmt: str, *args: object) -> WrappedError | None:
    """Wrap ``err`` with a %-formatted message."""
    return wrap(err, _format(fmt, args))


def wrapper(msg: str) -> Callable[[BaseException | None], WrappedError | None]:
    """Return a function wrapping any error with ``msg``."""

    def _wrap(err: BaseException | None) -> WrappedError | None:
        return wrap(err, msg)

    return _wrap


def wrapperf(fmt: str, *args: object) -> Callable[[BaseException | None], WrappedError | None]:
    """Return a function wrapping any error with a %-formatted message."""
    return wrapper(_format(fmt, args))