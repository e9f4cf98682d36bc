"""Small logging interface with null, standard and proxy implementations."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Logger(ABC):
    """Reports logging messages."""

    @abstractmethod
    def printf(self, fmt: str, *args: object) -> None:
        """Log a %-formatted message."""

    def println(self, *args: object) -> None:
        """Log the operands separated by spaces."""
        self.printf("%s", " ".join(str(a) for a in args))

    def err(self, error: BaseException | None) -> None:
        """Log ``error`` as a warning, if there is one."""
        if error is not None:
            self.printf("warning: %s", error)


class NullLogger(Logger):
    """A logger ignoring any input."""

    def printf(self, fmt: str, *args: object) -> None:
        return None

    def println(self, *args: object) -> None:
        return None

    def err(self, error: BaseException | None) -> None:
        return None


class StdLogger(Logger):
    """A logger writing lines to a stream, standard error by default."""

    def __init__(self, prefix: str = "", stream: TextIO | None = None) -> None:
        self.prefix = prefix
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def _output(self, message: str) -> None:
        if not message.endswith("\n"):
            message += "\n"
        self.stream.write(self.prefix + message)
        self.stream.flush()

    def printf(self, fmt: str, *args: object) -> None:
        self._output(fmt % args if args else fmt)

    def println(self, *args: object) -> None:
        self._output(" ".join(str(a) for a in args))

    def err(self, error: BaseException | None) -> None:
        if error is not None:
            self.printf("warning: %s", error)


class ProxyLogger(Logger):
    """Delegates to another logger, which may be swapped at runtime."""

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def printf(self, fmt: str, *args: object) -> None:
        self.logger.printf(fmt, *args)

    def println(self, *args: object) -> None:
        self.logger.println(*args)

    def err(self, error: BaseException | None) -> None:
        self.logger.err(error)