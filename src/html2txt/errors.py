"""Diagnostics raised while converting a document."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class HtmlError(Exception):
    """A problem with the document, tied to the node that caused it."""

    def __init__(self, node: object, message: str) -> None:
        super().__init__(message)
        self.node = node
        self.message = message

    @property
    def line(self) -> Optional[int]:
        return getattr(self.node, "line", None)

    @property
    def column(self) -> Optional[int]:
        return getattr(self.node, "column", None)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"Line {self.line}: {self.message}"
        return f"Line {self.line}, column {self.column}: {self.message}"


class HtmlErrorHandler(Protocol):
    def warning(self, error: HtmlError) -> None:
        ...

    def error(self, error: HtmlError) -> None:
        ...

    def fatal_error(self, error: HtmlError) -> None:
        ...


class RaisingErrorHandler:
    def warning(self, error: HtmlError) -> None:
        raise error

    def error(self, error: HtmlError) -> None:
        raise error

    def fatal_error(self, error: HtmlError) -> None:
        raise error


class LoggingErrorHandler:
    """Log warnings and errors and keep going; only fatal errors abort."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def warning(self, error: HtmlError) -> None:
        self._log.warning("%s", error)

    def error(self, error: HtmlError) -> None:
        self._log.error("%s", error)

    def fatal_error(self, error: HtmlError) -> None:
        raise error


class CollectingErrorHandler:
    def __init__(self) -> None:
        self.warnings: list[HtmlError] = []
        self.errors: list[HtmlError] = []

    def warning(self, error: HtmlError) -> None:
        self.warnings.append(error)

    def error(self, error: HtmlError) -> None:
        self.errors.append(error)

    def fatal_error(self, error: HtmlError) -> None:
        raise error
