# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract error reporter interface used by aborted flows."""

from abc import ABC, abstractmethod
from typing import Any

from .reportable import Reportable


class ErrorReporter(ABC):
    """Abstract base class for error reporting.

    A flow configured to report on abort hands its labelled error to a
    reporter. Reporters decide where the report goes (the error stream, the
    logging system, or memory for tests).
    """

    @abstractmethod
    def report(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        """Report an error with optional context.

        Args:
            error: The error to report
            context: Optional dictionary with additional context (flow, label, etc.)
        """
        pass


def render_error(error: BaseException) -> str:
    """Return the human-readable text for an error, newline terminated."""
    if isinstance(error, Reportable):
        return error.get_text()
    return f"{type(error).__name__}: {error}\n"
