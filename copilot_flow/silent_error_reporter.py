# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory error reporter for tests."""

from typing import Any

from .error_reporter import ErrorReporter, render_error


class SilentErrorReporter(ErrorReporter):
    """Keeps every report in memory instead of writing it anywhere.

    Lets tests assert on what an aborted flow reported without touching the
    error stream.
    """

    def __init__(self):
        self.reported_errors: list[dict[str, Any]] = []

    def report(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        """Store the error, its rendered text and the context."""
        self.reported_errors.append({
            "error": error,
            "error_type": type(error).__name__,
            "text": render_error(error),
            "context": context or {},
        })

    def get_errors(self, error_type: str | None = None) -> list[dict[str, Any]]:
        """Return stored reports, optionally only those of one error type name."""
        if error_type:
            return [e for e in self.reported_errors if e["error_type"] == error_type]
        return self.reported_errors

    def has_errors(self) -> bool:
        return len(self.reported_errors) > 0

    def clear(self) -> None:
        self.reported_errors.clear()
