# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logging-based error reporter implementation."""

import logging
from typing import Any

from .error_reporter import ErrorReporter, render_error

logger = logging.getLogger(__name__)


class ConsoleErrorReporter(ErrorReporter):
    """Error reporter that logs flow reports through Python's logging system.

    The first line of the report becomes the record's message; the full
    indented tree follows on the next lines, so any handler that prints
    records shows the whole flow. The report context is attached to the
    record as ``flow_context``.
    """

    def __init__(self, logger_name: str | None = None):
        """Initialize console error reporter.

        Args:
            logger_name: Optional logger name to use (defaults to module logger)
        """
        self.logger = logging.getLogger(logger_name) if logger_name else logger

    def report(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        """Log an error report at ERROR level.

        Args:
            error: The error to report
            context: Optional dictionary with additional context
        """
        text = render_error(error).rstrip("\n")
        flow_context = dict(context or {})
        suffix = ""
        if flow_context:
            suffix = " [" + ", ".join(f"{k}={v}" for k, v in flow_context.items()) + "]"

        self.logger.error(
            f"Flow report{suffix}:\n{text}",
            exc_info=error if error.__traceback__ is not None else None,
            extra={"flow_context": flow_context},
        )
