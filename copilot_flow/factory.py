# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating error reporter instances."""

import os
from typing import TextIO

from .console_error_reporter import ConsoleErrorReporter
from .error_reporter import ErrorReporter
from .silent_error_reporter import SilentErrorReporter
from .stream_error_reporter import StreamErrorReporter


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def create_error_reporter(
    reporter_type: str | None = None,
    logger_name: str | None = None,
    stream: TextIO | None = None,
) -> ErrorReporter:
    """Create an error reporter based on type.

    Args:
        reporter_type: Type of reporter ("stderr", "console", "silent").
            Defaults to FLOW_REPORTER env or "stderr".
        logger_name: Logger name for console reporter (optional)
        stream: Stream for the stderr reporter (optional, defaults to sys.stderr)

    Returns:
        ErrorReporter instance

    Raises:
        ValueError: If reporter_type is unknown

    Example:
        >>> reporter = create_error_reporter("console", logger_name="login")
        >>> flow = FlowOptions(report_on_abort=True, reporter=reporter).new("login check")
    """
    reporter_type = _default(reporter_type, "FLOW_REPORTER", "stderr").lower()

    if reporter_type == "stderr":
        return StreamErrorReporter(stream=stream)
    elif reporter_type == "console":
        return ConsoleErrorReporter(logger_name=logger_name)
    elif reporter_type == "silent":
        return SilentErrorReporter()
    else:
        raise ValueError(
            f"Unknown reporter type: {reporter_type}. "
            f"Must be one of: stderr, console, silent"
        )
