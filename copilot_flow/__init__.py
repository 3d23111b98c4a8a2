# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Copilot-for-Consensus Flow Adapter.

A small library for aggregating errors and notes into a tree of named flows,
and for rendering that tree as a compact error string or an indented,
human-readable report.

Example:
    >>> from copilot_flow import new_default
    >>>
    >>> flow = new_default("login check")
    >>> flow.log_with_time("login from 192.169.111.222")
    >>> branch = flow.flow("database error")
    >>> if branch.check(lookup_error, "get user record"):
    ...     print(branch.abort("system").get_text())
"""

__version__ = "0.1.0"

from .console_error_reporter import ConsoleErrorReporter
from .error_reporter import ErrorReporter
from .errors import AssertionFailure
from .factory import create_error_reporter
from .flow import Child, ErrorChild, Flow, FlowChild, NoteChild
from .labelled import LabelledError, label_error
from .options import (
    DEBUG_OPTIONS,
    DEFAULT_OPTIONS,
    FlowOptions,
    new_debug,
    new_default,
    new_flow,
)
from .reportable import Reportable
from .silent_error_reporter import SilentErrorReporter
from .stream_error_reporter import StreamErrorReporter
from .tracing import capture_stack, no_trace

__all__ = [
    # Version
    "__version__",
    # Flows
    "Flow",
    "FlowOptions",
    "DEFAULT_OPTIONS",
    "DEBUG_OPTIONS",
    "new_default",
    "new_debug",
    "new_flow",
    "Child",
    "ErrorChild",
    "FlowChild",
    "NoteChild",
    # Errors
    "Reportable",
    "LabelledError",
    "label_error",
    "AssertionFailure",
    # Trace providers
    "capture_stack",
    "no_trace",
    # Error Reporters
    "ErrorReporter",
    "StreamErrorReporter",
    "ConsoleErrorReporter",
    "SilentErrorReporter",
    "create_error_reporter",
]
