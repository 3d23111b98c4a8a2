# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Flow options and the factories that create root flows."""

import os
from dataclasses import dataclass
from typing import Callable

from .error_reporter import ErrorReporter
from .factory import create_error_reporter
from .flow import Flow
from .tracing import capture_stack

TraceProvider = Callable[[], bytes | None]

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_bool(value: bool | None, env_var: str, fallback: bool) -> bool:
    """Helper to pick an explicit value, then env var, then fallback."""
    if value is not None:
        return value
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == "":
        return fallback
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid boolean for {env_var}: {raw!r}. "
        f"Must be one of: {', '.join(_TRUE_VALUES + _FALSE_VALUES)}"
    )


@dataclass(frozen=True)
class FlowOptions:
    """Options for creating flows. Acts as a factory for root flows.

    Attributes:
        capture_stack_on_check: Capture a stack trace whenever ``check``
            records an error
        report_on_abort: Report the flow's human-readable text when
            ``abort`` is called
        trace_provider: Callable producing the trace attached by ``check``
        reporter: Where ``abort`` reports to; None means the error stream
    """
    capture_stack_on_check: bool = True
    report_on_abort: bool = False
    trace_provider: TraceProvider = capture_stack
    reporter: ErrorReporter | None = None

    def new(self, name: str) -> Flow:
        """Create a root flow.

        Args:
            name: Flow name. It does not need to be unique, although a naming
                convention per package is recommended.

        Returns:
            New Flow using these options
        """
        return Flow(name, self)

    def capture_trace(self) -> bytes | None:
        """Return a trace for ``check``, or None when capture is disabled."""
        if not self.capture_stack_on_check:
            return None
        return self.trace_provider()

    @classmethod
    def from_env(
        cls,
        capture_stack_on_check: bool | None = None,
        report_on_abort: bool | None = None,
        reporter_type: str | None = None,
        trace_provider: TraceProvider = capture_stack,
    ) -> "FlowOptions":
        """Build options from explicit values, then environment, then defaults.

        Environment variables:
            FLOW_CAPTURE_STACK: capture traces on check (default true)
            FLOW_REPORT_ON_ABORT: report when aborting (default false)
            FLOW_REPORTER: stderr, console or silent (default stderr)

        Raises:
            ValueError: If a boolean variable or the reporter type is invalid
        """
        return cls(
            capture_stack_on_check=_env_bool(capture_stack_on_check, "FLOW_CAPTURE_STACK", True),
            report_on_abort=_env_bool(report_on_abort, "FLOW_REPORT_ON_ABORT", False),
            trace_provider=trace_provider,
            reporter=create_error_reporter(reporter_type),
        )


DEFAULT_OPTIONS = FlowOptions(capture_stack_on_check=True, report_on_abort=False)

# Meant to report on abort, but kept identical to DEFAULT_OPTIONS until the
# intended behaviour is confirmed.
DEBUG_OPTIONS = FlowOptions(capture_stack_on_check=True, report_on_abort=False)


def new_default(name: str) -> Flow:
    """Create a flow that captures stack traces and does not report on abort."""
    return DEFAULT_OPTIONS.new(name)


def new_debug(name: str) -> Flow:
    """Create a debugging flow. Currently the same configuration as new_default."""
    return DEBUG_OPTIONS.new(name)


def new_flow(name: str) -> Flow:
    """Create a flow with the default options."""
    return new_default(name)
