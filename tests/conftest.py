# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for the copilot_flow adapter."""

import pytest

from copilot_flow import FlowOptions, SilentErrorReporter, new_default

FAKE_TRACE = b"  File \"login.py\", line 12, in fake_login_check\n    f2.check(err, \"get user record\")\n"


@pytest.fixture
def untraced_options() -> FlowOptions:
    """Options that never capture stack traces."""
    return FlowOptions(capture_stack_on_check=False)


@pytest.fixture
def fake_trace_options() -> FlowOptions:
    """Options that attach a fixed, predictable trace on check."""
    return FlowOptions(capture_stack_on_check=True, trace_provider=lambda: FAKE_TRACE)


@pytest.fixture
def silent_reporter() -> SilentErrorReporter:
    """In-memory reporter for asserting what aborted flows report."""
    return SilentErrorReporter()


@pytest.fixture
def fake_login_check():
    """Simulated login routine exercising alternate flows."""

    def _login_check(input_err: bool, login_err: bool, system_err: bool):
        f1 = new_default("login check")
        f1.log_with_time("login from 192.169.111.222")
        if input_err:
            f2 = f1.flow("bad input")
            return f2.done("bad input")
        if system_err:
            f2 = f1.flow("database error")
            f2.log("flow diverted from login check")
            err = RuntimeError("database: generic database error")
            if f2.check(err, "get user record"):
                f2.log("critical: maybe logs can trigger certain handlers")
                return f2.abort("system")
        if login_err:
            return f1.done("bad login")
        return f1.done("login okay")

    return _login_check
