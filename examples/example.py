#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the copilot_flow module.

This script walks through a simulated login check and shows how flows
record errors, branch into alternate paths and render their reports.
"""

from copilot_flow import FlowOptions, create_error_reporter, label_error, new_default


def fake_login_check(input_err: bool, login_err: bool, system_err: bool):
    """Simulated login routine with an input branch and a database branch."""
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


def main():
    """Demonstrate flow functionality."""

    print("=" * 60)
    print("Copilot Flow Examples")
    print("=" * 60)
    print()

    # Example 1: Clean and alternate flows
    print("Example 1: Flows without recorded errors report success")
    print("-" * 60)
    print(f"normal login: {fake_login_check(False, False, False)}")
    print(f"bad input:    {fake_login_check(True, False, False)}")
    print()

    # Example 2: Aborted flow
    print("Example 2: Aborted flow, human-readable report")
    print("-" * 60)
    err = fake_login_check(False, False, True)
    print(label_error(err, "example").get_text())

    # Example 3: Compact form for plain exception consumers
    print("Example 3: Compact form")
    print("-" * 60)
    flow = FlowOptions(capture_stack_on_check=False).new("ingest")
    flow.log("fetched archive")
    if flow.must(False, "archive is not empty"):
        print(str(flow.done("ingest failed")))
    print()

    # Example 4: Reporting on abort
    print("Example 4: Abort reported to stderr")
    print("-" * 60)
    options = FlowOptions(
        capture_stack_on_check=False,
        report_on_abort=True,
        reporter=create_error_reporter("stderr"),
    )
    flow = options.new("parse")
    flow.check(ValueError("unexpected end of header"), "read headers")
    flow.abort("system")


if __name__ == "__main__":
    main()
