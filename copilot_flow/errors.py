# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions synthesized by flows."""

MUST_FAIL_MESSAGE = "flow.must fail"


class AssertionFailure(Exception):
    """Raised into a flow (never thrown) when a ``Flow.must`` condition is false."""

    def __init__(self, message: str = MUST_FAIL_MESSAGE):
        self.message = message
        super().__init__(message)
