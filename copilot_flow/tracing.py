# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Stack trace providers used when a flow checks an error."""

import os
import traceback

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def capture_stack() -> bytes:
    """Capture the current call stack.

    Frames belonging to this package are dropped, so the innermost frame of
    the trace is the code that called ``Flow.check``. The trace therefore
    shows where an error was checked, not where it was raised.

    Returns:
        The formatted stack, UTF-8 encoded
    """
    frames = [frame for frame in traceback.extract_stack() if not _is_internal(frame.filename)]
    return "".join(traceback.format_list(frames)).encode("utf-8")


def no_trace() -> bytes | None:
    """Trace provider that never captures anything."""
    return None
