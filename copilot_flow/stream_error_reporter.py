# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Stream-based error reporter implementation."""

import sys
from typing import Any, TextIO

from .error_reporter import ErrorReporter, render_error


class StreamErrorReporter(ErrorReporter):
    """Error reporter that writes human-readable reports to a text stream.

    This is the reporter an aborting flow falls back to when none is
    configured. Without an explicit stream it writes to whatever
    ``sys.stderr`` is at the time of the report.
    """

    def __init__(self, stream: TextIO | None = None):
        """Initialize stream error reporter.

        Args:
            stream: Optional stream to write to (defaults to sys.stderr)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The stream reports are written to."""
        return self._stream if self._stream is not None else sys.stderr

    def report(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        """Write the error's human-readable text to the stream.

        Context is not written; a flow report already names its flow and label.

        Args:
            error: The error to report
            context: Ignored
        """
        stream = self.stream
        stream.write(render_error(error))
        stream.flush()
