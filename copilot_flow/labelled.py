# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Labelled error: an exception annotated with a label and flow context."""

from .reportable import Reportable
from .text import indent_block


class LabelledError(Reportable, Exception):
    """Wraps an error with a label, the name of the flow that recorded it and
    an optional stack trace.

    Instances are immutable once created. The wrapped error is also set as
    ``__cause__`` so a raised labelled error chains like any other exception.

    Example:
        >>> err = LabelledError(KeyError("user"), "get user record", flow_name="login")
        >>> str(err)
        "get user record: 'user'"
    """

    def __init__(
        self,
        error: BaseException,
        label: str,
        flow_name: str = "",
        trace: bytes | None = None,
    ):
        """Initialize labelled error.

        Args:
            error: The underlying error
            label: Label prepended to the error text
            flow_name: Name of the flow the error was checked into
            trace: Optional captured stack trace
        """
        super().__init__(error, label, flow_name, trace)
        self._error = error
        self._label = label
        self._flow_name = flow_name
        self._trace = trace
        self.__cause__ = error

    @property
    def error(self) -> BaseException:
        """The wrapped error."""
        return self._error

    @property
    def label(self) -> str:
        """The label given when the error was checked."""
        return self._label

    @property
    def flow_name(self) -> str:
        """Name of the originating flow (empty when not created by a flow)."""
        return self._flow_name

    @property
    def trace(self) -> bytes | None:
        """Captured stack trace, or None if none was captured."""
        return self._trace

    def __str__(self) -> str:
        return f"{self._label}: {self._error}"

    def __repr__(self) -> str:
        return f"LabelledError(label={self._label!r}, flow_name={self._flow_name!r}, error={self._error!r})"

    def get_text(self) -> str:
        """Report the error in a human-readable format.

        A reportable inner error (such as a flow) renders its own report after
        the label. Anything else renders its message, followed by the indented
        stack trace when one was captured.
        """
        if isinstance(self._error, Reportable):
            return f"{self._label}: {self._error.get_text()}"

        text = f"{self._label}: {self._error}\n"
        if self._trace is not None:
            block = indent_block(self._trace.decode("utf-8", errors="replace"))
            text += block if block.endswith("\n") else block + "\n"
        return text


def label_error(error: BaseException | None, label: str) -> LabelledError | None:
    """Prepend a label to an error.

    Args:
        error: Error to label, may be None
        label: Label to prepend

    Returns:
        A LabelledError with no flow context or trace, or None if error is None
    """
    if error is None:
        return None
    return LabelledError(error, label)
