# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Flow: a named accumulator of errors, sub-flows and notes.

A flow represents the path a program took through one logical operation. The
caller checks errors into it as work proceeds, branches into child flows on
significant conditional paths, logs notes, and finally calls ``done`` or
``abort`` to collapse the tree into a single error (or None).

Example:
    >>> flow = new_default("login check")
    >>> flow.log_with_time("login from 192.169.111.222")
    >>> if flow.check(lookup_error, "get user record"):
    ...     return flow.abort("system")
    >>> return flow.done("login okay")
"""

import logging
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import AssertionFailure
from .labelled import LabelledError
from .reportable import Reportable
from .stream_error_reporter import StreamErrorReporter
from .text import INDENT, indent, timestamp

if TYPE_CHECKING:
    from datetime import datetime

    from .options import FlowOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorChild:
    """An error recorded with ``add`` or ``check``."""
    error: BaseException


@dataclass(frozen=True)
class FlowChild:
    """A child flow spawned with ``Flow.flow``."""
    flow: "Flow"


@dataclass(frozen=True)
class NoteChild:
    """A free-text note recorded with ``log``."""
    text: str


Child = ErrorChild | FlowChild | NoteChild


class Flow(Reportable, Exception):
    """Flow of a program, for error reporting and analytics.

    Children are kept in a single list in the order they were recorded, which
    is the order they are rendered in. Only errors recorded directly on a flow
    make it fail; errors inside child flows never bubble up on their own.

    A flow is not thread-safe. Concurrent sub-operations should each use
    their own child flow.
    """

    def __init__(self, name: str, options: "FlowOptions"):
        """Initialize flow.

        Use ``FlowOptions.new`` or one of the presets rather than calling this
        directly.

        Args:
            name: Flow name; does not need to be unique
            options: Options shared with every child flow
        """
        super().__init__(name)
        self.name = name
        self.options = options
        self._children: list[Child] = []
        self._errors: list[BaseException] = []
        self._flows: list[Flow] = []
        self._notes: list[str] = []
        self._parent: weakref.ref[Flow] | None = None

    @property
    def children(self) -> tuple[Child, ...]:
        """All children in the order they were recorded."""
        return tuple(self._children)

    @property
    def errors(self) -> tuple[BaseException, ...]:
        """Errors recorded directly on this flow."""
        return tuple(self._errors)

    @property
    def flows(self) -> tuple["Flow", ...]:
        """Child flows spawned from this flow."""
        return tuple(self._flows)

    @property
    def notes(self) -> tuple[str, ...]:
        """Notes logged on this flow."""
        return tuple(self._notes)

    @property
    def parent(self) -> "Flow | None":
        """The flow this one was spawned from, if it is still alive."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def failed(self) -> bool:
        """True if at least one error was recorded directly on this flow."""
        return len(self._errors) > 0

    def _add_error(self, error: BaseException) -> None:
        self._errors.append(error)
        self._children.append(ErrorChild(error))
        logger.debug(f"Flow {self.name} recorded error: {error}")

    def add(self, error: BaseException | None) -> bool:
        """Record an error as-is, without a label.

        Args:
            error: Error to record, may be None

        Returns:
            True if an error was recorded, False if error was None
        """
        if error is None:
            return False
        self._add_error(error)
        return True

    def check(self, error: BaseException | None, label: str) -> bool:
        """Record an error under a label, if there is one.

        The error is wrapped in a LabelledError carrying this flow's name and,
        when the options enable it, a stack trace of the checking call site.

        Args:
            error: Result of the operation being checked, may be None
            label: Describes the operation that failed

        Returns:
            True if an error was recorded, False if error was None
        """
        if error is None:
            return False
        trace = self.options.capture_trace()
        self._add_error(LabelledError(error, label, flow_name=self.name, trace=trace))
        return True

    def must(self, condition: bool, message: str) -> bool:
        """Assert a condition.

        Note the polarity: the return value is True when the assertion
        FAILED, so it reads like ``check``:

            if flow.must(user is not None, "user exists"):
                return flow.done("bad login")

        Args:
            condition: Condition expected to hold
            message: Label recorded when it does not

        Returns:
            True if the condition was false and a failure was recorded
        """
        if not condition:
            self.check(AssertionFailure(), message)
            return True
        return False

    def log(self, note: str) -> None:
        """Add a note that appears in reports. Notes never make a flow fail."""
        self._notes.append(note)
        self._children.append(NoteChild(note))

    def log_with_time(self, note: str, now: "datetime | None" = None) -> None:
        """Add a note stamped with the current UTC time.

        Args:
            note: Note text
            now: Optional timezone-aware moment to stamp instead of the current time
        """
        self.log(f"{note} @{timestamp(now)}")

    def flow(self, name: str) -> "Flow":
        """Spawn a child flow.

        Call this on any significant conditional block, that is any code that
        could be considered an alternative flow in a use case diagram. The
        child shares this flow's options. Its result is not folded back
        automatically; pass the child's ``done`` result to ``add`` or
        ``check`` on this flow to propagate it.

        Args:
            name: Name of the child flow

        Returns:
            The new child flow
        """
        child = self.options.new(name)
        child._parent = weakref.ref(self)
        self._flows.append(child)
        self._children.append(FlowChild(child))
        return child

    def done(self, label: str) -> LabelledError | None:
        """End the flow normally.

        Child flows are not checked for errors.

        Args:
            label: Label describing the outcome

        Returns:
            None if no errors were recorded on this flow, otherwise the flow
            wrapped in a LabelledError
        """
        if not self._errors:
            return None
        return LabelledError(self, label, flow_name=self.name)

    def abort(self, label: str) -> LabelledError:
        """End the flow because of a system error.

        The flow is always reported as an error, even when nothing was
        recorded on it. If the options ask for it, the report is handed to
        the configured reporter (the error stream by default) before
        returning.

        Args:
            label: Label describing why the flow was aborted

        Returns:
            The flow wrapped in a LabelledError
        """
        error = LabelledError(self, label, flow_name=self.name)
        logger.debug(f"Flow {self.name} aborted: {label}")
        if self.options.report_on_abort:
            reporter = self.options.reporter or StreamErrorReporter()
            reporter.report(error, context={"flow": self.name, "label": label})
        return error

    def __str__(self) -> str:
        """Report a compact, context-friendly error string."""
        parts = []
        for child in self._children:
            match child:
                case ErrorChild(error=error):
                    parts.append(str(error))
                case FlowChild(flow=flow):
                    parts.append(str(flow))
                case NoteChild(text=text):
                    parts.append(f"note({text})")
        return f"flow({self.name}): {{{';'.join(parts)}}}"

    def __repr__(self) -> str:
        return f"Flow(name={self.name!r}, errors={len(self._errors)}, children={len(self._children)})"

    def __reduce__(self):
        """Support copy and pickle.

        The parent link is not carried over. Child flows restored together
        with their parent are linked back to it in ``__setstate__``.
        """
        state = dict(self.__dict__)
        state["_parent"] = None
        return (self.__class__, (self.name, self.options), state)

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        self._children = list(self._children)
        self._errors = list(self._errors)
        self._flows = list(self._flows)
        self._notes = list(self._notes)
        for child in self._flows:
            if child.parent is None:
                child._parent = weakref.ref(self)

    def get_text(self) -> str:
        """Report a detailed, human-readable error string."""
        bullets = []
        for child in self._children:
            match child:
                case ErrorChild(error=Reportable() as error) | FlowChild(flow=error):
                    bullets.append(_bullet(indent(error.get_text())))
                case ErrorChild(error=error):
                    bullets.append(_bullet(f"error: {indent(str(error))}"))
                case NoteChild(text=text):
                    bullets.append(_bullet(f"log: {text}"))
        if not bullets:
            return f"Flow {self.name}: (nothing to report)\n"
        return f"Flow {self.name}:\n" + "".join(bullets)


def _bullet(text: str) -> str:
    line = f"{INDENT}- {text}"
    return line if line.endswith("\n") else line + "\n"
