# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for LabelledError and label_error."""

import copy
import pickle

import pytest

from copilot_flow import LabelledError, Reportable, label_error


class TestLabelError:
    """Tests for the label_error helper."""

    def test_label_none_returns_none(self):
        """Test that labelling None yields None."""
        assert label_error(None, "L") is None

    @pytest.mark.parametrize("error", [
        ValueError("bad value"),
        KeyError("user"),
        RuntimeError(""),
    ])
    def test_label_prepends_to_message(self, error):
        """Test that the compact text is the label, a colon, then the error text."""
        labelled = label_error(error, "L")

        assert str(labelled) == "L: " + str(error)

    def test_label_has_no_flow_context(self):
        """Test that a directly labelled error has no flow name or trace."""
        labelled = label_error(ValueError("boom"), "L")

        assert labelled.flow_name == ""
        assert labelled.trace is None
        assert labelled.label == "L"


class TestLabelledError:
    """Tests for LabelledError rendering and accessors."""

    def test_is_exception_and_reportable(self):
        """Test that a labelled error composes with plain exception handling."""
        labelled = LabelledError(ValueError("boom"), "parse", flow_name="f")

        assert isinstance(labelled, Exception)
        assert isinstance(labelled, Reportable)

    def test_accessors(self):
        """Test that the label, flow name, error and trace are exposed."""
        error = ValueError("boom")
        labelled = LabelledError(error, "parse", flow_name="ingest", trace=b"trace")

        assert labelled.error is error
        assert labelled.label == "parse"
        assert labelled.flow_name == "ingest"
        assert labelled.trace == b"trace"

    def test_cause_is_wrapped_error(self):
        """Test that the wrapped error is chained as the cause."""
        error = ValueError("boom")

        assert LabelledError(error, "parse").__cause__ is error

    def test_human_text_without_trace(self):
        """Test the human form of a plain error without a trace."""
        labelled = LabelledError(ValueError("boom"), "parse")

        assert labelled.get_text() == "parse: boom\n"

    def test_human_text_with_trace(self):
        """Test that a captured trace follows the message, indented."""
        labelled = LabelledError(ValueError("boom"), "parse", trace=b"line one\nline two\n")

        assert labelled.get_text() == "parse: boom\n\tline one\n\tline two\n"

    def test_human_text_with_unterminated_trace(self):
        """Test that the report always ends with a newline."""
        labelled = LabelledError(ValueError("boom"), "parse", trace=b"only line")

        assert labelled.get_text() == "parse: boom\n\tonly line\n"

    def test_human_text_defers_to_reportable(self):
        """Test that a reportable inner error renders its own report."""
        inner = LabelledError(ValueError("boom"), "inner", trace=b"ignored by outer\n")
        outer = LabelledError(inner, "outer", trace=b"outer trace\n")

        assert outer.get_text() == "outer: inner: boom\n\tignored by outer\n"

    def test_compact_text_nests(self):
        """Test that nested labels stack in the compact form."""
        labelled = label_error(label_error(ValueError("boom"), "inner"), "outer")

        assert str(labelled) == "outer: inner: boom"

    def test_repr(self):
        """Test the debugging representation."""
        labelled = LabelledError(ValueError("boom"), "parse", flow_name="f")

        assert repr(labelled) == "LabelledError(label='parse', flow_name='f', error=ValueError('boom'))"


class TestLabelledErrorCopy:
    """Tests for copying and pickling labelled errors."""

    def test_copy(self):
        """Test that a shallow copy keeps every attribute."""
        error = ValueError("v")
        labelled = LabelledError(error, "L", flow_name="f", trace=b"t\n")

        copied = copy.copy(labelled)

        assert copied is not labelled
        assert copied.error is error
        assert copied.label == "L"
        assert copied.flow_name == "f"
        assert copied.trace == b"t\n"
        assert copied.__cause__ is error
        assert str(copied) == "L: v"

    def test_copy_label_error(self):
        """Test copying the result of label_error."""
        copied = copy.copy(label_error(ValueError("v"), "L"))

        assert str(copied) == "L: v"
        assert copied.flow_name == ""
        assert copied.trace is None

    def test_pickle_round_trip(self):
        """Test that a labelled error survives pickling."""
        labelled = LabelledError(ValueError("v"), "L", flow_name="f", trace=b"t\n")

        restored = pickle.loads(pickle.dumps(labelled))

        assert str(restored) == "L: v"
        assert restored.flow_name == "f"
        assert restored.get_text() == labelled.get_text()
        assert restored.__cause__ is restored.error
