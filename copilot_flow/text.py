# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Formatting helpers shared by flow and labelled error rendering."""

from datetime import datetime, timezone

INDENT = "\t"


def indent(text: str, unit: str = INDENT) -> str:
    """Apply a hanging indent to multi-line text.

    The first line is left untouched so the text can follow a bullet marker;
    every following non-blank line is prefixed with one indent unit.

    Args:
        text: Text to indent
        unit: Indent unit (defaults to a tab)

    Returns:
        Indented text
    """
    lines = text.splitlines(keepends=True)
    if not lines:
        return text
    return lines[0] + "".join(unit + line if line.strip() else line for line in lines[1:])


def indent_block(text: str, unit: str = INDENT) -> str:
    """Prefix every non-blank line of text with one indent unit."""
    return "".join(unit + line if line.strip() else line for line in text.splitlines(keepends=True))


def timestamp(now: datetime | None = None) -> str:
    """Format a moment as an RFC3339 UTC timestamp (e.g. 2025-01-31T12:00:00Z).

    Args:
        now: Timezone-aware moment to format. Defaults to the current time.

    Returns:
        Timestamp string with second precision

    Raises:
        ValueError: If now is a naive datetime
    """
    if now is not None and now.utcoffset() is None:
        raise ValueError(f"timestamp requires a timezone-aware datetime, got {now!r}")
    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
