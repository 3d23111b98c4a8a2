# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract reporting contract shared by flows and labelled errors."""

from abc import ABC, abstractmethod


class Reportable(ABC):
    """Abstract base class for errors that can describe themselves two ways.

    ``str()`` gives the compact, single-line form used wherever a plain
    exception message is expected. ``get_text()`` gives the indented,
    multi-line report meant for humans.
    """

    @abstractmethod
    def __str__(self) -> str:
        """Report the error in a compact, context-friendly format."""
        pass

    @abstractmethod
    def get_text(self) -> str:
        """Report the error in a human-readable format.

        Returns:
            Multi-line text terminated by a newline
        """
        pass
