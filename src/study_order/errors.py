"""
Error types raised by study-order.
"""

from __future__ import annotations

from typing import Sequence


class StudyOrderError(Exception):
    """Base class for every fatal condition of a planning run."""


class ConfigurationError(StudyOrderError, ValueError):
    """A required input table is missing, unreadable or malformed."""


class CycleError(StudyOrderError, ValueError):
    """A unit transitively lists itself among its prerequisites."""

    def __init__(self, identifier: str, cycle: Sequence[str] = ()) -> None:
        self.identifier = identifier
        self.cycle = list(cycle)
        if self.cycle:
            detail = " -> ".join(self.cycle)
            message = f"Unit `{identifier}` depends on itself: {detail}"
        else:
            message = f"Unit `{identifier}` depends on itself."
        super().__init__(message)
