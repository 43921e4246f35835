"""Exceptions for journeyflow input loading and graph construction."""

from __future__ import annotations

from typing import Any


class JourneyInputError(Exception):
    """Journey data could not be turned into Journey records.

    Raised by the loader when the input is not a list of journeys, or
    when an entry has a missing path, non-string steps, or a bad count.
    The layout engine itself never raises for journey data.

    Attributes:
        index: Position of the offending entry, or None for the container
        entry: The offending value (may be None)
        message: Human-readable error message
    """

    def __init__(
        self,
        reason: str,
        index: int | None = None,
        entry: Any = None,
    ) -> None:
        self.reason = reason
        self.index = index
        self.entry = entry
        self.message = self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.index is None:
            return f"Invalid journey input: {self.reason}"
        return (
            f"Invalid journey at index {self.index}: {self.reason}\n\n"
            f"  -> Got: {self.entry!r}\n\n"
            f'How to fix: each journey must look like {{"path": ["/a", "/b"], "count": 3, "percentage": 12.5}}'
        )


class FlowGraphError(Exception):
    """A FlowGraph invariant would be broken.

    Raised when nodes or links are added directly in a way that breaks
    node identity uniqueness or the one-layer-forward link rule.
    """

    pass
