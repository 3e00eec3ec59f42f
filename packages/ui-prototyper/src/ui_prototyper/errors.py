"""Exceptions raised by the rendering pipeline.

Width measurement, padding and drawing never raise for implausible numbers;
they clamp instead. Only requests that cannot be interpreted at all (unknown
component kinds, unknown tools, malformed arguments) surface as errors.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for ui-prototyper errors."""


class InvalidRequestError(LayoutError):
    """A render request or tool call could not be interpreted."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidReferenceError(InvalidRequestError):
    """A batch component referenced a result that has not been produced."""

    def __init__(self, index: int, available: int) -> None:
        super().__init__(
            f"Reference to result {index} is out of range ({available} results available)",
            [f"index {index}"],
        )
        self.index = index
        self.available = available
