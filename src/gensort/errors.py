"""
Errors raised by the sort entry points.
"""

from __future__ import annotations

from typing import Any


class SortError(Exception):
    """Base class for every error raised by gensort."""


class InvalidRangeError(SortError, ValueError):
    """
    Raised when a half-open range [low, high) does not fit the sequence,
    or when a partition is asked to work on an empty range.
    """

    def __init__(
        self,
        message: str,
        *,
        low: int | None = None,
        high: int | None = None,
        length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.low = low
        self.high = high
        self.length = length


class ElementRangeError(SortError, ValueError):
    """
    Raised when the numeric sort meets a value that is not a signed 64-bit int.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.value = value
