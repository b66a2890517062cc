"""
Capability contracts for the generic sort path.

An element type can be sorted by ``sort_gen`` when it provides two methods:

- ``compare(other)`` returning an :class:`Ordering`,
- ``copy()`` returning an independent duplicate.

Both contracts are structural (``typing.Protocol``): nothing needs to inherit
from them, and the sort never looks at element types at runtime.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Protocol, Self, TypeVar


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> Ordering:
        """Three-way ordering of two natively comparable values."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL


class Comparator(Protocol):
    def compare(self, other: Self) -> Ordering:
        ...


class Copier(Protocol):
    def copy(self) -> Self:
        ...


class Sortable(Comparator, Copier, Protocol):
    pass


S = TypeVar("S", bound=Sortable)
K = TypeVar("K")


def compare_keys(a: K, b: K, key: Callable[[K], Any]) -> Ordering:
    return Ordering.of(key(a), key(b))
