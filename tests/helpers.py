"""
Input builders and an int wrapper shared by the sort tests.
"""

import random

from gensort import Ordering


class Boxed:
    """An int behind the Comparator/Copier contracts."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def compare(self, other):
        return Ordering.of(self.value, other.value)

    def copy(self):
        return Boxed(self.value)

    def __repr__(self):
        return f"Boxed({self.value})"


def box(values):
    return [Boxed(v) for v in values]


def unbox(items):
    return [b.value for b in items]


def random_ints(n, low=-1_000_000, high=1_000_000):
    return [random.randint(low, high) for _ in range(n)]


def ascending(n):
    return list(range(n))


def descending(n):
    return list(range(n, 0, -1))


def alternating(n):
    """n, 1, n-1, 2, ... : zig-zag between the two ends."""
    out = []
    lo, hi = 1, n
    while len(out) < n:
        out.append(hi)
        if len(out) < n:
            out.append(lo)
        lo += 1
        hi -= 1
    return out


def few_distinct(n, distinct=3):
    pool = random.sample(range(-50, 50), distinct)
    return [random.choice(pool) for _ in range(n)]


INPUTS = {
    "random": random_ints,
    "ascending": ascending,
    "descending": descending,
    "alternating": alternating,
    "few_distinct": few_distinct,
}
