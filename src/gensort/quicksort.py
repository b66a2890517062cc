"""
In-place partition sort (last element as pivot), numeric and generic.

Both paths share one skeleton: ``partition`` reorders ``a[low:high]`` around
the pivot ``a[high - 1]`` and returns the split index ``mid``; the driver then
sorts ``[low, mid - 1)`` and ``[mid, high)``. The pivot rests at ``mid - 1``
and is not visited again.

Pending ranges live on an explicit stack rather than the call stack, so a
strictly descending input of any length sorts without hitting the
interpreter's recursion limit. The smaller sub-range is always sorted first
and one-element ranges are never pushed, so at most about log2(n) ranges
are pending at once.

The sort is not stable.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence

from .contracts import Ordering, S
from .errors import ElementRangeError, InvalidRangeError

logger = logging.getLogger(__name__)


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def _check_range(a: MutableSequence, low: int, high: int) -> None:
    n = len(a)
    if not 0 <= low <= high <= n:
        raise InvalidRangeError(
            f"range [{low}, {high}) does not fit a sequence of length {n}",
            low=low,
            high=high,
            length=n,
        )


def _check_partition_range(a: MutableSequence, low: int, high: int) -> None:
    _check_range(a, low, high)
    if low == high:
        raise InvalidRangeError(
            f"cannot partition the empty range [{low}, {high})",
            low=low,
            high=high,
            length=len(a),
        )


def _check_int64(a: MutableSequence[int]) -> None:
    for i, v in enumerate(a):
        if isinstance(v, bool) or not isinstance(v, int):
            raise ElementRangeError(
                f"element {i} is not an int: {v!r}", index=i, value=v
            )
        if not INT64_MIN <= v <= INT64_MAX:
            raise ElementRangeError(
                f"element {i} does not fit in 64 bits: {v}", index=i, value=v
            )



def _partition(a: MutableSequence[int], low: int, high: int) -> int:
    pivot = a[high - 1]
    idx = low
    for j in range(low, high):
        if a[j] <= pivot:
            a[idx], a[j] = a[j], a[idx]
            idx += 1
    return idx


def _partition_gen(a: MutableSequence[S], low: int, high: int) -> int:
    pivot = a[high - 1].copy()
    idx = low
    for j in range(low, high - 1):
        if a[j].compare(pivot) != Ordering.GREATER:
            a[idx], a[j] = a[j], a[idx]
            idx += 1
    last = high - 1
    a[idx], a[last] = a[last], a[idx]
    return idx + 1


def partition(a: MutableSequence[int], low: int, high: int) -> int:
    """
    Partition ``a[low:high]`` around ``a[high - 1]``.

    Afterwards every element of ``a[low:mid - 1]`` is ``<=`` the pivot, the
    pivot sits at ``mid - 1`` and ``a[mid:high]`` holds the larger elements.
    Returns ``mid``.
    """
    _check_partition_range(a, low, high)
    return _partition(a, low, high)


def partition_gen(a: MutableSequence[S], low: int, high: int) -> int:
    """
    Generic counterpart of :func:`partition`.

    An element goes left of the pivot unless ``element.compare(pivot)``
    reports ``Ordering.GREATER``. The pivot is duplicated with ``copy()``
    before any swap and always ends at ``mid - 1``, even when the comparator
    is not reflexive.
    """
    _check_partition_range(a, low, high)
    return _partition_gen(a, low, high)



def _push_sub_ranges(stack_append, lo: int, mid: int, hi: int) -> None:
    small = (lo, mid - 1)
    large = (mid, hi)
    if small[1] - small[0] > large[1] - large[0]:
        small, large = large, small
    # larger first, so the smaller one is popped next
    for r_lo, r_hi in (large, small):
        if r_hi - r_lo > 1:
            stack_append((r_lo, r_hi))


def quicksort(a: MutableSequence[int], low: int, high: int) -> MutableSequence[int]:
    """Sort ``a[low:high]`` in place and return ``a``."""
    _check_range(a, low, high)

    stack = [(low, high)] if high - low > 1 else []
    stack_append = stack.append
    stack_pop = stack.pop
    partitions = 0
    peak = len(stack)

    while stack:
        lo, hi = stack_pop()
        mid = _partition(a, lo, hi)
        partitions += 1
        _push_sub_ranges(stack_append, lo, mid, hi)
        peak = max(peak, len(stack))

    logger.debug(
        "quicksort [%d, %d): %d partitions, %d pending ranges at most",
        low, high, partitions, peak,
    )
    return a


def quicksort_gen(a: MutableSequence[S], low: int, high: int) -> MutableSequence[S]:
    """Sort ``a[low:high]`` in place by ``compare`` and return ``a``."""
    _check_range(a, low, high)

    stack = [(low, high)] if high - low > 1 else []
    stack_append = stack.append
    stack_pop = stack.pop
    partitions = 0
    peak = len(stack)

    while stack:
        lo, hi = stack_pop()
        mid = _partition_gen(a, lo, hi)
        partitions += 1
        _push_sub_ranges(stack_append, lo, mid, hi)
        peak = max(peak, len(stack))

    logger.debug(
        "quicksort_gen [%d, %d): %d partitions, %d pending ranges at most",
        low, high, partitions, peak,
    )
    return a



def sort(a: MutableSequence[int]) -> MutableSequence[int]:
    """
    Sort signed 64-bit integers ascending, in place.

    Raises ``ElementRangeError`` before touching the sequence if any element
    is not an ``int`` in ``[INT64_MIN, INT64_MAX]``. Returns ``a`` itself.
    """
    _check_int64(a)
    logger.debug("sort: %d elements", len(a))
    return quicksort(a, 0, len(a))


def sort_gen(a: MutableSequence[S]) -> MutableSequence[S]:
    """
    Sort elements implementing ``Comparator`` and ``Copier``, in place.

    The result is ordered by the elements' own ``compare``. A comparator that
    is not a consistent order yields some permutation of the input; nothing
    is raised. Returns ``a`` itself.
    """
    logger.debug("sort_gen: %d elements", len(a))
    return quicksort_gen(a, 0, len(a))
