"""
gensort
=======

In-place quicksort for signed 64-bit integers (``sort``) and for any type
implementing the ``Comparator`` and ``Copier`` contracts (``sort_gen``).

- The algorithm is in ``gensort/quicksort.py``.
- The capability contracts are in ``gensort/contracts.py``.
"""

from .contracts import Comparator, Copier, Ordering, Sortable, compare_keys
from .errors import ElementRangeError, InvalidRangeError, SortError
from .quicksort import (
    INT64_MAX,
    INT64_MIN,
    partition,
    partition_gen,
    quicksort,
    quicksort_gen,
    sort,
    sort_gen,
)

__version__ = "0.1.0"

__all__ = [
    "Comparator",
    "Copier",
    "ElementRangeError",
    "INT64_MAX",
    "INT64_MIN",
    "InvalidRangeError",
    "Ordering",
    "SortError",
    "Sortable",
    "compare_keys",
    "partition",
    "partition_gen",
    "quicksort",
    "quicksort_gen",
    "sort",
    "sort_gen",
]
