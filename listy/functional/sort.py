"""
Partition-based sort driven by a caller supplied ``compare(a, b)`` that is
true when ``a`` belongs at or before ``b``.

Each step picks the element at index ``len // 2`` as pivot, routes the
elements below the pivot index and then those above it into ``less``
(``compare(x, pivot)`` true) or ``greater``, and yields
``sort(less) + [pivot] + sort(greater)``.

The composition runs on an explicit work stack rather than Python recursion,
so a degenerate comparator or adversarial input costs O(n^2) comparisons but
never hits the interpreter recursion limit. The output is exactly what the
recursive formulation produces. Elements that compare equal to the pivot go
to ``greater``, so the sort is not stable.
"""

from __future__ import annotations

import logging

from ..types import *

logger = logging.getLogger(__name__)

_EMIT = 0
_SORT = 1


def _partition_around(data: List[T], compare: Comparator[T]) -> Tuple[List[T], T, List[T]]:
    pivot_index = len(data) // 2
    pivot = data[pivot_index]
    less: List[T] = []
    greater: List[T] = []
    # indices below the pivot first, then those above it
    for i in range(pivot_index):
        (less if compare(data[i], pivot) else greater).append(data[i])
    for i in range(pivot_index + 1, len(data)):
        (less if compare(data[i], pivot) else greater).append(data[i])
    return less, pivot, greater


def sort(seq: Iterable[T], compare: Comparator[T]) -> List[T]:
    """new list with the elements of seq ordered by compare"""
    result: List[T] = []
    # last in, first out: push greater, then the pivot, then less
    stack: List[Tuple[int, Any]] = [(_SORT, list(seq))]
    partitions = 0
    max_depth = 0

    while stack:
        max_depth = max(max_depth, len(stack))
        kind, payload = stack.pop()
        if kind == _EMIT:
            result.append(payload)
            continue
        if not payload:
            continue
        less, pivot, greater = _partition_around(payload, compare)
        partitions += 1
        stack.append((_SORT, greater))
        stack.append((_EMIT, pivot))
        stack.append((_SORT, less))

    logger.debug("sort: %d elements, %d partitions, max stack %d", len(result), partitions, max_depth)
    return result
