from __future__ import annotations

from itertools import dropwhile as _dropwhile, takewhile as _takewhile

from ..types import *


def filter(seq: Iterable[T], pred: Predicate[T]) -> List[T]:
    """elements for which pred holds, in their original order"""
    return [x for x in seq if pred(x)]


def dropwhile(seq: Iterable[T], pred: Predicate[T]) -> List[T]:
    """
    drop the leading run of elements satisfying pred and return the rest.
    once an element fails pred, everything after it is kept untested.
    """
    return list(_dropwhile(pred, seq))


def takewhile(seq: Iterable[T], pred: Predicate[T]) -> List[T]:
    """longest prefix whose elements all satisfy pred"""
    return list(_takewhile(pred, seq))


def partition(seq: Iterable[T], pred: Predicate[T]) -> Partition:
    """split into (matching, non-matching), each keeping the original order"""
    selected: List[T] = []
    rejected: List[T] = []
    for item in seq:
        (selected if pred(item) else rejected).append(item)
    return Partition(selected, rejected)
