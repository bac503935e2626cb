from __future__ import annotations

import logging

from ..types import *
from ..types import _check_position

logger = logging.getLogger(__name__)


def last(seq: Iterable[T]) -> T:
    """final element of the sequence"""
    data = list(seq)
    if not data:
        logger.debug("last() called on an empty sequence")
        raise ValueError("sequence contains no elements")
    return data[-1]


def nth(seq: Iterable[T], n: int) -> T:
    """element at position n, counting from 1"""
    _check_position("n", n)
    data = list(seq)
    if n < 1 or n > len(data):
        logger.debug("nth(%d) out of range for length %d", n, len(data))
        raise IndexError(f"position {n} out of range 1..{len(data)}")
    return data[n - 1]


def nthtail(seq: Iterable[T], n: int) -> List[T]:
    """everything after the first n elements; empty once n reaches the length"""
    _check_position("n", n)
    if n < 0:
        logger.debug("nthtail(%d) with a negative count", n)
        raise IndexError(f"count must be non-negative, got {n}")
    return list(seq)[n:]


def split(seq: Iterable[T], n: int) -> Split:
    """(first n elements, remaining elements)"""
    _check_position("n", n)
    data = list(seq)
    if n < 0 or n > len(data):
        logger.debug("split(%d) out of range for length %d", n, len(data))
        raise IndexError(f"split point {n} out of range 0..{len(data)}")
    return Split(data[:n], data[n:])
