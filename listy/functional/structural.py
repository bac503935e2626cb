from __future__ import annotations

import builtins
import logging

from ..types import *
from ..types import _check_position

logger = logging.getLogger(__name__)


def reverse(seq: Iterable[T]) -> List[T]:
    """elements in the opposite order"""
    return list(reversed(list(seq)))


def zip(seq1: Iterable[T], seq2: Iterable[U], strict: bool = False) -> List[Tuple[T, U]]:
    """
    pair up elements positionally.
    the result is as long as the shorter input; with strict=True unequal
    lengths raise ValueError instead.
    """
    first, second = list(seq1), list(seq2)
    if strict and len(first) != len(second):
        logger.debug("zip(strict=True) length mismatch: %d vs %d", len(first), len(second))
        raise ValueError(f"sequences differ in length: {len(first)} != {len(second)}")
    return list(builtins.zip(first, second))


def duplicate(elem: T, n: int) -> List[T]:
    """n copies of elem"""
    _check_position("n", n)
    if n < 0:
        raise ValueError(f"cannot duplicate a negative number of times: {n}")
    return [elem] * n


def sequence(start: T, stop: T, increment: T) -> List[T]:
    """
    arithmetic progression from start, adding increment while the next value
    stays <= stop. start is always included, even when it already exceeds stop.

    increment may be any value addable to start (a timedelta for datetimes),
    but it has to move the progression upwards at every step; a float
    progression that stops advancing after rounding raises ValueError.
    """
    result = [start]
    current = start
    while True:
        nxt = current + increment
        if not nxt > current:
            logger.debug("sequence stalled at %r with increment %r", current, increment)
            raise ValueError(f"increment {increment!r} does not advance from {current!r}")
        if not nxt <= stop:
            return result
        current = nxt
        result.append(current)
