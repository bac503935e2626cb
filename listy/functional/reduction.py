from __future__ import annotations

import logging
import operator
from functools import reduce

from ..types import *

logger = logging.getLogger(__name__)


def fold(seq: Iterable[T], f: FoldFunc[T, A], initial: A) -> A:
    """
    left fold calling f(element, acc) on successive elements, starting
    with acc == initial. each call returns the accumulator for the next one.
    an empty sequence returns initial unchanged.
    """
    acc = initial
    for item in seq:
        acc = f(item, acc)
    return acc


def sum(seq: Iterable[T]) -> T:
    """e1 + e2 + ... + en using the elements' own addition, left to right"""
    data = list(seq)
    if not data:
        logger.debug("sum() called on an empty sequence")
        raise ValueError("sequence contains no elements")
    # reduce without a seed starts from data[0], so no zero element is needed
    return reduce(operator.add, data)
