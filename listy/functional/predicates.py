from __future__ import annotations

from ..types import *


def all(seq: Iterable[T], pred: Predicate[T]) -> bool:
    """true if pred holds for every element; vacuously true for an empty sequence"""
    for item in seq:
        if not pred(item):
            return False
    return True


def any(seq: Iterable[T], pred: Predicate[T]) -> bool:
    """true if pred holds for at least one element; false for an empty sequence"""
    for item in seq:
        if pred(item):
            return True
    return False
