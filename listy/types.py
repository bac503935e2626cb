from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')

Predicate = Callable[[T], bool]
# true iff the first argument belongs at or before the second
Comparator = Callable[[T, T], bool]
# called as f(element, accumulator)
FoldFunc = Callable[[T, A], A]


class Partition(NamedTuple):
    """result of partition(): elements that satisfied the predicate, then the rest"""
    selected: list
    rejected: list


class Split(NamedTuple):
    """result of split(): the first n elements and the remaining tail"""
    head: list
    tail: list


def _check_position(name: str, value: Any) -> int:
    """positions and counts must be real ints; bool is rejected on purpose"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value
