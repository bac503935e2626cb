from __future__ import annotations
import typing
from .. import functional as fn
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


class _SeqOperations(Generic[T]):
    # --- sequence-returning, lazy ---

    def filter(self: 'Seq[T]', pred: Predicate[T]) -> 'Seq[T]':
        """keep elements satisfying pred"""
        from ..enumerable import Seq
        return Seq(lambda: fn.filter(self._get_data(), pred))

    def dropwhile(self: 'Seq[T]', pred: Predicate[T]) -> 'Seq[T]':
        """drop the leading run satisfying pred"""
        from ..enumerable import Seq
        return Seq(lambda: fn.dropwhile(self._get_data(), pred))

    def takewhile(self: 'Seq[T]', pred: Predicate[T]) -> 'Seq[T]':
        """keep the leading run satisfying pred"""
        from ..enumerable import Seq
        return Seq(lambda: fn.takewhile(self._get_data(), pred))

    def nthtail(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """everything after the first n elements"""
        from ..enumerable import Seq
        return Seq(lambda: fn.nthtail(self._get_data(), n))

    def reverse(self: 'Seq[T]') -> 'Seq[T]':
        """elements in the opposite order"""
        from ..enumerable import Seq
        return Seq(lambda: fn.reverse(self._get_data()))

    def zip(self: 'Seq[T]', other: Iterable[U], strict: bool = False) -> 'Seq[Tuple[T, U]]':
        """pair with another sequence, clamped to the shorter unless strict"""
        from ..enumerable import Seq
        return Seq(lambda: fn.zip(self._get_data(), other, strict=strict))

    def sort(self: 'Seq[T]', compare: Comparator[T]) -> 'Seq[T]':
        """order by compare(a, b), true when a belongs at or before b"""
        from ..enumerable import Seq
        return Seq(lambda: fn.sort(self._get_data(), compare))

    # --- pairs, eager ---
    # both halves come from one evaluation of the source

    def partition(self: 'Seq[T]', pred: Predicate[T]) -> Tuple['Seq[T]', 'Seq[T]']:
        """(matching, non-matching) as two sequences"""
        from ..factories import from_iterable
        selected, rejected = fn.partition(self._get_data(), pred)
        return from_iterable(selected), from_iterable(rejected)

    def split(self: 'Seq[T]', n: int) -> Tuple['Seq[T]', 'Seq[T]']:
        """(first n, rest) as two sequences"""
        from ..factories import from_iterable
        head, tail = fn.split(self._get_data(), n)
        return from_iterable(head), from_iterable(tail)

    # --- scalars, eager ---

    def all(self: 'Seq[T]', pred: Predicate[T]) -> bool:
        return fn.all(self._get_data(), pred)

    def any(self: 'Seq[T]', pred: Predicate[T]) -> bool:
        return fn.any(self._get_data(), pred)

    def fold(self: 'Seq[T]', f: FoldFunc[T, A], initial: A) -> A:
        """f(element, acc) over the sequence starting from initial"""
        return fn.fold(self._get_data(), f, initial)

    def sum(self: 'Seq[T]') -> T:
        return fn.sum(self._get_data())

    def nth(self: 'Seq[T]', n: int) -> T:
        """element at 1-based position n"""
        return fn.nth(self._get_data(), n)

    def last(self: 'Seq[T]') -> T:
        return fn.last(self._get_data())
