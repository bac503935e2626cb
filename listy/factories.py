import typing
from .types import *
from . import functional as fn

if typing.TYPE_CHECKING:
    from .enumerable import Seq

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """create a sequence from an iterable, copied once up front"""
    from .enumerable import Seq
    # materialize now so one-shot iterators behave like lists
    items = list(data)
    return Seq(lambda: list(items))

def repeat(elem: T, n: int) -> 'Seq[T]':
    """n copies of elem"""
    from .enumerable import Seq
    return Seq(lambda: fn.duplicate(elem, n))

def arithmetic(start: T, stop: T, increment: T) -> 'Seq[T]':
    """arithmetic progression from start up to stop"""
    from .enumerable import Seq
    return Seq(lambda: fn.sequence(start, stop, increment))

def empty() -> 'Seq[Any]':
    """create empty sequence"""
    from .enumerable import Seq
    return Seq(lambda: [])

# --- aliases ---
listy = from_iterable
L = from_iterable
