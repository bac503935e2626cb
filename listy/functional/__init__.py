"""Functional list primitives for listy.

One plain function per operation. Every function is stateless and
side-effect-free: inputs are never mutated and sequence results are always
new lists, so they compose freely and are safe to call from any thread as
long as the supplied callbacks are.

Several names (``all``, ``any``, ``filter``, ``sum``, ``zip``) deliberately
match builtins; import the module rather than star-importing it.
"""

from .predicates import all, any
from .filtering import filter, dropwhile, takewhile, partition
from .reduction import fold, sum
from .access import last, nth, nthtail, split
from .structural import reverse, zip, duplicate, sequence
from .sort import sort

__all__ = [
    "all",
    "any",
    "filter",
    "dropwhile",
    "takewhile",
    "partition",
    "fold",
    "sum",
    "last",
    "nth",
    "nthtail",
    "split",
    "reverse",
    "zip",
    "duplicate",
    "sequence",
    "sort",
]
