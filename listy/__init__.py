r"""
'     _ _     _
'    | (_)___| |_ _   _
'    | | / __| __| | | |
'    | | \__ \ |_| |_| |
'    |_|_|___/\__|\__, |
'                 |___/
"""

# expose the plain functions
from .functional import (
    all,
    any,
    filter,
    dropwhile,
    takewhile,
    partition,
    fold,
    sum,
    last,
    nth,
    nthtail,
    split,
    reverse,
    zip,
    duplicate,
    sequence,
    sort,
)

# expose the chainable wrapper
from .enumerable import Seq

# expose the factory functions
from .factories import (
    from_iterable,
    repeat,
    arithmetic,
    empty,
    listy,
    L,
)

# expose supporting types
from .types import (
    Partition,
    Split,
    Predicate,
    Comparator,
    FoldFunc,
)

from .logger import setup_logger

# define what `import *` does; note several names shadow builtins
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
    "Seq",
    "from_iterable",
    "repeat",
    "arithmetic",
    "empty",
    "listy",
    "L",
    "Partition",
    "Split",
    "Predicate",
    "Comparator",
    "FoldFunc",
    "setup_logger",
]
