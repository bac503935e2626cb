from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _SeqOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base implementation ---

class _BaseSeq(ISeq[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, evaluating the source at most once"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        if not self._is_cached:
            return "Seq(<pending>)"
        return f"Seq({self._cached_result!r})"

# --- main class ---

class Seq(
    _BaseSeq[T],
    _SeqOperations[T]
):
    """a lazily evaluated, chainable wrapper over the listy.functional operations."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
