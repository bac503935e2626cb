from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


class TerminalAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._seq._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._seq._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._seq._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._seq._get_data())

    def df(self) -> pd.DataFrame:
        """convert records or pairs to a pandas dataframe"""
        return pd.DataFrame(self._seq._get_data())

    def count(self, pred: Optional[Predicate[T]] = None) -> int:
        """count elements, or only those satisfying pred"""
        data = self._seq._get_data()
        if pred is None: return len(data)
        return sum(1 for x in data if pred(x))
