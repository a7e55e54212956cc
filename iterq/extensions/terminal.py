from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class TerminalAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._seq)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._seq)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later elements overwrite earlier ones with the same key."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._seq}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._seq)
        return sum(1 for x in self._seq if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. without a predicate, checks for at least one element."""
        if predicate is None:
            sentinel = object()
            return next(iter(self._seq), sentinel) is not sentinel
        return any(predicate(x) for x in self._seq)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        return all(predicate(x) for x in self._seq)

    def none(self, predicate: Predicate[T]) -> bool:
        """check that no element satisfies condition. true for an empty sequence."""
        return not self.any(predicate)
