from __future__ import annotations
import typing
import operator
from collections import defaultdict
from itertools import batched
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class GroupingAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key, keeping first-seen group order and element order"""
        groups = defaultdict(list)
        for item in self._seq:
            groups[key_selector(item)].append(item)
        return dict(groups)

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements based on predicate"""
        true_items, false_items = [], []
        for item in self._seq:
            (true_items if predicate(item) else false_items).append(item)
        return true_items, false_items

    def chunked(self, size: int) -> 'Seq[List[T]]':
        """
        split into consecutive lists of `size` elements; the last one holds the remainder.
        size is checked here, before anything is iterated.
        """
        from ..sequence import Seq
        if isinstance(size, bool):
            raise TypeError("chunk size must be an int, got bool")
        # accepts any integer-like size, e.g. numpy.int64; floats raise TypeError here
        size = operator.index(size)
        if size <= 0:
            raise ValueError("chunk size must be positive")
        # batched yields tuples; lists keep chunks mutable for the caller
        return Seq(lambda: map(list, batched(self._seq, size)))
