from __future__ import annotations
import typing
from collections.abc import Sequence
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq


class AccessAccessor(Generic[T]):
    """
    null-safe element access. every lookup that could fail on an empty sequence,
    a missing match, an ambiguous match or a bad index returns `default`
    (None unless given) instead of raising.

    pass an explicit sentinel as `default` when the sequence itself may hold None
    and the two cases need telling apart.
    """
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    # --- positional ---

    def first_or_none(self, default: Optional[T] = None) -> Optional[T]:
        """first element, pulling nothing past it"""
        return next(iter(self._seq), default)

    def last_or_none(self, default: Optional[T] = None) -> Optional[T]:
        """last element. indexable sources are read from the end, anything else is scanned."""
        source = self._seq._source()
        if isinstance(source, Sequence):
            return source[-1] if len(source) > 0 else default
        result = default
        for item in source:
            result = item
        return result

    def single_or_none(self, default: Optional[T] = None) -> Optional[T]:
        """the only element, or default when there are zero or several"""
        iterator = iter(self._seq)
        sentinel = object()
        first = next(iterator, sentinel)
        if first is sentinel:
            return default
        # one more pull settles it, the rest of the source is never read
        if next(iterator, sentinel) is not sentinel:
            return default
        return first

    def element_at_or_none(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """element at a zero-based index. negative and out-of-range indexes give default."""
        if index < 0:
            return default
        source = self._seq._source()
        if isinstance(source, Sequence):
            return source[index] if index < len(source) else default
        for position, item in enumerate(source):
            if position == index:
                return item
        return default

    def index_of_or_none(self, value: Any, default: Optional[int] = None) -> Optional[int]:
        """position of the first element equal to value"""
        for index, item in enumerate(self._seq):
            if item == value:
                return index
        return default

    # --- predicate-driven ---

    def first_where_or_none(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """first element satisfying predicate. stops at the first match."""
        for item in self._seq:
            if predicate(item):
                return item
        return default

    def last_where_or_none(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """last element satisfying predicate. always scans the whole sequence."""
        result = default
        for item in self._seq:
            if predicate(item):
                result = item
        return result

    def single_where_or_none(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """the only element satisfying predicate, or default for zero or multiple matches"""
        found = False
        result = default
        for item in self._seq:
            if predicate(item):
                if found:
                    return default
                result, found = item, True
        return result
