from __future__ import annotations
import typing
import logging
from itertools import chain, islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


def _check_count(count: int, operation: str) -> None:
    if count < 0:
        raise ValueError(f"{operation} count must not be negative")


class _CoreOperations(Generic[T]):
    def where(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """filter elements based on a predicate"""
        from ..sequence import Seq
        return Seq(lambda: filter(predicate, self))

    def select(self: 'Seq[T]', selector: Selector[T, U]) -> 'Seq[U]':
        """project each element to a new form"""
        from ..sequence import Seq
        return Seq(lambda: map(selector, self))

    def take(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """take the first 'count' elements"""
        from ..sequence import Seq
        _check_count(count, "take")
        # islice stops pulling from the source once count items are out
        return Seq(lambda: islice(self, count))

    def skip(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """skip the first 'count' elements"""
        from ..sequence import Seq
        _check_count(count, "skip")
        return Seq(lambda: islice(self, count, None))

    def append(self: 'Seq[T]', element: T) -> 'Seq[T]':
        """appends a value to the end of the sequence"""
        return self.concat([element])

    def prepend(self: 'Seq[T]', element: T) -> 'Seq[T]':
        """adds a value to the beginning of the sequence"""
        from ..sequence import Seq
        return Seq(lambda: chain([element], self))

    def concat(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """
        yields every element of this sequence, then every element of other.
        neither side is touched until the result is iterated.
        """
        from ..sequence import Seq
        return Seq(lambda: chain(self, other))

    def __add__(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.concat(other)

    def __radd__(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        # reached for [1, 2] + seq, since list.__add__ refuses non-lists
        from ..sequence import Seq
        if not isinstance(other, Iterable):
            return NotImplemented
        return Seq(lambda: chain(other, self))

    def indexed(self: 'Seq[T]', start: int = 0) -> 'Seq[IndexedValue[T]]':
        """pair each element with its position, counting from start"""
        from ..sequence import Seq
        def indexed_source():
            for index, item in enumerate(self, start):
                yield IndexedValue(index, item)
        return Seq(indexed_source)

    def reversed(self: 'Seq[T]') -> 'Seq[T]':
        """
        inverts the order of the elements in a sequence.
        an arbitrary iterable can only be walked forwards, so the whole source is
        buffered into a list the first time the result is pulled.
        """
        from ..sequence import Seq
        def reversed_source():
            data = list(self)
            logger.debug("reversed() buffered %d elements", len(data))
            return reversed(data)
        return Seq(reversed_source)
