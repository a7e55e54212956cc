from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq


class UtilityAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Seq[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original seq to allow chaining.
        """
        for item in self._seq:
            action(item)
        return self._seq

    def for_each_indexed(self, action: IndexedAction[T]) -> None:
        """
        calls action(index, element) for every element, index counting from 0.
        eager, and returns nothing; use seq.indexed() for a lazy equivalent.
        """
        for index, item in enumerate(self._seq):
            action(index, item)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the seq object into an external function. enables custom, chainable operations.
        example: .pipe(render_table, title='scores')
        """
        return func(self._seq, *args, **kwargs)
