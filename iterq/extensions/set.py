from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq


def _identity(item):
    return item


class SetAccessor(Generic[T]):
    """
    order-preserving deduplication. both operations are lazy: the first element
    seen for each key is passed through as soon as it is pulled.
    """
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def distinct_by(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Seq[T]':
        """keep the first element for each key. without a selector the element is its own key."""
        from ..sequence import Seq
        select_key = key_selector if key_selector is not None else _identity

        def distinct_source():
            # one seen-set per iteration, so re-walking a list-backed result starts clean
            seen = set()
            for item in self._seq:
                key = select_key(item)
                if key not in seen:
                    seen.add(key)
                    yield item

        return Seq(distinct_source)

    def distinct(self) -> 'Seq[T]':
        """return distinct elements. preserves order of first appearance."""
        return self.distinct_by()
