from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class StatsAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def _accumulate(self, selector: Optional[Selector[T, N]] = None) -> Tuple[int, Optional[N]]:
        """sums the sequence left to right in one pass. returns (count, total), total is None when empty."""
        values = map(selector, self._seq) if selector else iter(self._seq)
        count, total = 0, None
        for value in values:
            # start from the first value rather than 0 so decimals and fractions keep their type
            total = value if count == 0 else total + value
            count += 1
        return count, total

    # --- aggregation ---

    def sum(self: 'StatsAccessor[N]', selector: Optional[Selector[T, N]] = None) -> N:
        """calc sum. the sum of nothing is undefined, so an empty sequence raises."""
        count, total = self._accumulate(selector)
        if count == 0: raise EmptySequenceError("cannot sum empty sequence")
        return total

    def sum_or_none(self: 'StatsAccessor[N]', selector: Optional[Selector[T, N]] = None,
                    default: Optional[N] = None) -> Optional[N]:
        """calc sum, or default for an empty sequence"""
        count, total = self._accumulate(selector)
        return total if count else default

    def average(self: 'StatsAccessor[N]', selector: Optional[Selector[T, N]] = None,
                default: Optional[float] = None) -> Optional[float]:
        """
        calc arithmetic mean as a float, or default for an empty sequence.
        total and count are gathered in the same pass, so a one-shot source is read once.
        """
        count, total = self._accumulate(selector)
        if count == 0: return default
        return float(total / count)

    # --- extrema ---
    # builtin min/max only replace the running best on a strict win, so ties keep the earlier element

    def min_or_none(self: 'StatsAccessor[C]', default: Optional[C] = None) -> Optional[C]:
        """smallest element by natural order"""
        return min(self._seq, default=default)

    def max_or_none(self: 'StatsAccessor[C]', default: Optional[C] = None) -> Optional[C]:
        """largest element by natural order"""
        return max(self._seq, default=default)

    def min_by_or_none(self, selector: Selector[T, C], default: Optional[T] = None) -> Optional[T]:
        """element with the smallest selector(element). selector runs once per element."""
        return min(self._seq, key=selector, default=default)

    def max_by_or_none(self, selector: Selector[T, C], default: Optional[T] = None) -> Optional[T]:
        """element with the largest selector(element). selector runs once per element."""
        return max(self._seq, key=selector, default=default)
