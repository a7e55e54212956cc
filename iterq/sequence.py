from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.access import AccessAccessor
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    @abstractmethod
    def _source(self) -> Iterable[T]:
        """get a fresh view of the underlying source"""
        pass

# --- base sequence implementation ---

class _BaseSeq(ISeq[T]):
    def __init__(self, source_func: SourceFunc[T]):
        """init with a function that returns an iterable when called"""
        self._source_func = source_func

    def _source(self) -> Iterable[T]:
        """
        call the source function again. nothing is cached, so a seq over a list
        can be walked any number of times while a seq over a generator object is
        exhausted after one walk, same as the generator itself.
        """
        return self._source_func()

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

    def __reversed__(self) -> Iterator[T]:
        return iter(self.reversed())

# --- main sequence class ---

class Seq(
    _BaseSeq[T],
    _CoreOperations[T]
):
    """a fluent, lazy wrapper that adds null-safe and collection helpers to any iterable."""
    def __init__(self, source_func: SourceFunc[T]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.get = AccessAccessor(self)
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"Seq(source={self._source_func!r})"
