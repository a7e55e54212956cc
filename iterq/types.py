from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple, Protocol
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
IndexedAction = Callable[[int, T], Any]
SourceFunc = Callable[[], Iterable[T]]


class SupportsRichComparison(Protocol):
    """anything ordered by `<` and `>`, e.g. int, str, tuple, datetime"""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


class SupportsAdd(Protocol):
    """anything that can be summed with `+`, e.g. int, float, Decimal, Fraction"""

    def __add__(self, other: Any) -> Any: ...


C = TypeVar('C', bound=SupportsRichComparison)
N = TypeVar('N', bound=SupportsAdd)


class IndexedValue(NamedTuple, Generic[T]):
    """an element paired with its zero-based position in the sequence"""
    index: int
    value: T


class EmptySequenceError(ValueError):
    """raised when an operation has no defined result for an empty sequence."""
    pass
