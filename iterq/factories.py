import typing
from itertools import repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """
    wrap an iterable without copying it. lists, tuples and ranges can be walked
    again and again; generators and other one-shot iterators only once.
    """
    from .sequence import Seq
    return Seq(lambda: data)

def from_range(start: int, count: int) -> 'Seq[int]':
    """create seq from range"""
    from .sequence import Seq
    return Seq(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Seq[T]':
    """create seq with repeated item"""
    from .sequence import Seq
    return Seq(lambda: _repeat(item, count))

def empty() -> 'Seq[Any]':
    """create empty seq"""
    from .sequence import Seq
    return Seq(lambda: ())

def generate(generator_func: Callable[[], T], count: int) -> 'Seq[T]':
    """generate sequence by calling a function count times, on every walk"""
    from .sequence import Seq
    return Seq(lambda: (generator_func() for _ in range(count)))

# --- aliases ---
iterq = from_iterable
Q = from_iterable
q = from_iterable
