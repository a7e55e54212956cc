r"""
'     __  __
'    |__||  |_ ___  _ __  __ _
'     __ |  __/ _ \| '__|/ _` |
'    |  ||  ||  __/| |  | (_| |
'    |__| \__\___| |_|   \__, |
'                           |_|
"""

import logging

# expose the main class
from .sequence import Seq

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    iterq,
    Q,
    q
)

# expose supporting types
from .types import (
    IndexedValue,
    EmptySequenceError
)

# library code never configures output on its own
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Seq",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "iterq",
    "Q",
    "q",
    "IndexedValue",
    "EmptySequenceError"
]
