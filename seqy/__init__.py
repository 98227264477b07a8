r"""
'     ___  ___  __ _ _   _
'    / __|/ _ \/ _` | | | |
'    \__ \  __/ (_| | |_| |
'    |___/\___|\__, |\__, |
'                 |_| |___/
"""

# expose the main class
from .adapter import SequenceAdapter

# expose the factory functions
from .factories import (
    of,
    from_iterable,
    from_range,
    repeat,
    empty,
    seq,
    S
)

# expose predicate and ordering helpers
from .predicates import where, where_equals, is_in, negate
from .ordering import natural, on_result_of, reversed_order

# expose the error taxonomy
from .errors import (
    SeqyError,
    InvalidArgumentError,
    EmptyCollectionError,
    NotFoundError
)

# define what `import *` does
__all__ = [
    "SequenceAdapter",
    "of",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "seq",
    "S",
    "where",
    "where_equals",
    "is_in",
    "negate",
    "natural",
    "on_result_of",
    "reversed_order",
    "SeqyError",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "NotFoundError"
]
