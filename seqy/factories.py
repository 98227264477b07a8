import typing
from itertools import repeat as itertools_repeat
from .types import *
from .errors import InvalidArgumentError, require_not_none

if typing.TYPE_CHECKING:
    from .adapter import SequenceAdapter

def of(*values: Any) -> 'SequenceAdapter[Any]':
    """
    wrap a sequence or a literal list of values.

    - of() is empty
    - of(iterable) wraps the iterable as-is; an adapter is handed back unchanged
    - of(v1, v2, ...) wraps the values in order

    a lone str, bytes or non-iterable argument counts as a single literal value.
    """
    from .adapter import SequenceAdapter
    if len(values) == 1:
        single = values[0]
        if single is None:
            raise InvalidArgumentError("sequence must not be None")
        if isinstance(single, SequenceAdapter):
            return single
        if isinstance(single, Iterable) and not isinstance(single, (str, bytes)):
            return SequenceAdapter(lambda: single)
    return SequenceAdapter(lambda: values)

def from_iterable(data: Iterable[T]) -> 'SequenceAdapter[T]':
    """wrap an iterable without any literal-value heuristics"""
    from .adapter import SequenceAdapter
    require_not_none(data, "data")
    if isinstance(data, SequenceAdapter):
        return data
    return SequenceAdapter(lambda: data)

def from_range(start: int, count: int) -> 'SequenceAdapter[int]':
    """create adapter over count consecutive ints starting at start"""
    from .adapter import SequenceAdapter
    return SequenceAdapter(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'SequenceAdapter[T]':
    """create adapter with repeated item"""
    from .adapter import SequenceAdapter
    return SequenceAdapter(lambda: itertools_repeat(item, count))

def empty() -> 'SequenceAdapter[Any]':
    """create empty adapter"""
    from .adapter import SequenceAdapter
    return SequenceAdapter(lambda: ())

# --- aliases ---
seq = of
S = from_iterable
