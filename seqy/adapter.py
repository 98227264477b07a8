from __future__ import annotations

from itertools import zip_longest
from .types import *
from .errors import require_not_none
from . import predicates

# --- operation mixins ---
from .extensions.filtering import _FilterOperations
from .extensions.transform import _TransformOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor
from .extensions.grouping import _GroupingOperations

_MISSING = object()

# --- base adapter implementation ---

class _BaseAdapter(Generic[T]):
    def __init__(self, data_func: DataFunc[T]):
        """init with a function that returns the backing iterable when called"""
        self._data_func = require_not_none(data_func, "data_func")

    def _get_source(self) -> Iterable[T]:
        """the backing iterable as handed out by the data function, never cached"""
        return self._data_func()

    def _iter_data(self) -> Iterator[T]:
        """a fresh iterator over the elements, re-running every lazy link"""
        return iter(self._data_func())

    def __iter__(self) -> Iterator[T]:
        return self._iter_data()

# --- main adapter class ---

class SequenceAdapter(
    _BaseAdapter[T],
    _FilterOperations[T],
    _TransformOperations[T],
    _TerminalOperations[T],
    _GroupingOperations[T]
):
    """
    an immutable, chainable wrapper around any iterable.

    filtering and projection links are lazy views re-evaluated on every traversal,
    sorting snapshots the sequence when called, and terminal operations traverse on demand.
    conversions always hand back fresh containers.
    """

    # predicate combinators, also available at module level in seqy.predicates
    where = staticmethod(predicates.where)
    where_equals = staticmethod(predicates.where_equals)

    def __init__(self, data_func: DataFunc[T]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @classmethod
    def of(cls, *values: Any) -> 'SequenceAdapter[Any]':
        """see seqy.factories.of"""
        from .factories import of
        return of(*values)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, (str, bytes)) or not isinstance(other, Iterable):
            return NotImplemented
        return all(a == b for a, b in zip_longest(self, other, fillvalue=_MISSING))

    def __hash__(self) -> int:
        return hash(tuple(self._iter_data()))

    def __contains__(self, value: object) -> bool:
        return value in self._iter_data()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return repr(list(self._iter_data()))
