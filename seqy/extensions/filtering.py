from __future__ import annotations
import typing
from ..types import *
from ..errors import require_not_none
from ..predicates import negate, not_none, is_in

if typing.TYPE_CHECKING:
    from ..adapter import SequenceAdapter

class _FilterOperations(Generic[T]):
    def only(self: 'SequenceAdapter[T]', predicate: Predicate[T]) -> 'SequenceAdapter[T]':
        """keep the elements for which predicate holds (lazy, re-run on every traversal)"""
        from ..adapter import SequenceAdapter
        require_not_none(predicate, "predicate")
        return SequenceAdapter(lambda: (x for x in self._iter_data() if predicate(x)))

    def filter(self: 'SequenceAdapter[T]', predicate: Predicate[T]) -> 'SequenceAdapter[T]':
        """alias of only()"""
        return self.only(predicate)

    def exclude(self: 'SequenceAdapter[T]', predicate: Predicate[T]) -> 'SequenceAdapter[T]':
        """drop the elements for which predicate holds"""
        return self.only(negate(predicate))

    def exclude_values(self: 'SequenceAdapter[T]', *values: T) -> 'SequenceAdapter[T]':
        """drop every element equal to one of values"""
        return self.exclude_all(values)

    def exclude_all(self: 'SequenceAdapter[T]', collection: Iterable[T]) -> 'SequenceAdapter[T]':
        """drop every element equal to a member of collection, snapshotted at call time"""
        require_not_none(collection, "collection")
        return self.exclude(is_in(collection))

    def not_nulls(self: 'SequenceAdapter[Optional[T]]') -> 'SequenceAdapter[T]':
        return self.only(not_none)

    def of_type(self: 'SequenceAdapter[T]', type_filter: Type[U]) -> 'SequenceAdapter[U]':
        """keep the elements that are instances of type_filter"""
        # the type hint Type[U] ensures the user passes a class/type, not an instance
        require_not_none(type_filter, "type_filter")
        return self.only(lambda item: isinstance(item, type_filter))
