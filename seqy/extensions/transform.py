from __future__ import annotations
import typing
import logging
from itertools import chain
from ..types import *
from ..errors import InvalidArgumentError, require_not_none
from ..ordering import on_result_of, as_key

if typing.TYPE_CHECKING:
    from ..adapter import SequenceAdapter

logger = logging.getLogger(__name__)

class _TransformOperations(Generic[T]):
    def map(self: 'SequenceAdapter[T]', selector: Selector[T, U]) -> 'SequenceAdapter[U]':
        """project each element to a new form, one output per input"""
        from ..adapter import SequenceAdapter
        require_not_none(selector, "selector")
        return SequenceAdapter(lambda: (selector(x) for x in self._iter_data()))

    def flat_map(self: 'SequenceAdapter[T]', selector: Selector[T, Iterable[U]]) -> 'SequenceAdapter[U]':
        """project each element to an iterable and flatten the results in order"""
        from ..adapter import SequenceAdapter
        require_not_none(selector, "selector")
        return SequenceAdapter(lambda: (item for x in self._iter_data() for item in selector(x)))

    def concat(self: 'SequenceAdapter[T]', other: Iterable[T]) -> 'SequenceAdapter[T]':
        """this sequence followed by other, preserving all elements and order"""
        from ..adapter import SequenceAdapter
        require_not_none(other, "other")
        # chain avoids building an intermediate concatenated list
        return SequenceAdapter(lambda: chain(self._iter_data(), other))

    def append(self: 'SequenceAdapter[T]', *values: T) -> 'SequenceAdapter[T]':
        """this sequence followed by the given values"""
        return self.concat(values)

    def sort_on(self: 'SequenceAdapter[T]', comparer: Optional[Comparer[T]] = None, *,
                key: Optional[KeySelector[T, K]] = None, reverse: bool = False) -> 'SequenceAdapter[T]':
        """
        stable sort by a comparer, by the natural order of a key, or by natural order.
        this is EAGER: the sequence is consumed and snapshotted when sort_on is called.
        """
        from ..adapter import SequenceAdapter
        if comparer is not None and key is not None:
            raise InvalidArgumentError("pass either a comparer or a key, not both")
        if key is not None:
            comparer = on_result_of(key)

        # python's sort is stable, and stays stable with reverse=True
        data = sorted(self._iter_data(), key=as_key(comparer), reverse=reverse)
        logger.debug(f"sort_on materialized {len(data)} elements")
        return SequenceAdapter(lambda: data)
