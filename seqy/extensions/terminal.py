from __future__ import annotations
import typing
import logging
from collections import deque
from collections.abc import MutableSequence, MutableSet, Sequence, Sized
from functools import reduce
import numpy as np
import pandas as pd
from ..types import *
from ..errors import EmptyCollectionError, NotFoundError, InvalidArgumentError, require_not_none
from ..ordering import natural, on_result_of, as_key

if typing.TYPE_CHECKING:
    from ..adapter import SequenceAdapter

logger = logging.getLogger(__name__)

_MISSING = object()


class _TerminalOperations(Generic[T]):
    # --- element access ---

    def first(self: 'SequenceAdapter[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get the first element, or the first one satisfying predicate"""
        if predicate is None:
            for item in self._iter_data():
                return item
            raise EmptyCollectionError()
        for item in self._iter_data():
            if predicate(item): return item
        raise NotFoundError()

    def first_or_default(self: 'SequenceAdapter[T]', default: Optional[T] = None,
                         predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get first element (optionally satisfying predicate) or default"""
        if predicate is None:
            return next(self._iter_data(), default)
        return next((x for x in self._iter_data() if predicate(x)), default)

    def get_last(self: 'SequenceAdapter[T]') -> T:
        """get the last element. constant time on indexable sources, a full traversal otherwise"""
        source = self._get_source()
        if isinstance(source, Sequence):
            if not source: raise EmptyCollectionError()
            return source[-1]
        tail = deque(source, maxlen=1)
        if not tail: raise EmptyCollectionError()
        return tail[0]

    # --- checks and counts ---

    def contains(self: 'SequenceAdapter[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies predicate, stopping at the first match"""
        require_not_none(predicate, "predicate")
        return any(predicate(x) for x in self._iter_data())

    def count(self: 'SequenceAdapter[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements satisfying predicate, or all elements"""
        if predicate is None: return self.size()
        return sum(1 for x in self._iter_data() if predicate(x))

    def size(self: 'SequenceAdapter[T]') -> int:
        source = self._get_source()
        if isinstance(source, Sized): return len(source)
        return sum(1 for _ in source)

    def is_empty(self: 'SequenceAdapter[T]') -> bool:
        for _ in self._iter_data():
            return False
        return True

    # --- extremes ---

    def max(self: 'SequenceAdapter[T]', comparer: Optional[Comparer[T]] = None) -> T:
        """greatest element by comparer (natural order by default); the first of equal maxima wins"""
        result = max(self._iter_data(), key=as_key(comparer), default=_MISSING)
        if result is _MISSING: raise EmptyCollectionError()
        return result

    def min(self: 'SequenceAdapter[T]', comparer: Optional[Comparer[T]] = None) -> T:
        """least element by comparer (natural order by default); the first of equal minima wins"""
        result = min(self._iter_data(), key=as_key(comparer), default=_MISSING)
        if result is _MISSING: raise EmptyCollectionError()
        return result

    def max_on_result_of(self: 'SequenceAdapter[T]', key_selector: KeySelector[T, K]) -> T:
        return self.max(on_result_of(key_selector))

    def min_on_result_of(self: 'SequenceAdapter[T]', key_selector: KeySelector[T, K]) -> T:
        return self.min(on_result_of(key_selector))

    # --- folding and side effects ---

    def reduce(self: 'SequenceAdapter[T]', initial: U, accumulator: Accumulator[U, T]) -> U:
        """left fold: accumulator(acc, element) over the elements in order, starting at initial"""
        require_not_none(accumulator, "accumulator")
        return reduce(accumulator, self._iter_data(), initial)

    def for_each(self: 'SequenceAdapter[T]', action: Action[T]) -> 'SequenceAdapter[T]':
        """
        performs action on each element for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original adapter to allow chaining.
        """
        require_not_none(action, "action")
        for item in self._iter_data():
            action(item)
        return self

    def for_each_indexed(self: 'SequenceAdapter[T]', action: IndexedAction[T]) -> 'SequenceAdapter[T]':
        """like for_each, calling action(element, index) with a zero-based index"""
        require_not_none(action, "action")
        for index, item in enumerate(self._iter_data()):
            action(item, index)
        return self

    # --- conversions, all backed by the `to` accessor ---

    def to_list(self: 'SequenceAdapter[T]') -> List[T]:
        return self.to.list()

    def to_immutable_list(self: 'SequenceAdapter[T]') -> Tuple[T, ...]:
        return self.to.immutable_list()

    def to_set(self: 'SequenceAdapter[T]', transform: Optional[Selector[T, U]] = None) -> Set[Any]:
        return self.to.set(transform)

    def to_immutable_set(self: 'SequenceAdapter[T]', transform: Optional[Selector[T, U]] = None) -> FrozenSet[Any]:
        return self.to.immutable_set(transform)

    def to_tree_set(self: 'SequenceAdapter[T]', transform: Optional[Selector[T, U]] = None,
                    comparer: Optional[Comparer[Any]] = None) -> List[Any]:
        return self.to.tree_set(transform, comparer)

    def to_array(self: 'SequenceAdapter[T]', element_type: Any) -> np.ndarray:
        """convert to a numpy array of the given element type (dtype)"""
        require_not_none(element_type, "element_type")
        return self.to.array(element_type)

    def join(self: 'SequenceAdapter[T]', separator: str = "") -> str:
        """concatenate the string forms of the elements with separator between them"""
        require_not_none(separator, "separator")
        return separator.join(str(x) for x in self._iter_data())

    def copy_to(self: 'SequenceAdapter[T]', destination: Any) -> Any:
        """append every element to a mutable sequence or add it to a mutable set, then return it"""
        require_not_none(destination, "destination")
        # snapshot first so copying into the backing collection itself terminates
        items = list(self._iter_data())
        if isinstance(destination, MutableSequence):
            destination.extend(items)
        elif isinstance(destination, MutableSet):
            for item in items:
                destination.add(item)
        else:
            raise InvalidArgumentError(f"cannot copy into {type(destination).__name__}")
        logger.debug(f"copy_to added {len(items)} elements to {type(destination).__name__}")
        return destination


class TerminalAccessor(Generic[T]):
    """
    conversions reachable as adapter.to.<kind>().
    calling the accessor itself, adapter.to(selector), is an alias of adapter.map(selector).
    """
    def __init__(self, adapter_instance: 'SequenceAdapter[T]'):
        self._adapter = adapter_instance

    def __call__(self, selector: Selector[T, U]) -> 'SequenceAdapter[U]':
        return self._adapter.map(selector)

    def _values(self, transform: Optional[Selector[T, U]] = None) -> Iterator[Any]:
        data = self._adapter._iter_data()
        return (transform(x) for x in data) if transform is not None else data

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._adapter._iter_data())

    def immutable_list(self) -> Tuple[T, ...]:
        """convert to a tuple"""
        return tuple(self._adapter._iter_data())

    def set(self, transform: Optional[Selector[T, U]] = None) -> Set[Any]:
        """convert to set, optionally of transformed values"""
        return set(self._values(transform))

    def immutable_set(self, transform: Optional[Selector[T, U]] = None) -> FrozenSet[Any]:
        """convert to frozenset, optionally of transformed values"""
        return frozenset(self._values(transform))

    def tree_set(self, transform: Optional[Selector[T, U]] = None,
                 comparer: Optional[Comparer[Any]] = None) -> List[Any]:
        """
        sorted, duplicate-free list of the (optionally transformed) values.
        two values are duplicates when comparer returns 0 for them; the first one seen is kept.
        """
        compare = comparer if comparer is not None else natural
        result = []
        for value in sorted(self._values(transform), key=as_key(compare)):
            if result and compare(result[-1], value) == 0:
                continue
            result.append(value)
        return result

    def array(self, element_type: Any = None) -> np.ndarray:
        """convert to numpy array, inferring the dtype when none is given"""
        return np.array(self.list(), dtype=element_type)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        require_not_none(key_selector, "key_selector")
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._adapter._iter_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())
