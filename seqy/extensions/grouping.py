from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..errors import require_not_none

if typing.TYPE_CHECKING:
    from ..adapter import SequenceAdapter

class _GroupingOperations(Generic[T]):
    def group_by(self: 'SequenceAdapter[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """
        group elements by a key.
        keys keep first-seen order and each group keeps the order its elements arrived in.
        """
        require_not_none(key_selector, "key_selector")
        groups = defaultdict(list)
        for item in self._iter_data():
            groups[key_selector(item)].append(item)
        return dict(groups)

    def index_by(self: 'SequenceAdapter[T]', key_selector: KeySelector[T, K]) -> Dict[K, T]:
        """map each key to its element; on duplicate keys the last element wins"""
        require_not_none(key_selector, "key_selector")
        index = {}
        for item in self._iter_data():
            index[key_selector(item)] = item
        return index
