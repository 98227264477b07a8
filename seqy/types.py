from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, FrozenSet, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Action = Callable[[T], Any]
IndexedAction = Callable[[T, int], Any]

# a zero-argument callable returning a fresh iterable on every call
DataFunc = Callable[[], Iterable[T]]
