"""
comparer helpers.

a comparer is a plain function ``(a, b) -> int`` returning a negative number,
zero or a positive number. every ordering in seqy goes through one of these,
and key based orderings are built on top with ``on_result_of``.
"""
from functools import cmp_to_key
from .types import *
from .errors import require_not_none


def natural(a: Any, b: Any) -> int:
    """compare two values by their own < and > operators"""
    return (a > b) - (a < b)


def on_result_of(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Comparer[T]:
    """order elements by comparing the projected keys (natural order by default)"""
    require_not_none(key_selector, "key_selector")
    key_comparer = comparer if comparer is not None else natural
    return lambda a, b: key_comparer(key_selector(a), key_selector(b))


def reversed_order(comparer: Optional[Comparer[T]] = None) -> Comparer[T]:
    """invert a comparer"""
    base = comparer if comparer is not None else natural
    return lambda a, b: base(b, a)


def as_key(comparer: Optional[Comparer[T]] = None) -> Callable[[T], Any]:
    """turn a comparer into a key function for sorted(), min() and max()"""
    return cmp_to_key(comparer if comparer is not None else natural)
