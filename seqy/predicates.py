from .types import *
from .errors import require_not_none


def where(key_selector: KeySelector[T, K], condition: Predicate[K]) -> Predicate[T]:
    """build a predicate that tests condition against the projected key"""
    require_not_none(key_selector, "key_selector")
    require_not_none(condition, "condition")
    return lambda item: condition(key_selector(item))


def where_equals(key_selector: KeySelector[T, K], value: Optional[K]) -> Predicate[T]:
    """build a predicate that is true when the projected key equals value"""
    require_not_none(key_selector, "key_selector")
    return where(key_selector, lambda key: key == value)


def negate(predicate: Predicate[T]) -> Predicate[T]:
    require_not_none(predicate, "predicate")
    return lambda item: not predicate(item)


def not_none(item: Any) -> bool:
    return item is not None


def is_in(values: Iterable[Any]) -> Predicate[Any]:
    """
    membership predicate over a snapshot of values.
    hashable values get a set for o(1) lookups, anything else falls back to a list scan.
    """
    require_not_none(values, "values")
    snapshot = list(values)
    try:
        members = set(snapshot)
    except TypeError:  # unhashable values
        members = None

    def contains(item):
        if members is not None:
            try:
                return item in members
            except TypeError:  # unhashable item against a hashed snapshot
                pass
        return item in snapshot

    return contains
