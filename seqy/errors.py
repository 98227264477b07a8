from typing import Any


class SeqyError(Exception):
    """base class for every error raised by seqy itself."""
    pass


class InvalidArgumentError(SeqyError, TypeError):
    """a required argument was None or of an unusable type."""
    pass


class EmptyCollectionError(SeqyError, ValueError):
    """an operation needing at least one element ran on an empty sequence."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class NotFoundError(SeqyError, ValueError):
    """no element satisfied the given condition."""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


def require_not_none(value: Any, name: str) -> Any:
    """raise InvalidArgumentError when value is None, otherwise hand it back."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
