from functools import singledispatch
from typing import AbstractSet, Optional, TypeVar


T = TypeVar("T")


@singledispatch
def combine(a, b):
    """
    Merge two values of the same shape into a new value.

    Implementations are registered per shape (text, set). Both operands must
    share that shape; neither operand is modified.
    """
    raise TypeError(f"Cannot combine values of type {type(a).__name__}")


@combine.register
def _combine_text(a: str, b: str) -> str:
    if not isinstance(b, str):
        raise TypeError(f"Cannot combine str with {type(b).__name__}")
    if a == b:
        return a
    # order sensitive: combine(x, y) != combine(y, x) unless x == y
    return f"{a} AND {b}"


@combine.register(frozenset)
@combine.register(set)
def _combine_set(a: AbstractSet[T], b: AbstractSet[T]) -> frozenset:
    if not isinstance(b, (set, frozenset)):
        raise TypeError(f"Cannot combine {type(a).__name__} with {type(b).__name__}")
    return frozenset(a) | frozenset(b)


def combine_optional(a: Optional[T], b: Optional[T]) -> Optional[T]:
    if a is None:
        return b
    if b is None:
        return a
    return combine(a, b)


def concatenate(a: str, b: str) -> str:
    return f"{a} AND {b}"
