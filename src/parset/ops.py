"""
Sequential functional operations over sets.

Every operation takes an iterable of hashable elements and materializes
it as a frozenset first, so duplicates in the input are seen once. The
block is then called per element in set iteration order. Set-valued
results are returned as new frozensets; the input is never modified.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Iterable, Awaitable, Any

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

SenderBlock = Callable[[T], None]
AsyncSenderBlock = Callable[[T], Awaitable[None]]
Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
Accumulator = Callable[[A, T], A]


def as_set(collection: Iterable[T]) -> frozenset[T]:
    """Materialize collection as a frozenset (a no-op for frozensets)."""
    return frozenset(collection)


def each(collection: Iterable[T], block: SenderBlock[T]) -> None:
    """Call block once for every element, one at a time."""
    for item in as_set(collection):
        block(item)


def match(
    collection: Iterable[T],
    predicate: Predicate[T],
    default: Any = None,
) -> T | Any:
    """
    Return the first element satisfying predicate, or default.

    Stops calling predicate as soon as a match is found. Which element is
    "first" depends on set iteration order, so callers should not rely on
    it when several elements match.

    None is a valid element; pass a sentinel as default when the set may
    contain it:

        missing = object()
        found = match(items, is_blank, default=missing)
        if found is missing:
            ...
    """
    for item in as_set(collection):
        if predicate(item):
            return item
    return default


def select(collection: Iterable[T], predicate: Predicate[T]) -> frozenset[T]:
    """Return the elements for which predicate is true (possibly empty)."""
    return frozenset(item for item in as_set(collection) if predicate(item))


def reject(collection: Iterable[T], predicate: Predicate[T]) -> frozenset[T]:
    """Return the elements for which predicate is false (possibly empty)."""
    return frozenset(item for item in as_set(collection) if not predicate(item))


def map(collection: Iterable[T], transform: Transform[T, U]) -> frozenset[U]:
    """
    Return the set of transform(e) for every element e.

    Equal outputs collapse, so the result can be smaller than the input.
    """
    return frozenset(transform(item) for item in as_set(collection))


def reduce(
    collection: Iterable[T],
    initial: A,
    accumulator: Accumulator[A, T],
) -> A:
    """
    Fold every element into initial using accumulator.

    Set iteration order is arbitrary: accumulator should be commutative
    and associative for the result to be deterministic.

    Example:
        total = reduce({1, 2, 3, 4}, 0, lambda acc, x: acc + x)  # 10
    """
    result = initial
    for item in as_set(collection):
        result = accumulator(result, item)
    return result
