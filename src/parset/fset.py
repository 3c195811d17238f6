"""
FunctionalSet: a frozenset with the parset operations as methods.

Set-valued results come back as FunctionalSet, so calls chain:

    FunctionalSet(range(10)).select(is_even).map(str)
"""

from __future__ import annotations
from typing import TypeVar, Generic, Any

from . import ops, parallel

T = TypeVar("T")


class FunctionalSet(frozenset, Generic[T]):
    """
    Immutable set of unique elements with block-based iteration helpers.

    Set algebra (|, &, -, ^ and the named methods) also returns
    FunctionalSet.

    Example:
        names = FunctionalSet(["ada", "grace", "linus"])
        long = names.reject(lambda n: len(n) < 4)
        total = names.reduce(0, lambda acc, n: acc + len(n))
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({set(self)!r})" if self else f"{type(self).__name__}()"

    def each(self, block: ops.SenderBlock[T]) -> None:
        ops.each(self, block)

    def apply(self, block: ops.SenderBlock[T], max_workers: int | None = None) -> None:
        """Run block for every element on a thread pool. See parallel.apply."""
        parallel.apply(self, block, max_workers=max_workers)

    async def apply_async(
        self,
        block: ops.AsyncSenderBlock[T],
        max_concurrency: int | None = None,
    ) -> None:
        await parallel.apply_async(self, block, max_concurrency=max_concurrency)

    def match(self, predicate: ops.Predicate[T], default: Any = None) -> T | Any:
        return ops.match(self, predicate, default=default)

    def select(self, predicate: ops.Predicate[T]) -> FunctionalSet[T]:
        return FunctionalSet(ops.select(self, predicate))

    def reject(self, predicate: ops.Predicate[T]) -> FunctionalSet[T]:
        return FunctionalSet(ops.reject(self, predicate))

    def map(self, transform: ops.Transform[T, Any]) -> FunctionalSet[Any]:
        return FunctionalSet(ops.map(self, transform))

    def reduce(self, initial: Any, accumulator: ops.Accumulator[Any, T]) -> Any:
        return ops.reduce(self, initial, accumulator)

    # Set algebra keeps the FunctionalSet type so chains survive a union.

    def __or__(self, other):
        return _wrap(super().__or__(other))

    def __ror__(self, other):
        return _wrap(super().__ror__(other))

    def __and__(self, other):
        return _wrap(super().__and__(other))

    def __rand__(self, other):
        return _wrap(super().__rand__(other))

    def __sub__(self, other):
        return _wrap(super().__sub__(other))

    def __rsub__(self, other):
        return _wrap(super().__rsub__(other))

    def __xor__(self, other):
        return _wrap(super().__xor__(other))

    def __rxor__(self, other):
        return _wrap(super().__rxor__(other))

    def union(self, *others) -> FunctionalSet[Any]:
        return FunctionalSet(super().union(*others))

    def intersection(self, *others) -> FunctionalSet[T]:
        return FunctionalSet(super().intersection(*others))

    def difference(self, *others) -> FunctionalSet[T]:
        return FunctionalSet(super().difference(*others))

    def symmetric_difference(self, other) -> FunctionalSet[Any]:
        return FunctionalSet(super().symmetric_difference(other))


def _wrap(result):
    if result is NotImplemented:
        return result
    return FunctionalSet(result)
