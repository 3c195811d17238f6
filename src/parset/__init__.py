"""
Parset: block-based functional operations over sets.

Provides each, match, select, reject, map, and reduce over unordered
collections of unique elements, plus apply, which enumerates a set
concurrently on a thread pool and joins before returning.

Usage:
    from parset import select, reject, map, reduce, apply

    evens = select({1, 2, 3, 4}, lambda x: x % 2 == 0)    # {2, 4}
    total = reduce({1, 2, 3, 4}, 0, lambda a, x: a + x)   # 10

    # Concurrent enumeration; the block must be thread-safe
    apply(urls, fetch_and_store)

    # Method form
    FunctionalSet(names).select(is_short).map(str.upper)
"""

from .ops import (
    each,
    match,
    select,
    reject,
    map,
    reduce,
    SenderBlock,
    AsyncSenderBlock,
    Predicate,
    Transform,
    Accumulator,
)
from .parallel import apply, apply_async
from .fset import FunctionalSet
from .errors import ApplyError
from .logger import setup_logger

__version__ = "0.1.0"
__all__ = [
    # Sequential operations
    "each",
    "match",
    "select",
    "reject",
    "map",
    "reduce",
    # Concurrent enumeration
    "apply",
    "apply_async",
    "ApplyError",
    # Method form
    "FunctionalSet",
    # Block signatures
    "SenderBlock",
    "AsyncSenderBlock",
    "Predicate",
    "Transform",
    "Accumulator",
    "setup_logger",
]
