"""
Concurrent enumeration of sets.

apply runs a block for every element on a thread pool; apply_async does
the same for coroutine blocks on the running event loop. Both return only
once every invocation has finished.

Blocks run concurrently with no synchronization from parset: any state
they capture must be protected by the caller (a threading.Lock for apply,
an asyncio.Lock for apply_async).

Failure policy: a raising invocation does not stop the others. All
failures are collected and raised together as an ApplyError after the
join.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TypeVar, Iterable
import asyncio
import logging

from .config import default_max_workers
from .errors import ApplyError
from .ops import SenderBlock, AsyncSenderBlock, as_set

T = TypeVar("T")

logger = logging.getLogger(__name__)


def apply(
    collection: Iterable[T],
    block: SenderBlock[T],
    max_workers: int | None = None,
) -> None:
    """
    Call block once for every element, concurrently across a thread pool.

    Args:
        collection: Elements to enumerate, deduplicated up front.
        block: Single-argument callable. Must be safe to run from
               several threads at the same time.
        max_workers: Pool size. Defaults to default_max_workers(); never
                     more threads than elements.

    Raises:
        ApplyError: If any invocation raised, after all have completed.
        ValueError: If max_workers is less than 1.

    Example:
        seen = set()
        lock = threading.Lock()

        def record(x):
            with lock:
                seen.add(x)

        apply(items, record)
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    items = list(as_set(collection))
    if not items:
        return

    workers = min(max_workers or default_max_workers(), len(items))
    logger.debug("apply: %d elements on %d workers", len(items), workers)

    failures: list[tuple[T, BaseException]] = []
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="parset-apply") as executor:
        futures = {executor.submit(block, item): item for item in items}
        for future in as_completed(futures):
            exc = future.exception()
            if exc is not None:
                failures.append((futures[future], exc))

    _raise_failures(failures, len(items))


async def apply_async(
    collection: Iterable[T],
    block: AsyncSenderBlock[T],
    max_concurrency: int | None = None,
) -> None:
    """
    Await block once for every element, concurrently on the current loop.

    Args:
        collection: Elements to enumerate, deduplicated up front.
        block: Single-argument async callable.
        max_concurrency: Upper bound on in-flight invocations.
                         Unbounded when None.

    Raises:
        ApplyError: If any invocation raised, after all have completed.
        ValueError: If max_concurrency is less than 1.
    """
    if max_concurrency is not None and max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

    items = list(as_set(collection))
    if not items:
        return

    logger.debug("apply_async: %d elements, max_concurrency=%s", len(items), max_concurrency)

    if max_concurrency is None:
        run = block
    else:
        semaphore = asyncio.Semaphore(max_concurrency)

        async def run(item: T) -> None:
            async with semaphore:
                await block(item)

    results = await asyncio.gather(*[run(item) for item in items], return_exceptions=True)

    failures = [
        (item, result)
        for item, result in zip(items, results)
        if isinstance(result, BaseException)
    ]
    _raise_failures(failures, len(items))


def _raise_failures(failures: list[tuple[T, BaseException]], total: int) -> None:
    if not failures:
        return
    for item, exc in failures:
        logger.debug("apply invocation failed for %r: %r", item, exc)
    raise ApplyError(failures, total) from failures[0][1]
