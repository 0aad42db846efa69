"""
Bounded-concurrency mapping over async functions.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Hashable, Iterable
from typing import TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


async def batch_map(
    items: Iterable[K],
    limit: int,
    func: Callable[[K], Awaitable[V]],
) -> dict[K, V]:
    """
    Run func over items with at most ``limit`` calls in flight.

    Items are handed out in order to a fixed pool of workers. After the first
    failure no further items are started; calls already running are allowed
    to finish, then that first exception is raised unchanged.

    Args:
        items: Keys to process; each must be unique
        limit: Maximum number of concurrent calls
        func: Async function applied to each item

    Returns:
        Results keyed by item, in completion order

    Raises:
        ValueError: If limit is less than 1
    """
    if limit < 1:
        raise ValueError(f"Concurrency limit must be at least 1, got {limit}")

    queue = list(items)
    pending = iter(queue)
    results: dict[K, V] = {}
    failure: BaseException | None = None

    async def worker() -> None:
        nonlocal failure
        for item in pending:
            if failure is not None:
                return
            try:
                results[item] = await func(item)
            except Exception as e:
                if failure is None:
                    failure = e
                return

    workers = [asyncio.create_task(worker()) for _ in range(min(limit, len(queue)))]
    _ = await asyncio.gather(*workers)

    if failure is not None:
        raise failure
    return results
