"""Run SDK coroutines from synchronous callers (CLI, scripts).

Without a running event loop the coroutine goes through ``asyncio.run()``.
Inside a running loop (Jupyter, other frameworks) it is run to completion on
a single worker thread with a loop of its own, so the caller's loop is never
re-entered.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Coroutine, TypeVar

T = TypeVar("T")


def _run_sync(coro: Coroutine[..., ..., T]) -> T:
    """Run *coro* to completion and return its result."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="namereg-sync") as pool:
        return pool.submit(asyncio.run, coro).result()
