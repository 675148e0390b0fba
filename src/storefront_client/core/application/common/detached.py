import asyncio
from collections.abc import Coroutine
from typing import Any


async def run_to_completion[T](operation: Coroutine[Any, Any, T]) -> T:
    """Run ``operation`` in its own task and await it.

    Cancelling the caller abandons the wait only; the task keeps running and
    still applies its effects (remote mutation plus cache invalidation).
    """
    task = asyncio.ensure_future(operation)
    return await asyncio.shield(task)
