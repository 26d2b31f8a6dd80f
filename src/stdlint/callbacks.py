"""
Callback-style delivery for coroutine results.

Callbacks receive `(error, result)` exactly once and are always scheduled on
the event loop with `call_soon`, never invoked inline, even when the result is
already available.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

T = TypeVar("T")

Callback = Callable[[BaseException | None, Any], None]


def deliver_soon(callback: Callback, error: BaseException | None, result: Any = None) -> None:
    """Schedule `callback(error, result)` on the running loop."""
    asyncio.get_running_loop().call_soon(callback, error, result)


def run_with_callback(coro: Coroutine[Any, Any, T], callback: Callback) -> asyncio.Task[None]:
    """
    Run `coro` as a task and report its outcome through `callback`.

    Exceptions raised by `coro` are passed as the callback's error and are not
    re-raised. Requires a running event loop.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        raise

    async def runner() -> None:
        try:
            result = await coro
        except Exception as e:
            deliver_soon(callback, e)
        else:
            deliver_soon(callback, None, result)

    return loop.create_task(runner())
