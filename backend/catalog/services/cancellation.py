import asyncio
from typing import Awaitable

from starlette.types import Receive


async def wait_for_disconnect(receive: Receive) -> None:
    """Block until the ASGI server reports that the client went away."""

    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return


async def race_timer(
    delay: float,
    cancelled: Awaitable,
    deadline: float | None = None,
) -> bool:
    """
    Wait `delay` seconds unless `cancelled` resolves first.

    Returns True when the timer won. Returns False when `cancelled` resolved
    first, or when `deadline` seconds passed before either did. Whichever side
    loses is cancelled before returning.
    """

    timer = asyncio.ensure_future(asyncio.sleep(delay))
    watcher = asyncio.ensure_future(cancelled)
    pending = {timer, watcher}
    try:
        done, pending = await asyncio.wait(
            pending, timeout=deadline, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
    return timer in done
