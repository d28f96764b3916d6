import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("resolver")

T = TypeVar("T")


class RateLimiter:
    """
    Serializes calls to a rate limited API.  Calls run one at a time in submission order, and consecutive calls
    start at least ``min_interval`` seconds apart.  A failing call raises to its own caller and does not affect
    the calls queued behind it.

    >>> limiter = RateLimiter(min_interval=0.35)  # ~3 calls per second with buffer
    ... await limiter.execute(fetch_signature, "0xb147f40c")

    """

    min_interval: float

    def __init__(
        self,
        min_interval: float = 0.35,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_call: float | None = None

    async def execute(self, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """Waits for this call's turn, then awaits ``func(*args, **kwargs)``"""
        async with self._lock:
            if self._last_call is not None:
                wait = self.min_interval - (self._clock() - self._last_call)
                if wait > 0:
                    logger.debug(f"Rate limiting {getattr(func, '__name__', func)}... waiting {wait:.3f} seconds")
                    await self._sleep(wait)

            self._last_call = self._clock()
            return await func(*args, **kwargs)
