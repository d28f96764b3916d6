import logging
from typing import Any

from nethermind.dao_decoder.exceptions import ResolverHostError

from .http import get_json
from .rate_limit import RateLimiter

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("resolver")

FOUR_BYTE_API_URL = "https://www.4byte.directory/api/v1/signatures/"


class FourByteResolver:
    """
    Resolves selectors through the 4byte.directory signature database.  The public API allows roughly 3 calls
    per second, so all lookups pass through a shared RateLimiter.

    When several text signatures hash to the same selector, the earliest registered one is returned.  Later
    registrations are usually deliberate collisions.
    """

    api_url: str
    rate_limiter: RateLimiter
    timeout: float

    def __init__(
        self, rate_limiter: RateLimiter | None = None, api_url: str = FOUR_BYTE_API_URL, timeout: float = 30
    ):
        self.api_url = api_url
        self.rate_limiter = rate_limiter or RateLimiter(min_interval=0.35)
        self.timeout = timeout

    async def resolve(
        self, selector: bytes, context_address: str | None = None, chain_id: int | None = None
    ) -> str | None:
        # 4byte signatures are chain independent
        response = await self.rate_limiter.execute(self._fetch, {"hex_signature": "0x" + selector.hex()})

        try:
            results = response.get("results") or []
        except AttributeError:
            raise ResolverHostError(f"Malformed 4byte response: {response}")  # pylint: disable=raise-missing-from

        if not results:
            logger.debug(f"No 4byte signature found for 0x{selector.hex()}")
            return None

        earliest = min(results, key=lambda result: result.get("id", 0))
        logger.debug(f"4byte resolved 0x{selector.hex()} to {earliest['text_signature']}")
        return earliest["text_signature"]

    async def _fetch(self, params: dict[str, Any]) -> Any:
        return await get_json(self.api_url, params=params, timeout=self.timeout)
