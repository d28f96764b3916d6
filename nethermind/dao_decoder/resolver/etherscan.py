import asyncio
import json
import logging
from typing import Any

from eth_utils import to_checksum_address

from nethermind.dao_decoder.config import ARBITRUM_ONE_CHAIN_ID, ETHEREUM_CHAIN_ID
from nethermind.dao_decoder.decoding.registry import SignatureRegistry
from nethermind.dao_decoder.exceptions import ResolverHostError, ResolverRateLimitError

from .http import get_json
from .rate_limit import RateLimiter

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("resolver")

ETHERSCAN_V2_API_URL = "https://api.etherscan.io/v2/api"

# Etherscan V2 is a single endpoint for every supported chain.  Arbitrum Nova is not covered.
ETHERSCAN_CHAINS = frozenset({ETHEREUM_CHAIN_ID, ARBITRUM_ONE_CHAIN_ID})


def handle_etherscan_response(response_data: Any) -> list[dict[str, Any]] | None:
    """
    Check status and message fields before returning the ABI from a getabi response

    :param response_data: parsed JSON response
    :return: JSON ABI, or None if the contract is not verified
    """
    if not isinstance(response_data, dict):
        raise ResolverHostError(f"Malformed Etherscan response: {response_data}")

    if response_data.get("status") == "1":
        try:
            return json.loads(response_data["result"])
        except (KeyError, TypeError, json.JSONDecodeError) as e:
            raise ResolverHostError(f"Etherscan returned an unparseable ABI: {response_data}") from e

    result = str(response_data.get("result", ""))
    if "not verified" in result:
        return None
    if "rate limit" in result.lower():
        raise ResolverRateLimitError(f"Etherscan rate limit reached: {result}")

    raise ResolverHostError(f"Unhandled Etherscan Error: {response_data.get('message')} {result}")


class EtherscanResolver:
    """
    Resolves selectors against the verified ABI of the contract being called.  Verified ABIs are fetched from
    the Etherscan V2 API once per (chain, address) and cached for the lifetime of the resolver.
    """

    api_key: str
    api_url: str
    supported_chains: frozenset[int]
    rate_limiter: RateLimiter
    timeout: float

    def __init__(
        self,
        api_key: str,
        api_url: str = ETHERSCAN_V2_API_URL,
        supported_chains: frozenset[int] = ETHERSCAN_CHAINS,
        rate_limiter: RateLimiter | None = None,
        timeout: float = 30,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.supported_chains = supported_chains
        self.rate_limiter = rate_limiter or RateLimiter(min_interval=0.2)
        self.timeout = timeout

        self._abi_cache: dict[tuple[int, str], SignatureRegistry | None] = {}
        self._pending: dict[tuple[int, str], asyncio.Task] = {}

    async def resolve(self, selector: bytes, context_address: str, chain_id: int) -> str | None:
        if chain_id not in self.supported_chains:
            logger.debug(f"Skipping Etherscan lookup for unsupported chain {chain_id}")
            return None

        registry = await self.get_registry(context_address, chain_id)
        if registry is None:
            return None

        function = registry.get(selector)
        return function.signature if function else None

    async def get_registry(self, address: str, chain_id: int) -> SignatureRegistry | None:
        """
        Returns a SignatureRegistry for the verified ABI at ``address``, or None if it is not verified.
        Concurrent lookups for the same contract share a single getabi request.
        """
        address = to_checksum_address(address)
        cache_key = (chain_id, address)
        if cache_key in self._abi_cache:
            return self._abi_cache[cache_key]

        task = self._pending.get(cache_key)
        if task is None:
            task = asyncio.ensure_future(self._load_registry(address, chain_id))
            self._pending[cache_key] = task
            task.add_done_callback(lambda _: self._pending.pop(cache_key, None))

        # Waiters that time out leave the shared request running for the others
        return await asyncio.shield(task)

    async def _load_registry(self, address: str, chain_id: int) -> SignatureRegistry | None:
        response = await self.rate_limiter.execute(
            self._fetch,
            {"chainid": chain_id, "module": "contract", "action": "getabi", "address": address, "apikey": self.api_key},
        )
        abi = handle_etherscan_response(response)

        registry = SignatureRegistry.from_abi(f"{address}@{chain_id}", abi) if abi else None
        self._abi_cache[(chain_id, address)] = registry
        return registry

    async def _fetch(self, params: dict[str, Any]) -> Any:
        return await get_json(self.api_url, params=params, timeout=self.timeout)
