import asyncio
import logging
from typing import Any

import aiohttp
from aiohttp.client_exceptions import ClientError, ContentTypeError

from nethermind.dao_decoder.exceptions import ResolverHostError, ResolverRateLimitError

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("resolver")

DEFAULT_HEADERS = {"Accept": "application/json"}

# pylint: disable=raise-missing-from


async def get_json(
    host_address: str,
    params: dict[str, Any],
    request_headers: dict[str, str] | None = None,
    timeout: float = 30,
) -> Any:
    """
    GET an endpoint and return the parsed JSON body.

    :param host_address: endpoint url
    :param params: query parameters
    :param request_headers: headers for request.   Default: {"Accept": "application/json"}
    :param timeout: total request timeout in seconds
    :raises ResolverRateLimitError: when the host responds with 429
    :raises ResolverHostError: for server errors, non-JSON responses, and connection failures
    """
    aiohttp_timeout = aiohttp.ClientTimeout(total=timeout)
    logger.debug(f"GET {host_address} with params {params}")

    try:
        async with aiohttp.ClientSession(
            headers=request_headers or DEFAULT_HEADERS,
            timeout=aiohttp_timeout,
        ) as session:
            async with session.get(host_address, params=params) as response:
                match response.status:
                    case 429:
                        raise ResolverRateLimitError(f"{host_address} initializing rate limits")
                    case 500 | 502 | 503 | 504:
                        raise ResolverHostError(f"Internal server error ({response.status}) from {host_address}")
                    case status if status >= 400:
                        raise ResolverHostError(f"Unexpected status code {status} from {host_address}")

                try:
                    return await response.json()
                except ContentTypeError:
                    logger.debug(f"Non-JSON response from {host_address}: {await response.text()}")
                    raise ResolverHostError(f"Unexpected content type from {host_address}")

    except ClientError as e:
        raise ResolverHostError(f"Could not connect to {host_address}: {e}")
    except (TimeoutError, asyncio.TimeoutError):
        raise ResolverHostError(f"Timeout error for host {host_address}")
