import asyncio
import logging
import traceback
from typing import Sequence

from nethermind.dao_decoder.decoding.function_decoders import FunctionSignature
from nethermind.dao_decoder.exceptions import DecodingError, SignatureResolverError
from nethermind.dao_decoder.types.actions import Action

from .base import SignatureResolver

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("resolver")


class ChainedResolver:
    """
    Queries resolvers in order and returns the first signature found.  A failing resolver is logged and
    treated as a miss, so later resolvers still get a chance.
    """

    resolvers: list[SignatureResolver]

    def __init__(self, *resolvers: SignatureResolver):
        self.resolvers = list(resolvers)

    async def resolve(self, selector: bytes, context_address: str, chain_id: int) -> str | None:
        for resolver in self.resolvers:
            try:
                signature = await resolver.resolve(selector, context_address, chain_id)
            except SignatureResolverError as e:
                logger.warning(f"{type(resolver).__name__} failed to resolve 0x{selector.hex()}: {e}")
                continue

            if signature:
                return signature
        return None


def describe_with_signature(call_data: bytes, signature: str) -> str:
    """
    Decodes call data against a resolved signature and renders ``name(type: value, ...)``.  If the arguments
    do not decode against the signature, the bare signature is returned.

    :param call_data: selector followed by ABI encoded parameters
    :param signature: canonical signature, ie ``transfer(address,uint256)``
    """
    try:
        function = FunctionSignature.from_signature(signature)
        return function.decode(call_data).describe()
    except (DecodingError, ValueError) as e:
        logger.debug(f"Could not decode arguments of {signature}: {e}")
        return signature


async def enrich_actions(
    actions: Sequence[Action],
    resolver: SignatureResolver | None,
    timeout: float = 10.0,
) -> list[Action]:
    """
    Fills in decoded_call_data for actions the decoder could not describe.  Resolver failures and timeouts
    leave the action unchanged, so the result always has one action per input, in the same order.

    :param actions: Actions returned by the decode pipeline
    :param resolver: signature resolver.  If None, actions are returned unchanged
    :param timeout: seconds to wait for each resolver call
    """
    if resolver is None:
        return list(actions)

    async def _enrich(action: Action) -> Action:
        if action.decoded_call_data or action.selector is None:
            return action

        try:
            signature = await asyncio.wait_for(
                resolver.resolve(action.selector, action.address, action.chain_id), timeout=timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Timed out resolving 0x{action.selector.hex()} for {action.address}")
            return action
        except SignatureResolverError as e:
            logger.warning(f"Failed to resolve 0x{action.selector.hex()} for {action.address}: {e}")
            return action
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(
                f"Unexpected error resolving 0x{action.selector.hex()} for {action.address}: "
                f"{traceback.format_exception(type(e), e, e.__traceback__)}"
            )
            return action

        if not signature:
            return action
        return action.with_decoding(describe_with_signature(action.call_data, signature))

    return list(await asyncio.gather(*[_enrich(action) for action in actions]))
