from typing import Protocol


class SignatureResolver(Protocol):
    """

    Looks up a human-readable function signature for a 4 byte selector.  Resolvers are allowed to be slow,
    to fail, and to be unavailable; decoding never depends on them.

    """

    async def resolve(self, selector: bytes, context_address: str, chain_id: int) -> str | None:
        """
        Returns a canonical signature such as ``transfer(address,uint256)``, or None if the selector is unknown.

        :param selector: 4 byte function selector
        :param context_address: contract the calldata is sent to
        :param chain_id: chain the contract is deployed on
        :raises SignatureResolverError: when the lookup itself fails
        """
        raise NotImplementedError()
