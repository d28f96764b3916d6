from types import MappingProxyType
from typing import Mapping

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from nethermind.dao_decoder.config import GovernanceConfig
from nethermind.dao_decoder.exceptions import DecodingError, UnrecognizedInbox
from nethermind.dao_decoder.types.routing import Route, RouteKind, RoutingEntry

from .abis import RETRYABLE_ENVELOPE_TYPES
from .codec import decode


class GovernanceClassifier:
    """

    Classifies L1 timelock targets using a static allow-list built from a GovernanceConfig.  Any address
    outside the table classifies as ``RouteKind.unrecognized``; the table is never extended at runtime.

    """

    config: GovernanceConfig

    routing_table: Mapping[ChecksumAddress, RoutingEntry]
    """ Read-only mapping from checksummed addresses to their role """

    def __init__(self, config: GovernanceConfig):
        self.config = config

        entries = [
            RoutingEntry(config.upgrade_executor, RouteKind.direct_executor, config.home_chain_id),
            RoutingEntry(config.retryable_router, RouteKind.retryable_envelope),
            *(
                RoutingEntry(chain.inbox_address, RouteKind.direct_inbox_call, chain.chain_id)
                for chain in config.chains
            ),
        ]

        table: dict[ChecksumAddress, RoutingEntry] = {}
        for entry in entries:
            if entry.address in table:
                raise DecodingError(
                    f"Address {entry.address} configured as both {table[entry.address].role.value} "
                    f"and {entry.role.value}"
                )
            table[entry.address] = entry

        self.routing_table = MappingProxyType(table)

    def classify(self, target: str) -> Route:
        """
        Returns the route for a timelock target.  Never raises for unknown addresses; callers decide how to
        handle ``direct_inbox_call`` and ``unrecognized`` routes.

        :param target: hex address, checksummed or not
        """
        address = to_checksum_address(target)
        entry = self.routing_table.get(address)
        if entry is None:
            return Route(kind=RouteKind.unrecognized, target=address)
        return Route(kind=entry.role, target=address, chain_id=entry.chain_id)

    def unwrap_retryable(self, payload: bytes) -> tuple[int, ChecksumAddress, bytes]:
        """
        Decodes the payload of a call to the retryable ticket router.  The L2 call value and gas parameters are
        not relevant for decoding and are dropped.

        :param payload: ABI encoded (inbox, target, uint256, uint256, uint256, bytes)
        :return: (chain_id, target, inner_payload)
        :raises UnrecognizedInbox: if the inbox does not belong to a configured chain
        """
        inbox, target, _, _, _, inner_payload = decode(RETRYABLE_ENVELOPE_TYPES, payload)

        chain = self.config.chain_for_inbox(inbox)
        if chain is None:
            raise UnrecognizedInbox(f"Unrecognized inbox {inbox}")

        return chain.chain_id, target, inner_payload
