from dataclasses import dataclass
from enum import Enum

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

# pylint: disable=invalid-name


class RouteKind(Enum):
    """Roles an L1 timelock target can play"""

    direct_executor = "direct_executor"
    retryable_envelope = "retryable_envelope"
    direct_inbox_call = "direct_inbox_call"
    unrecognized = "unrecognized"


@dataclass(frozen=True)
class ChainDescriptor:
    """Governance contracts deployed for a single chain"""

    chain_id: int
    inbox_address: ChecksumAddress
    upgrade_executor_address: ChecksumAddress

    name: str = ""
    explorer_url: str = ""
    """ Address page prefix, ie 'https://arbiscan.io/address/' """

    explorer_suffix: str = "#code"

    def __post_init__(self):
        object.__setattr__(self, "inbox_address", to_checksum_address(self.inbox_address))
        object.__setattr__(self, "upgrade_executor_address", to_checksum_address(self.upgrade_executor_address))


@dataclass(frozen=True)
class RoutingEntry:
    """Maps an address to its semantic role in the routing table"""

    address: ChecksumAddress
    role: RouteKind
    chain_id: int | None = None


@dataclass(frozen=True)
class Route:
    """
    Classification result for a timelock target.  ``chain_id`` is set for direct executor calls and direct
    inbox calls.  Retryable envelopes learn their chain from the inbox inside the payload.
    """

    kind: RouteKind
    target: ChecksumAddress
    chain_id: int | None = None
