from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address as tca

from nethermind.dao_decoder.types.routing import ChainDescriptor

ETHEREUM_CHAIN_ID = 1
ARBITRUM_ONE_CHAIN_ID = 42161
ARBITRUM_NOVA_CHAIN_ID = 42170


@dataclass(frozen=True)
class GovernanceConfig:
    """
    Static, process-wide governance deployment.  Read-only after construction.
    """

    upgrade_executor: ChecksumAddress
    """ Upgrade executor on the home chain """

    retryable_router: ChecksumAddress
    """ Address the L1 timelock targets to create retryable tickets for satellite chains """

    chains: tuple[ChainDescriptor, ...]
    """ Satellite chains reachable through retryable tickets """

    home_chain_id: int = ETHEREUM_CHAIN_ID
    home_chain_name: str = "Ethereum"
    home_explorer_url: str = "https://etherscan.io/address/"

    chains_by_id: Mapping[int, ChainDescriptor] = field(init=False, repr=False, compare=False)
    """ Read-only mapping from chain ID to its descriptor """

    def __post_init__(self):
        object.__setattr__(self, "upgrade_executor", tca(self.upgrade_executor))
        object.__setattr__(self, "retryable_router", tca(self.retryable_router))
        object.__setattr__(self, "chains", tuple(self.chains))
        object.__setattr__(self, "chains_by_id", MappingProxyType({chain.chain_id: chain for chain in self.chains}))

    def chain_for_inbox(self, inbox: str) -> ChainDescriptor | None:
        """Returns the chain whose inbox is ``inbox``, or None if the inbox is unknown"""
        inbox = tca(inbox)
        for chain in self.chains:
            if chain.inbox_address == inbox:
                return chain
        return None

    def chain_name(self, chain_id: int) -> str:
        """
        Display name for a chain ID

        >>> DEFAULT_CONFIG.chain_name(42170)
        'Arbitrum Nova'
        >>> DEFAULT_CONFIG.chain_name(10)
        'Chain 10'
        """
        if chain_id == self.home_chain_id:
            return self.home_chain_name
        chain = self.chains_by_id.get(chain_id)
        if chain is None or not chain.name:
            return f"Chain {chain_id}"
        return chain.name

    def explorer_url(self, chain_id: int, address: str) -> str:
        """Block explorer link to the verified code of ``address``.  Unknown chains fall back to Etherscan"""
        chain = self.chains_by_id.get(chain_id)
        if chain is None or not chain.explorer_url:
            return f"{self.home_explorer_url}{address}#code"
        return f"{chain.explorer_url}{address}{chain.explorer_suffix}"


DEFAULT_CONFIG = GovernanceConfig(
    upgrade_executor=tca("0x3ffFbAdAF827559da092217e474760E2b2c3CeDd"),
    retryable_router=tca("0xa723C008e76E379c55599D2E4d93879BeaFDa79C"),
    chains=(
        ChainDescriptor(
            chain_id=ARBITRUM_ONE_CHAIN_ID,
            inbox_address=tca("0x4Dbd4fc535Ac27206064B68FfCf827b0A60BAB3f"),
            upgrade_executor_address=tca("0xCF57572261c7c2BCF21ffD220ea7d1a27D40A827"),
            name="Arbitrum One",
            explorer_url="https://arbiscan.io/address/",
        ),
        ChainDescriptor(
            chain_id=ARBITRUM_NOVA_CHAIN_ID,
            inbox_address=tca("0xc4448b71118c9071Bcb9734A0EAc55D18A153949"),
            upgrade_executor_address=tca("0x86a02dD71363c440b21F4c0E5B2Ad01Ffe1A7482"),
            name="Arbitrum Nova",
            explorer_url="https://arbitrum-nova.blockscout.com/address/",
            explorer_suffix="?tab=contract",
        ),
    ),
)
