import random

import pytest
from eth_utils import to_checksum_address

from nethermind.dao_decoder.config import DEFAULT_CONFIG
from nethermind.dao_decoder.decoding import GovernanceDecoder


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address():
        return to_checksum_address(random.randbytes(20).hex())

    return _generate_random_address


@pytest.fixture(name="decoder")
def fixture_decoder() -> GovernanceDecoder:
    return GovernanceDecoder(DEFAULT_CONFIG)


@pytest.fixture(name="arb_one")
def fixture_arb_one():
    return DEFAULT_CONFIG.chains_by_id[42161]


@pytest.fixture(name="arb_nova")
def fixture_arb_nova():
    return DEFAULT_CONFIG.chains_by_id[42170]
