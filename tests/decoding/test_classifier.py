import pytest

from nethermind.dao_decoder.config import DEFAULT_CONFIG, GovernanceConfig
from nethermind.dao_decoder.decoding.classifier import GovernanceClassifier
from nethermind.dao_decoder.exceptions import DecodeFault, DecodingError, UnrecognizedInbox
from nethermind.dao_decoder.types.routing import ChainDescriptor, RouteKind

from ..utils import retryable_payload


@pytest.fixture(name="classifier")
def fixture_classifier() -> GovernanceClassifier:
    return GovernanceClassifier(DEFAULT_CONFIG)


def test_classify_upgrade_executor(classifier):
    route = classifier.classify(DEFAULT_CONFIG.upgrade_executor.lower())

    assert route.kind == RouteKind.direct_executor
    assert route.target == DEFAULT_CONFIG.upgrade_executor
    assert route.chain_id == 1


def test_classify_retryable_router(classifier):
    route = classifier.classify(DEFAULT_CONFIG.retryable_router)

    assert route.kind == RouteKind.retryable_envelope
    assert route.chain_id is None


def test_classify_inbox(classifier, arb_nova):
    route = classifier.classify(arb_nova.inbox_address)

    assert route.kind == RouteKind.direct_inbox_call
    assert route.chain_id == 42170


def test_classify_unknown(classifier, random_address):
    address = random_address()
    route = classifier.classify(address)

    assert route.kind == RouteKind.unrecognized
    assert route.target == address


def test_satellite_executors_are_not_routes(classifier, arb_one):
    # Satellite executors are only reachable through retryable tickets
    assert classifier.classify(arb_one.upgrade_executor_address).kind == RouteKind.unrecognized


def test_unwrap_retryable(classifier, arb_one):
    inner = b"\xbc\xa8\xc7\xb5" + b"\x00" * 64
    chain_id, target, payload = classifier.unwrap_retryable(
        retryable_payload(arb_one.inbox_address, arb_one.upgrade_executor_address, inner)
    )

    assert chain_id == 42161
    assert target == arb_one.upgrade_executor_address
    assert payload == inner


def test_unwrap_retryable_unknown_inbox(classifier, arb_one, random_address):
    inbox = random_address()

    with pytest.raises(UnrecognizedInbox) as exc:
        classifier.unwrap_retryable(retryable_payload(inbox, arb_one.upgrade_executor_address, b""))

    assert inbox in str(exc.value)


def test_unwrap_retryable_malformed(classifier):
    with pytest.raises(DecodeFault):
        classifier.unwrap_retryable(b"\x00" * 40)


def test_conflicting_routing_config(random_address):
    executor = random_address()
    config = GovernanceConfig(
        upgrade_executor=executor,
        retryable_router=random_address(),
        chains=(ChainDescriptor(chain_id=5, inbox_address=executor, upgrade_executor_address=random_address()),),
    )

    with pytest.raises(DecodingError):
        GovernanceClassifier(config)


def test_routing_table_is_read_only(classifier, random_address):
    with pytest.raises(TypeError):
        classifier.routing_table[random_address()] = None  # type: ignore[index]
