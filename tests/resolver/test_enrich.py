import asyncio

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector as selector

from nethermind.dao_decoder.exceptions import ResolverHostError, SignatureResolverError
from nethermind.dao_decoder.resolver import ChainedResolver, describe_with_signature, enrich_actions
from nethermind.dao_decoder.types import Action, ActionType

TRANSFER = "transfer(address,uint256)"


class FakeResolver:
    def __init__(self, signatures: dict[bytes, str] | None = None, error: Exception | None = None, delay: float = 0):
        self.signatures = signatures or {}
        self.error = error
        self.delay = delay
        self.calls: list[tuple[bytes, str, int]] = []

    async def resolve(self, selector: bytes, context_address: str, chain_id: int) -> str | None:
        self.calls.append((selector, context_address, chain_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.signatures.get(selector)


def _transfer_action(random_address, amount: int = 5) -> tuple[Action, str]:
    recipient = random_address()
    call_data = selector(TRANSFER) + encode(["address", "uint256"], [recipient, amount])
    return Action(ActionType.call, random_address(), 42161, call_data), recipient


def test_enrich_fills_missing_decodings(random_address):
    transfer_action, recipient = _transfer_action(random_address)
    perform_action = Action(ActionType.delegate_call, random_address(), 1, bytes.fromhex("b147f40c"), "perform()")
    empty_action = Action(ActionType.call, random_address(), 1, b"")

    resolver = FakeResolver({selector(TRANSFER): TRANSFER})
    actions = asyncio.run(enrich_actions([perform_action, transfer_action, empty_action], resolver))

    assert actions[0] is perform_action
    assert actions[1].decoded_call_data == f"transfer(address: {recipient}, uint256: 5)"
    assert actions[1].call_data == transfer_action.call_data
    assert actions[2] is empty_action
    assert resolver.calls == [(selector(TRANSFER), transfer_action.address, 42161)]

    # Originals are never mutated
    assert transfer_action.decoded_call_data == ""


def test_enrich_without_resolver(random_address):
    action, _ = _transfer_action(random_address)
    assert asyncio.run(enrich_actions([action], None)) == [action]


def test_unknown_selector_leaves_action(random_address):
    action, _ = _transfer_action(random_address)
    assert asyncio.run(enrich_actions([action], FakeResolver())) == [action]


def test_resolver_error_leaves_action(random_address):
    action, _ = _transfer_action(random_address)
    resolver = FakeResolver(error=ResolverHostError("503"))

    assert asyncio.run(enrich_actions([action], resolver)) == [action]


def test_resolver_timeout_leaves_action(random_address):
    action, _ = _transfer_action(random_address)
    resolver = FakeResolver({selector(TRANSFER): TRANSFER}, delay=5)

    assert asyncio.run(enrich_actions([action], resolver, timeout=0.01)) == [action]


def test_unexpected_resolver_error_only_affects_its_action(random_address):
    transfer_action, recipient = _transfer_action(random_address)
    broken_action = Action(ActionType.call, random_address(), 1, bytes.fromhex("deadbeef"))

    class PartlyBrokenResolver(FakeResolver):
        async def resolve(self, selector: bytes, context_address: str, chain_id: int) -> str | None:
            if selector == bytes.fromhex("deadbeef"):
                raise KeyError("results")
            return await super().resolve(selector, context_address, chain_id)

    resolver = PartlyBrokenResolver({selector(TRANSFER): TRANSFER})
    actions = asyncio.run(enrich_actions([broken_action, transfer_action], resolver))

    assert actions[0] is broken_action
    assert actions[1].decoded_call_data == f"transfer(address: {recipient}, uint256: 5)"


def test_describe_with_mismatched_arguments():
    call_data = selector(TRANSFER) + b"\x00" * 10
    assert describe_with_signature(call_data, TRANSFER) == TRANSFER


def test_describe_with_unparseable_signature():
    assert describe_with_signature(b"\x00" * 4, "not a signature") == "not a signature"


def test_chained_resolver_falls_through():
    sel = selector(TRANSFER)
    failing = FakeResolver(error=SignatureResolverError("down"))
    empty = FakeResolver()
    found = FakeResolver({sel: TRANSFER})
    never_called = FakeResolver({sel: "other()"})

    chained = ChainedResolver(failing, empty, found, never_called)

    assert asyncio.run(chained.resolve(sel, "0x" + "00" * 20, 1)) == TRANSFER
    assert len(failing.calls) == len(empty.calls) == len(found.calls) == 1
    assert not never_called.calls


def test_chained_resolver_miss():
    assert asyncio.run(ChainedResolver(FakeResolver()).resolve(b"\x00" * 4, "0x" + "00" * 20, 1)) is None
