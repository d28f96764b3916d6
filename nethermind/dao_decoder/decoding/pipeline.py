from eth_typing import ChecksumAddress

from nethermind.dao_decoder.config import DEFAULT_CONFIG, GovernanceConfig
from nethermind.dao_decoder.exceptions import (
    DecodeFault,
    SelectorNotFound,
    UnrecognizedExecutorMethod,
    UnrecognizedTarget,
    UnrecognizedTimelockMethod,
    UnsupportedDirectInboxCall,
)
from nethermind.dao_decoder.types.actions import Action, ActionType
from nethermind.dao_decoder.types.routing import RouteKind

from .abis import ARBSYS, L1_TIMELOCK, PERFORM_SELECTOR, PERFORM_SIGNATURE, UPGRADE_EXECUTOR
from .classifier import GovernanceClassifier
from .codec import hex_to_bytes
from .registry import SignatureRegistry


class GovernanceDecoder:
    """

    Unwraps Arbitrum DAO governance calldata into a list of Actions.  Decoding is a single linear pass through
    a fixed number of layers:

        1. ArbSys ``sendTxToL1`` relay (optional)
        2. L1 timelock ``schedule`` / ``scheduleBatch``
        3. Routing of each scheduled target (upgrade executor, or a retryable ticket to a satellite chain)
        4. Upgrade executor ``execute`` / ``executeCall``

    The decoder only holds read-only lookup tables, so one instance can be shared between threads.  Every
    fault aborts the whole input; there are no partial results.

    """

    config: GovernanceConfig
    classifier: GovernanceClassifier

    relay: SignatureRegistry
    timelock: SignatureRegistry
    executor: SignatureRegistry

    def __init__(
        self,
        config: GovernanceConfig = DEFAULT_CONFIG,
        relay: SignatureRegistry = ARBSYS,
        timelock: SignatureRegistry = L1_TIMELOCK,
        executor: SignatureRegistry = UPGRADE_EXECUTOR,
    ):
        self.config = config
        self.classifier = GovernanceClassifier(config)
        self.relay = relay
        self.timelock = timelock
        self.executor = executor

    def decode(self, calldata: bytes | str) -> list[Action]:
        """
        Decodes a timelock call, or an ArbSys relay wrapping one, into Actions.

        :param calldata: calldata bytes or hex string
        :return: one Action per scheduled call, in schedule order
        """
        if isinstance(calldata, str):
            calldata = hex_to_bytes(calldata)

        timelock_calldata = self.unwrap_relay(calldata)
        return [self.route_call(target, payload) for target, payload in self.schedule_calls(timelock_calldata)]

    def unwrap_relay(self, calldata: bytes) -> bytes:
        """
        Strips an ArbSys ``sendTxToL1`` wrapper.  Anything else is returned unchanged and treated as a
        timelock call.
        """
        function = self.relay.get(calldata[:4])
        if function is None or function.name != "sendTxToL1":
            return calldata

        _, data = function.decode(calldata)
        return data

    def schedule_calls(self, calldata: bytes) -> list[tuple[ChecksumAddress, bytes]]:
        """
        Decodes the L1 timelock call into (target, payload) pairs.

        :raises UnrecognizedTimelockMethod: if calldata is not a schedule or scheduleBatch call
        """
        try:
            function = self.timelock.match(calldata)
        except SelectorNotFound as e:
            raise UnrecognizedTimelockMethod(
                f"Could not find L1Timelock method for selector 0x{calldata[:4].hex()}"
            ) from e

        match function.name:
            case "scheduleBatch":
                targets, _, payloads, _, _, _ = function.decode(calldata)
                if len(targets) != len(payloads):
                    raise DecodeFault(
                        f"scheduleBatch has {len(targets)} targets but {len(payloads)} payloads"
                    )
                return list(zip(targets, payloads))

            case "schedule":
                target, _, data, _, _, _ = function.decode(calldata)
                return [(target, data)]

            case _:
                raise UnrecognizedTimelockMethod(f"Unrecognized L1Timelock method {function.name}")

    def route_call(self, target: str, payload: bytes) -> Action:
        """
        Routes a single scheduled call to the upgrade executor decoding for the chain it executes on.
        """
        route = self.classifier.classify(target)

        match route.kind:
            case RouteKind.direct_executor:
                return self.decode_executor_call(payload, self.config.home_chain_id)

            case RouteKind.retryable_envelope:
                chain_id, _, inner_payload = self.classifier.unwrap_retryable(payload)
                return self.decode_executor_call(inner_payload, chain_id)

            case RouteKind.direct_inbox_call:
                raise UnsupportedDirectInboxCall(
                    f"L1Timelock calls directly to inbox {route.target} (chain {route.chain_id}) not supported"
                )

            case _:
                raise UnrecognizedTarget(f"Unrecognized L1Timelock target {route.target}")

    def decode_executor_call(self, payload: bytes, chain_id: int) -> Action:
        """
        Decodes an upgrade executor call into the final Action.

        :raises UnrecognizedExecutorMethod: if payload is not an execute or executeCall call
        """
        try:
            function = self.executor.match(payload)
        except SelectorNotFound as e:
            raise UnrecognizedExecutorMethod(
                f"Could not find UpgradeExecutor method for selector 0x{payload[:4].hex()}"
            ) from e

        match function.name:
            case "execute":
                action_contract, action_calldata = function.decode(payload)
                return Action(
                    type=ActionType.delegate_call,
                    address=action_contract,
                    chain_id=chain_id,
                    call_data=action_calldata,
                    decoded_call_data=PERFORM_SIGNATURE if action_calldata == PERFORM_SELECTOR else "",
                )

            case "executeCall":
                target, target_calldata = function.decode(payload)
                return Action(
                    type=ActionType.call,
                    address=target,
                    chain_id=chain_id,
                    call_data=target_calldata,
                )

            case _:
                raise UnrecognizedExecutorMethod(f"Unrecognized UpgradeExecutor method {function.name}")


_default_decoder = GovernanceDecoder()


def decode(calldata: bytes | str) -> list[Action]:
    """Decodes governance calldata with the default Arbitrum mainnet configuration"""
    return _default_decoder.decode(calldata)
