from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector as selector

SCHEDULE = "schedule(address,uint256,bytes,bytes32,bytes32,uint256)"
SCHEDULE_BATCH = "scheduleBatch(address[],uint256[],bytes[],bytes32,bytes32,uint256)"
EXECUTE = "execute(address,bytes)"
EXECUTE_CALL = "executeCall(address,bytes)"
SEND_TX_TO_L1 = "sendTxToL1(address,bytes)"

L1_TIMELOCK_ADDRESS = "0xe6841d92b0c345144506576ec13ecf5103ac7f49"
ZERO_BYTES32 = b"\x00" * 32
THREE_DAYS = 259200


def encode_call(signature: str, types: list[str], values: list) -> bytes:
    return selector(signature) + encode(types, values)


def schedule_calldata(target: str, payload: bytes, delay: int = THREE_DAYS) -> bytes:
    return encode_call(
        SCHEDULE,
        ["address", "uint256", "bytes", "bytes32", "bytes32", "uint256"],
        [target, 0, payload, ZERO_BYTES32, ZERO_BYTES32, delay],
    )


def schedule_batch_calldata(targets: list[str], payloads: list[bytes], values: list[int] | None = None) -> bytes:
    return encode_call(
        SCHEDULE_BATCH,
        ["address[]", "uint256[]", "bytes[]", "bytes32", "bytes32", "uint256"],
        [targets, values or [0] * len(targets), payloads, ZERO_BYTES32, ZERO_BYTES32, THREE_DAYS],
    )


def execute_calldata(action_contract: str, action_calldata: bytes) -> bytes:
    return encode_call(EXECUTE, ["address", "bytes"], [action_contract, action_calldata])


def execute_call_calldata(target: str, target_calldata: bytes) -> bytes:
    return encode_call(EXECUTE_CALL, ["address", "bytes"], [target, target_calldata])


def retryable_payload(inbox: str, target: str, payload: bytes) -> bytes:
    # (inbox, l2Target, l2Value, gasLimit, maxFeePerGas, l2Calldata)
    return encode(
        ["address", "address", "uint256", "uint256", "uint256", "bytes"],
        [inbox, target, 0, 0, 0, payload],
    )


def send_tx_to_l1_calldata(destination: str, data: bytes) -> bytes:
    return encode_call(SEND_TX_TO_L1, ["address", "bytes"], [destination, data])
