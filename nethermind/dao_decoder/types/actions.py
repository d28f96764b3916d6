from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from eth_typing import ChecksumAddress

# Disabling naming check that wants enums to use UPPER_CASE
# pylint: disable=invalid-name


class ActionType(Enum):
    """How the final governance call is executed"""

    call = "CALL"
    delegate_call = "DELEGATECALL"


@dataclass(frozen=True)
class Action:
    """
    A single decoded governance action.  Produced only by the decode pipeline, and never mutated afterwards.
    """

    type: ActionType

    address: ChecksumAddress
    """ Target of a CALL, or the action contract executed by a DELEGATECALL """

    chain_id: int
    """ Chain the action executes on """

    call_data: bytes
    """ Raw calldata sent to ``address`` """

    decoded_call_data: str = ""
    """ Human-readable call, ie 'perform()'.  Empty when no signature is known """

    @property
    def call_data_hex(self) -> str:
        return "0x" + self.call_data.hex()

    @property
    def selector(self) -> bytes | None:
        """Leading 4 bytes of call_data, or None when the call carries no selector"""
        if len(self.call_data) < 4:
            return None
        return self.call_data[:4]

    def with_decoding(self, decoded_call_data: str) -> "Action":
        """Returns a copy of the action with decoded_call_data set"""
        return replace(self, decoded_call_data=decoded_call_data)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation, keyed the same way as the governance decoder web UI"""
        return {
            "type": self.type.value,
            "address": self.address,
            "chainID": self.chain_id,
            "callData": self.call_data_hex,
            "decodedCallData": self.decoded_call_data,
        }
