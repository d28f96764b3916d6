from dataclasses import dataclass, field
from typing import Any

from eth_abi.grammar import normalize
from eth_typing import ABIFunction
from eth_utils.abi import function_signature_to_4byte_selector

from nethermind.dao_decoder.exceptions import SelectorNotFound
from nethermind.dao_decoder.types.decoding import DecodedCall

from .codec import decode, format_value, split_selector
from .utils import abi_to_signature, parse_signature


@dataclass(frozen=True)
class FunctionSignature:
    """
    Represents a single EVM function declaration.  Precomputes the canonical signature and 4 byte selector
    so calldata can be dispatched with a single dictionary lookup
    """

    name: str
    input_types: tuple[str, ...]
    input_names: tuple[str, ...] = ()

    signature: str = field(init=False)
    """ Canonical signature, ie ``execute(address,bytes)`` """

    selector: bytes = field(init=False)
    """ First 4 bytes of the keccak hash of the canonical signature """

    def __post_init__(self):
        types = tuple(normalize(typ) for typ in self.input_types)
        names = tuple(self.input_names) or ("",) * len(types)
        if len(names) != len(types):
            raise ValueError(f"{self.name} declares {len(types)} parameter types but {len(names)} names")

        object.__setattr__(self, "input_types", types)
        object.__setattr__(self, "input_names", names)
        object.__setattr__(self, "signature", f"{self.name}({','.join(types)})")
        object.__setattr__(self, "selector", function_signature_to_4byte_selector(self.signature))

    @classmethod
    def from_signature(cls, text: str) -> "FunctionSignature":
        """
        Builds a FunctionSignature from a canonical signature (``schedule(address,uint256,...)``) or from a
        human-readable fragment (``function schedule(address target, uint256 value, ...)``)
        """
        name, types, names = parse_signature(text)
        return cls(name=name, input_types=tuple(types), input_names=tuple(names))

    @classmethod
    def from_abi(cls, abi_function: ABIFunction) -> "FunctionSignature":
        """Builds a FunctionSignature from a JSON ABI function entry"""
        name, types, _ = parse_signature(abi_to_signature(abi_function))
        names = [param.get("name", "") for param in abi_function.get("inputs", [])]
        return cls(name=name, input_types=tuple(types), input_names=tuple(names))

    @property
    def selector_hex(self) -> str:
        """0x prefixed hex selector"""
        return "0x" + self.selector.hex()

    def decode(self, calldata: bytes) -> DecodedCall:
        """
        Decodes full calldata, including the selector, against this signature.

        :param calldata: selector followed by ABI encoded parameters
        :return: DecodedCall with one value per parameter
        """
        selector, params = split_selector(calldata)
        if selector != self.selector:
            raise SelectorNotFound(f"Calldata selector 0x{selector.hex()} does not belong to {self.signature}")

        return DecodedCall(function=self, values=decode(self.input_types, params))

    def describe(self, values: tuple[Any, ...]) -> str:
        """
        Renders decoded values as ``name(type: value, ...)``

        >>> FunctionSignature.from_signature("perform()").describe(())
        'perform()'
        """
        params = ", ".join(
            f"{typ}: {format_value(typ, value)}" for typ, value in zip(self.input_types, values, strict=True)
        )
        return f"{self.name}({params})"

    def id_str(self, full_signature: bool = True) -> str:
        """
        Returns ID string for function.  If full_signature is True, returns the function name & parameter types.
        If full_signature is false, returns function name
        """
        if full_signature:
            return self.signature
        return self.name
