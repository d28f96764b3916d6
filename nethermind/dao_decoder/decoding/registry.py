import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from rich.table import Table

from nethermind.dao_decoder.exceptions import SelectorCollision, SelectorNotFound
from nethermind.dao_decoder.types.decoding import DecodedCall

from .codec import split_selector
from .function_decoders import FunctionSignature
from .utils import filter_functions

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("decoding")


class SignatureRegistry:
    """

    Lookup table from 4 byte selectors to function signatures for a single contract interface.  Registries are
    built once from a curated signature set and are read-only afterwards.  Two different signatures sharing a
    selector are rejected when the registry is built, so lookups never have to resolve conflicts.

    """

    name: str
    """ Name of the contract interface, ie 'L1Timelock' """

    functions: Mapping[bytes, FunctionSignature]
    """ Read-only mapping from 4 byte selectors to function signatures """

    def __init__(self, name: str, signatures: Iterable[FunctionSignature | str]):
        self.name = name

        table: dict[bytes, FunctionSignature] = {}
        for sig in signatures:
            function = sig if isinstance(sig, FunctionSignature) else FunctionSignature.from_signature(sig)
            existing = table.get(function.selector)

            if existing is None:
                logger.debug(f"Adding {function.signature} to {name} registry with selector {function.selector_hex}")
                table[function.selector] = function
                continue

            if existing.signature == function.signature:
                continue

            raise SelectorCollision(
                f"{name} signatures {existing.signature} and {function.signature} share the "
                f"selector {function.selector_hex}"
            )

        self.functions = MappingProxyType(table)

    @classmethod
    def from_abi(cls, name: str, abi_json: list[dict[str, Any]]) -> "SignatureRegistry":
        """
        Builds a registry from a JSON ABI.  Events, errors and constructors are ignored.

        :param name: Name of ABI
        :param abi_json: ABI data in the JSON format emitted by solc & block explorers
        """
        return cls(name, [FunctionSignature.from_abi(func) for func in filter_functions(abi_json)])

    def __contains__(self, selector: object) -> bool:
        return selector in self.functions

    def __iter__(self) -> Iterator[FunctionSignature]:
        return iter(self.functions.values())

    def __len__(self) -> int:
        return len(self.functions)

    def get(self, selector: bytes) -> FunctionSignature | None:
        """Returns the signature for a selector, or None if the selector is unknown"""
        return self.functions.get(selector)

    def match(self, calldata: bytes) -> FunctionSignature:
        """
        Returns the function signature matching the leading 4 bytes of calldata

        :param calldata: selector followed by ABI encoded parameters
        :raises SelectorNotFound: if no signature in the registry has the selector
        """
        selector, _ = split_selector(calldata)
        function = self.functions.get(selector)
        if function is None:
            raise SelectorNotFound(f"Function with selector 0x{selector.hex()} not found in {self.name} ABI")
        return function

    def decode(self, calldata: bytes) -> DecodedCall:
        """Matches calldata to a signature and decodes its parameters"""
        return self.match(calldata).decode(calldata)

    def describe(self, calldata: bytes) -> str:
        """Decodes calldata and renders it as ``name(type: value, ...)``"""
        return self.decode(calldata).describe()

    def signature_table(self, full_signatures: bool = True) -> Table:
        """
        Returns a rich table with every selector in the registry.  Used for printing out signatures in the CLI
        """
        table = Table(title=f"[bold magenta]{self.name} Signatures", min_width=80, show_lines=False)
        table.add_column("Selector", style="bold")
        table.add_column("Function")

        for function in sorted(self.functions.values(), key=lambda f: f.name):
            table.add_row(function.selector_hex, function.id_str(full_signatures))

        return table
