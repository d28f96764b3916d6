from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from nethermind.dao_decoder.decoding.function_decoders import FunctionSignature


@dataclass(frozen=True)
class DecodedCall:
    """Result of matching calldata against a FunctionSignature"""

    function: "FunctionSignature"
    values: tuple[Any, ...]

    def __post_init__(self):
        if len(self.values) != len(self.function.input_types):
            raise ValueError(
                f"{self.function.signature} expects {len(self.function.input_types)} values, got {len(self.values)}"
            )

    @property
    def name(self) -> str:
        return self.function.name

    @property
    def inputs(self) -> dict[str, Any]:
        """Decoded values keyed by parameter name.  Unnamed parameters are keyed as arg0, arg1, ..."""
        return {
            name or f"arg{index}": value
            for index, (name, value) in enumerate(zip(self.function.input_names, self.values, strict=True))
        }

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def describe(self) -> str:
        """Human-readable rendering, ie ``executeCall(address: 0xAbC..., bytes: 0x1234)``"""
        return self.function.describe(self.values)
