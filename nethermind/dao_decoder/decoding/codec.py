from functools import lru_cache
from typing import Any, Sequence

from eth_abi import decode as eth_abi_decode
from eth_abi import encode as eth_abi_encode
from eth_abi.exceptions import DecodingError as EthAbiDecodingError
from eth_abi.exceptions import EncodingError as EthAbiEncodingError
from eth_abi.exceptions import InsufficientDataBytes, NonEmptyPaddingBytes
from eth_abi.grammar import ABIType, BasicType, TupleType
from eth_abi.grammar import normalize
from eth_abi.grammar import parse as _parse_type_str
from eth_utils import decode_hex, to_checksum_address

from nethermind.dao_decoder.exceptions import DecodeFault, EncodeFault

SELECTOR_LENGTH = 4


@lru_cache(maxsize=256)
def parse_type_str(type_str: str) -> ABIType:
    """Parses an ABI type string into its grammar node, expanding aliases like uint -> uint256"""
    return _parse_type_str(normalize(type_str))


def hex_to_bytes(value: str) -> bytes:
    """
    Parses a hex string into bytes.  Accepts ``0x`` prefixed and bare hex, ignoring surrounding whitespace.

    >>> hex_to_bytes("0xb147f40c")
    b'\\xb1G\\xf4\\x0c'

    :param value: hex encoded string
    :return: decoded bytes
    """
    try:
        return decode_hex(value.strip())
    except (ValueError, TypeError) as e:  # binascii.Error & UnicodeEncodeError subclass ValueError
        raise DecodeFault(f"Input is not valid hex data: {value[:42]!r}") from e


def split_selector(calldata: bytes) -> tuple[bytes, bytes]:
    """Splits calldata into its 4 byte function selector and the ABI encoded parameter block"""
    if len(calldata) < SELECTOR_LENGTH:
        raise DecodeFault(f"Calldata 0x{calldata.hex()} is shorter than a 4 byte function selector")
    return calldata[:SELECTOR_LENGTH], calldata[SELECTOR_LENGTH:]


def decode(types: Sequence[str], data: bytes | bytearray) -> tuple[Any, ...]:
    """
    Decodes an ABI encoded parameter block against a list of type strings.  Addresses, including addresses
    nested inside arrays and tuples, are returned as checksummed hex strings.

    Unlike the lenient decoding used when classifying large backfills, malformed data is never skipped:
    truncated buffers, invalid offsets and dirty padding raise a DecodeFault.

    :param types: ABI type strings, ie ``["address", "bytes", "uint256[]"]``
    :param data: parameter block, without the function selector
    :return: tuple of decoded values, one per type
    """
    types = [normalize(typ) for typ in types]
    try:
        decoded = eth_abi_decode(types, bytes(data))
    except InsufficientDataBytes as e:
        raise DecodeFault(f"Insufficient data bytes while decoding 0x{data.hex()} for types {types}") from e
    except NonEmptyPaddingBytes as e:
        raise DecodeFault(f"Non-empty padding bytes while decoding 0x{data.hex()} for types {types}") from e
    except (EthAbiDecodingError, OverflowError) as e:
        raise DecodeFault(f"Malformed ABI data while decoding 0x{data.hex()} for types {types}: {e}") from e

    return tuple(_format_decoded(parse_type_str(typ), value) for typ, value in zip(types, decoded, strict=True))


def encode(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    ABI encodes values against a list of type strings.  Inverse of :func:`decode`

    :param types: ABI type strings
    :param values: one value per type
    :return: encoded parameter block
    """
    if len(types) != len(values):
        raise EncodeFault(f"Cannot encode {len(values)} values for {len(types)} types {list(types)}")
    try:
        return eth_abi_encode([normalize(typ) for typ in types], list(values))
    except EthAbiEncodingError as e:
        raise EncodeFault(f"Cannot encode {values} as {list(types)}: {e}") from e


def _format_decoded(abi_type: ABIType, value: Any) -> Any:
    if abi_type.is_array:
        item_type = abi_type.item_type
        return tuple(_format_decoded(item_type, item) for item in value)
    if isinstance(abi_type, TupleType):
        return tuple(_format_decoded(comp, item) for comp, item in zip(abi_type.components, value, strict=True))
    if isinstance(abi_type, BasicType) and abi_type.base == "address":
        return to_checksum_address(value)
    return value


def format_value(type_str: str, value: Any) -> str:
    """
    Formats a decoded value for display.

    :param type_str: ABI type, ie "address", "uint256", "bytes32[]"
    :param value: decoded value
    :return: Human-readable string representation
    """
    abi_type = parse_type_str(type_str)
    if abi_type.is_array:
        item_str = abi_type.item_type.to_type_str()
        return "[" + ", ".join(format_value(item_str, item) for item in value) + "]"
    if isinstance(abi_type, TupleType):
        return (
            "("
            + ", ".join(format_value(comp.to_type_str(), item) for comp, item in zip(abi_type.components, value))
            + ")"
        )

    match abi_type.base:
        case "address":
            return to_checksum_address(value)
        case "bytes":
            return "0x" + bytes(value).hex()
        case "string":
            return f'"{value}"'
        case _:
            return str(value)
