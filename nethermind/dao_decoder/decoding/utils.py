from typing import Any

from eth_typing import ABIFunction

# Solidity keywords that may follow a parameter type in a human-readable fragment
_PARAM_MODIFIERS = {"memory", "calldata", "storage", "indexed", "payable"}


def abi_to_signature(abi: ABIFunction) -> str:
    """
    Converts a JSON ABI function entry to its canonical signature.

    >>> abi_to_signature({"type": "function", "name": "transfer", "inputs": [
    ...     {"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}
    ... ]})
    'transfer(address,uint256)'

    """
    collapsed = [collapse_if_tuple(abi_input) for abi_input in abi.get("inputs", [])]
    return f"{abi['name']}({','.join(collapsed)})"


def collapse_if_tuple(abi_params: dict[str, Any]) -> str:
    """
    Converts a tuple from a dict to a parenthesized list of its types.

    >>> collapse_if_tuple(
    ...     {
    ...         'components': [
    ...             {'name': 'anAddress', 'type': 'address'},
    ...             {'name': 'anInt', 'type': 'uint256'},
    ...             {'name': 'someBytes', 'type': 'bytes'},
    ...         ],
    ...         'type': 'tuple',
    ...     }
    ... )
    '(address,uint256,bytes)'
    """

    typ = abi_params["type"]
    if not isinstance(typ, str):
        raise TypeError(f"The 'type' must be a string, but got {typ} of type {type(typ)}")

    if not typ.startswith("tuple"):
        return typ

    delimited = ",".join(collapse_if_tuple(c) for c in abi_params["components"])
    # Whatever comes after "tuple" is the array dims.  The ABI spec states that
    # this will have the form "", "[]", or "[k]".
    array_dim = typ[5:]
    return f"({delimited}){array_dim}"


def filter_functions(contract_abi: list[dict[str, Any]]) -> list[ABIFunction]:
    """Filters out all non-function ABIs"""
    return [abi for abi in contract_abi if abi.get("type") == "function"]  # type: ignore[misc]


def _closing_paren(text: str, open_index: int) -> int:
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError(f"Unbalanced parentheses in signature {text!r}")


def split_top_level(params: str) -> list[str]:
    """
    Splits a parameter list on commas that are not nested inside tuple parentheses

    >>> split_top_level("address[] targets, (uint256,bytes) call, bytes32 salt")
    ['address[] targets', '(uint256,bytes) call', 'bytes32 salt']
    """
    parts, depth, current = [], 0, ""
    for char in params:
        if char == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        current += char

    if current.strip():
        parts.append(current.strip())
    return parts


def _parse_param(param: str) -> tuple[str, str]:
    """Returns (canonical_type, name) for a single human-readable parameter declaration"""
    if param.startswith("tuple("):
        param = param[5:]

    if param.startswith("("):
        close = _closing_paren(param, 0)
        inner = ",".join(_parse_param(p)[0] for p in split_top_level(param[1:close]))
        rest = param[close + 1 :].split()
        array_dims = ""
        if rest and rest[0].startswith("["):
            array_dims = rest.pop(0)
        typ = f"({inner}){array_dims}"
    else:
        tokens = param.split()
        typ, rest = tokens[0], tokens[1:]

    names = [tok for tok in rest if tok not in _PARAM_MODIFIERS]
    return typ, names[-1] if names else ""


def parse_signature(text: str) -> tuple[str, list[str], list[str]]:
    """
    Parses a canonical signature or a human-readable function fragment into the function name,
    parameter types and parameter names.  Modifiers and return declarations are ignored.

    >>> parse_signature("function execute(address upgrade, bytes upgradeCallData) payable")
    ('execute', ['address', 'bytes'], ['upgrade', 'upgradeCallData'])
    >>> parse_signature("perform()")
    ('perform', [], [])

    :param text: ``name(type1,type2)`` or ``function name(type1 name1, type2 name2) ...``
    :return: (name, input_types, input_names)
    """
    text = text.strip()
    if text.startswith("function "):
        text = text[len("function ") :].strip()

    open_index = text.find("(")
    if open_index <= 0:
        raise ValueError(f"Invalid function signature {text!r}")

    name = text[:open_index].strip()
    close_index = _closing_paren(text, open_index)

    input_types, input_names = [], []
    for param in split_top_level(text[open_index + 1 : close_index]):
        typ, param_name = _parse_param(param)
        input_types.append(typ)
        input_names.append(param_name)

    return name, input_types, input_names
