"""
Cairo contract generation
"""

from typing import List
from ..core.models import ContractModel, FunctionModel


def _signature_params(fn: FunctionModel, state_type: str) -> str:
    # View functions take a snapshot of the state, others a mutable reference
    self_param = f"self: @{state_type}" if fn.is_view else f"ref self: {state_type}"
    params = ", ".join(f"{p.name}: {p.type}" for p in fn.parameters)
    return ", ".join(part for part in (self_param, params) if part)


def generate_interface_functions(functions: List[FunctionModel]) -> str:
    return "\n".join(
        f"    fn {fn.name}({_signature_params(fn, 'TContractState')}) -> {fn.return_type};"
        for fn in functions
    )


def generate_storage_fields(contract: ContractModel) -> str:
    return ",\n".join(
        f"        {slot.name}: {slot.type}"
        for slot in contract.storage
    )


def generate_implementation_functions(functions: List[FunctionModel]) -> str:
    blocks = []
    for fn in functions:
        lines = [f"        fn {fn.name}({_signature_params(fn, 'ContractState')}) -> {fn.return_type} {{"]
        lines.extend(f"            {instruction.render()}" for instruction in fn.instructions)
        lines.append("        }")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def generate_cairo_contract(contract: ContractModel) -> str:
    """
    Render a contract model as a Starknet Cairo module.

    Args:
        contract: Model built by ContractParser

    Returns:
        Interface trait, a blank line, then the contract module holding the
        storage struct and the embedded implementation
    """
    name = contract.name
    lines = [
        "#[starknet::interface]",
        f"pub trait I{name}<TContractState> {{",
        generate_interface_functions(contract.functions),
        "}",
        "",
        "#[starknet::contract]",
        f"mod {name} {{",
        "    use core::starknet::storage::{StoragePointerReadAccess, StoragePointerWriteAccess};",
        "",
        "    #[storage]",
        "    struct Storage {",
        generate_storage_fields(contract),
        "    }",
        "",
        "    #[abi(embed_v0)]",
        f"    impl {name}Impl of super::I{name}<ContractState> {{",
        generate_implementation_functions(contract.functions),
        "    }",
        "}"
    ]

    return "\n".join(lines)
