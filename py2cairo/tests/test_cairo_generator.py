"""
Tests for Cairo code generation
"""

import pytest
from py2cairo.core.models import (
    Classification, ContractModel, FunctionModel, Instruction, InstructionKind,
    Parameter, StorageField, Visibility
)
from py2cairo.generators.cairo import (
    generate_cairo_contract,
    generate_implementation_functions,
    generate_interface_functions,
    generate_storage_fields,
)


EXPECTED_COUNTER = """\
#[starknet::interface]
pub trait ICounter<TContractState> {
    fn get_balance(self: @TContractState) -> felt252;
    fn deposit(ref self: TContractState, amount: felt252) -> felt252;
}

#[starknet::contract]
mod Counter {
    use core::starknet::storage::{StoragePointerReadAccess, StoragePointerWriteAccess};

    #[storage]
    struct Storage {
        balance: felt252
    }

    #[abi(embed_v0)]
    impl CounterImpl of super::ICounter<ContractState> {
        fn get_balance(self: @ContractState) -> felt252 {
            self.balance.read()
        }

        fn deposit(ref self: ContractState, amount: felt252) -> felt252 {
            self.balance.write(self.balance.read() + amount);
            self.balance.read()
        }
    }
}"""


def counter_model() -> ContractModel:
    return ContractModel(
        name="Counter",
        storage=[StorageField("balance", "felt252")],
        functions=[
            FunctionModel(
                name="get_balance",
                parameters=[],
                return_type="felt252",
                classification=Classification.VIEW,
                instructions=[Instruction(InstructionKind.READ, "balance")]
            ),
            FunctionModel(
                name="deposit",
                parameters=[Parameter("amount", "felt252")],
                return_type="felt252",
                classification=Classification.MUTATING,
                instructions=[
                    Instruction(InstructionKind.WRITE, "balance", "self.balance.read() + amount"),
                    Instruction(InstructionKind.READ, "balance"),
                ]
            ),
        ]
    )


def test_full_contract():
    assert generate_cairo_contract(counter_model()) == EXPECTED_COUNTER


def test_interface_self_parameter_depends_on_classification():
    functions = counter_model().functions
    lines = generate_interface_functions(functions).split("\n")

    assert lines == [
        "    fn get_balance(self: @TContractState) -> felt252;",
        "    fn deposit(ref self: TContractState, amount: felt252) -> felt252;",
    ]


def test_storage_fields_are_comma_joined_in_order():
    contract = ContractModel(
        name="T",
        storage=[StorageField("b", "bool"), StorageField("a", "u256"), StorageField("b", "felt252")]
    )
    assert generate_storage_fields(contract) == (
        "        b: bool,\n"
        "        a: u256,\n"
        "        b: felt252"
    )


def test_multiple_parameters():
    fn = FunctionModel(
        name="transfer",
        parameters=[Parameter("to", "felt252"), Parameter("amount", "u256")],
        return_type="bool",
        classification=Classification.MUTATING
    )
    assert generate_interface_functions([fn]) == (
        "    fn transfer(ref self: TContractState, to: felt252, amount: u256) -> bool;"
    )


def test_empty_function_body():
    fn = FunctionModel(
        name="noop",
        parameters=[],
        return_type="felt252",
        classification=Classification.MUTATING
    )
    assert generate_implementation_functions([fn]) == (
        "        fn noop(ref self: ContractState) -> felt252 {\n"
        "        }"
    )


def test_visibility_does_not_change_output():
    external = counter_model()
    internal = counter_model()
    for fn in internal.functions:
        fn.visibility = Visibility.INTERNAL

    assert generate_cairo_contract(internal) == generate_cairo_contract(external)


def test_degenerate_model_still_renders():
    code = generate_cairo_contract(ContractModel())

    assert code.startswith("#[starknet::interface]\npub trait I<TContractState> {\n\n}\n\n")
    assert "    struct Storage {\n\n    }" in code
    assert code.endswith("    }\n}")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
