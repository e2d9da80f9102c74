"""
Tests that contract markers leave classes runnable as plain Python
"""

import inspect

from py2cairo.decorators import view, external, bigint
from py2cairo.parser import ContractParser


class Wallet:
    balance: int
    supply: bigint

    def __init__(self):
        self.balance = 0
        self.supply = bigint(0)

    @view
    def get_balance(self) -> int:
        return self.balance

    @external
    def deposit(self, amount: int) -> int:
        self.balance += amount
        return self.balance


def test_markers_are_no_ops():
    wallet = Wallet()

    assert wallet.deposit(5) == 5
    assert wallet.get_balance() == 5
    assert bigint(7) == 7


def test_marked_class_translates():
    contract = ContractParser().parse_source(inspect.getsource(Wallet))

    assert [(s.name, s.type) for s in contract.storage] == [("balance", "felt252"), ("supply", "u256")]
    assert [fn.is_view for fn in contract.functions] == [False, True, False]
