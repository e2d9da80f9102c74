"""
Example contract: a counter with an owner.

Translate with:
    py2cairo examples/counter.py
"""

from py2cairo.decorators import view, external, bigint


class Counter:
    balance: int
    owner: str
    total_supply: bigint
    paused: bool

    @view
    def get_balance(self) -> int:
        return self.balance

    @view
    def is_paused(self) -> bool:
        return self.paused

    @external
    def deposit(self, amount: int) -> int:
        self.balance += amount
        return self.balance

    @external
    def withdraw(self, amount: int) -> int:
        self.balance -= amount
        self.total_supply -= amount
        return self.balance

    def set_owner(self, new_owner: str):
        self.owner = new_owner

    def pause(self):
        self.paused = True
