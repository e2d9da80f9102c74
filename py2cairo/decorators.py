"""
Markers for contract classes.

These are no-op at runtime; the transpiler reads them from the syntax tree.

Usage:
    from py2cairo.decorators import view, external, bigint

    class Vault:
        balance: int
        supply: bigint

        @view
        def get_balance(self) -> int:
            return self.balance

        @external
        def deposit(self, amount: int) -> int:
            self.balance += amount
            return self.balance
"""

from typing import Callable, NewType, TypeVar

F = TypeVar('F', bound=Callable)

# Annotation for wide unsigned integers (maps to u256)
bigint = NewType('bigint', int)


def view(func: F) -> F:
    """
    Mark a method as read-only.

    The generated function takes a snapshot of the contract state and its
    body is a single read of the first field the method accesses.
    """
    return func


def external(func: F) -> F:
    """
    Mark a method as state-changing.

    Undecorated methods are treated the same way; this only documents intent.
    """
    return func


__all__ = ['view', 'external', 'bigint']
