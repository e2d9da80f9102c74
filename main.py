#!/usr/bin/env python3
"""
py2cairo demo - Python class to Cairo transpiler
"""

from py2cairo import transpile
from py2cairo.core.config import OUTPUT_DIR


def example_counter():
    """Example: View and mutating functions over one field"""
    print("\n" + "="*70)
    print("Example 1: Counter")
    print("="*70)

    source = '''
class Counter:
    balance: int

    @view
    def get_balance(self) -> int:
        return self.balance

    def deposit(self, amount: int) -> int:
        self.balance += amount
        return self.balance
'''

    result = transpile(source, base_name="counter", save=True)

    print(f"\nGenerated file: {result['cairo_file']}")
    print(f"\nCairo source:\n{result['cairo_source']}")

    return result


def example_registry():
    """Example: Several fields, plain assignments, no return"""
    print("\n" + "="*70)
    print("Example 2: Registry")
    print("="*70)

    source = '''
class Registry:
    owner: str
    supply: bigint
    frozen: bool

    def configure(self, new_owner: str, supply: bigint):
        self.owner = new_owner
        self.supply = supply
        self.frozen = False

    @view
    def get_supply(self) -> bigint:
        return self.supply
'''

    result = transpile(source, base_name="registry", save=True)

    print(f"\nGenerated file: {result['cairo_file']}")
    print(f"\nCairo source:\n{result['cairo_source']}")

    return result


def main():
    """Run all examples"""
    results = []

    try:
        results.append(example_counter())
        results.append(example_registry())

        print("\n" + "="*70)
        print("✓ All examples completed successfully!")
        print(f"✓ Generated {len(results)} files in {OUTPUT_DIR}/")
        print("="*70)

        return 0

    except Exception as e:
        print(f"\n✗ Error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    exit(main())
