"""
py2cairo: Python class to Starknet Cairo contract transpiler
"""

from .core.errors import TranspileError, EmptyStateAccessError
from .core.models import (
    Classification, ContractModel, FunctionModel, Instruction, StorageField
)
from .core.transpiler import transpile
from .parser import ContractParser
from .translators.types import TypeMapper

__version__ = "0.1.0"
__all__ = [
    "transpile",
    "ContractParser",
    "TypeMapper",
    "ContractModel",
    "FunctionModel",
    "StorageField",
    "Instruction",
    "Classification",
    "TranspileError",
    "EmptyStateAccessError"
]
