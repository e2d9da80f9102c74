"""
Type mappings and configuration constants
"""

import ast
import os

# Type mappings
PY_TYPE_TO_CAIRO = {
    "int": "felt252",
    "str": "felt252",
    "bool": "bool",
    "bigint": "u256"
}

FALLBACK_CAIRO_TYPE = "felt252"

# Augmented assignment operators recognized as state mutations
AUG_OP_TO_CAIRO = {
    ast.Add: "+",
    ast.Sub: "-"
}

# Source conventions
INSTANCE_REFERENCE = "self"
VIEW_DECORATOR = "view"
DEFAULT_CONTRACT_NAME = "Contract"

OUTPUT_DIR = os.getenv("PY2CAIRO_OUTPUT_DIR", "./cairo_out")
