"""
Main transpilation pipeline
"""

from typing import Dict, Mapping, Optional
from ..generators.cairo import generate_cairo_contract
from ..parser import ContractParser
from ..translators.types import TypeMapper
from ..utils.files import save_artifact


def transpile(python_source: str,
              strict: bool = False,
              type_map: Optional[Mapping[str, str]] = None,
              base_name: Optional[str] = None,
              save: bool = False) -> Dict:
    """
    Transpile a Python contract class to Cairo.

    Args:
        python_source: Module source holding the contract class
        strict: Raise EmptyStateAccessError instead of omitting a read
        type_map: Optional replacement for the annotation lookup table
        base_name: Optional output file base name
        save: Whether to write the Cairo file to disk

    Returns:
        Dict with:
            - cairo_source: Generated Cairo code
            - contract: ContractModel
            - cairo_file: Path to Cairo file (None unless save=True)

    Raises:
        SyntaxError: If the source is not valid Python
        EmptyStateAccessError: In strict mode, for a read with no field to read
    """
    type_mapper = TypeMapper(type_map) if type_map is not None else None
    contract = ContractParser(type_mapper, strict=strict).parse_source(python_source)

    cairo_source = generate_cairo_contract(contract)

    cairo_file = None
    if save:
        cairo_file = save_artifact(cairo_source, base_name or contract.name.lower() or None)

    return {
        "cairo_source": cairo_source,
        "contract": contract,
        "cairo_file": cairo_file
    }
