"""
Semantic extraction: type mapping, body analysis and instruction synthesis
"""

from .body import analyze_body
from .instructions import synthesize_instructions
from .types import TypeMapper, DEFAULT_TYPE_MAPPER

__all__ = ["analyze_body", "synthesize_instructions", "TypeMapper", "DEFAULT_TYPE_MAPPER"]
