"""
Instruction synthesis from body analysis
"""

import logging
from typing import List

from ..core.errors import EmptyStateAccessError
from ..core.models import (
    BodyAnalysis, Classification, Instruction, InstructionKind
)

logger = logging.getLogger(__name__)


def _first_state_read(analysis: BodyAnalysis, strict: bool, function_name: str) -> List[Instruction]:
    variable = analysis.first_state_access
    if variable is None:
        if strict:
            raise EmptyStateAccessError(function_name)
        logger.warning("Function '%s' accesses no state; omitting read", function_name)
        return []
    return [Instruction(InstructionKind.READ, variable)]


def synthesize_instructions(classification: Classification,
                            analysis: BodyAnalysis,
                            strict: bool = False,
                            function_name: str = "") -> List[Instruction]:
    """
    Build the linear read/write body of a function.

    View functions read the first accessed field. Mutating functions write
    every mutation in order, then read the first accessed field if the body
    returns anything, whatever it returns.

    Args:
        classification: View or mutating
        analysis: Output of analyze_body
        strict: Raise instead of omitting a read when no field is accessed
        function_name: Used in log and error messages

    Returns:
        Ordered instruction list

    Raises:
        EmptyStateAccessError: In strict mode, when a read is needed but the
            body never touches self.<field>
    """
    if classification is Classification.VIEW:
        return _first_state_read(analysis, strict, function_name)

    instructions = [
        Instruction(InstructionKind.WRITE, mutation.variable, mutation.expression)
        for mutation in analysis.mutations
    ]
    if analysis.has_return:
        instructions.extend(_first_state_read(analysis, strict, function_name))
    return instructions
