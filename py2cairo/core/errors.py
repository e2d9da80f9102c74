"""
Exceptions raised by the transpiler
"""


class TranspileError(Exception):
    """Base class for translation failures"""


class EmptyStateAccessError(TranspileError):
    """A read of the first state variable was required but the body accesses none"""

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(
            f"Function '{function_name}' needs a state read but never accesses "
            f"a field through self"
        )
