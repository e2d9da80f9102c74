"""
Data models for the contract representation
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any


class Classification(str, Enum):
    """Whether a function only reads state or may write it"""
    VIEW = "view"
    MUTATING = "mutating"


class Visibility(str, Enum):
    """Recorded on every function; the emitter does not differentiate it"""
    EXTERNAL = "external"
    INTERNAL = "internal"


class MutationKind(str, Enum):
    ASSIGN = "assign"
    ADD_ASSIGN = "add_assign"
    SUB_ASSIGN = "sub_assign"


class InstructionKind(str, Enum):
    READ = "read"
    WRITE = "write"


@dataclass
class StorageField:
    """A contract storage slot"""
    name: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type}


@dataclass
class Parameter:
    name: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type}


@dataclass
class StateMutation:
    """Assignment to an instance field found in a method body"""
    variable: str
    kind: MutationKind
    expression: str  # synthesized, never evaluated

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variable": self.variable,
            "kind": self.kind.value,
            "expression": self.expression
        }


@dataclass
class BodyAnalysis:
    """Everything the instruction synthesizer needs from a method body"""
    state_accesses: List[str] = field(default_factory=list)
    mutations: List[StateMutation] = field(default_factory=list)
    has_return: bool = False

    @property
    def first_state_access(self) -> Optional[str]:
        return self.state_accesses[0] if self.state_accesses else None


@dataclass
class Instruction:
    """A single storage read or write primitive"""
    kind: InstructionKind
    variable: str
    expression: Optional[str] = None

    def render(self) -> str:
        if self.kind is InstructionKind.WRITE:
            return f"self.{self.variable}.write({self.expression});"
        return f"self.{self.variable}.read()"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "variable": self.variable,
            "expression": self.expression,
            "code": self.render()
        }


@dataclass
class FunctionModel:
    """Complete function signature with synthesized body"""
    name: str
    parameters: List[Parameter]
    return_type: str
    classification: Classification
    instructions: List[Instruction] = field(default_factory=list)
    visibility: Visibility = Visibility.EXTERNAL

    @property
    def is_view(self) -> bool:
        return self.classification is Classification.VIEW

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "parameters": [p.to_dict() for p in self.parameters],
            "return_type": self.return_type,
            "classification": self.classification.value,
            "visibility": self.visibility.value,
            "instructions": [i.to_dict() for i in self.instructions]
        }


@dataclass
class ContractModel:
    """In-memory translation of one source class"""
    name: str = ""
    storage: List[StorageField] = field(default_factory=list)
    functions: List[FunctionModel] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "storage": [s.to_dict() for s in self.storage],
            "functions": [f.to_dict() for f in self.functions]
        }
