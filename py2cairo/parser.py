"""
Builds a contract model from the first class found in a Python module.
"""

import ast
import logging
from typing import List, Optional, Union

from py2cairo.core.config import DEFAULT_CONTRACT_NAME, INSTANCE_REFERENCE, VIEW_DECORATOR
from py2cairo.core.models import (
    Classification, ContractModel, FunctionModel, Parameter, StorageField
)
from py2cairo.translators.body import analyze_body, segment_text
from py2cairo.translators.instructions import synthesize_instructions
from py2cairo.translators.types import DEFAULT_TYPE_MAPPER, TypeMapper

logger = logging.getLogger(__name__)

MethodNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]


def find_contract_class(node: ast.AST) -> Optional[ast.ClassDef]:
    """First class definition in a pre-order depth-first walk, nested ones included"""
    if isinstance(node, ast.ClassDef):
        return node
    for child in ast.iter_child_nodes(node):
        found = find_contract_class(child)
        if found is not None:
            return found
    return None


def has_view_decorator(node: MethodNode) -> bool:
    return any(
        isinstance(decorator, ast.Name) and decorator.id == VIEW_DECORATOR
        for decorator in node.decorator_list
    )


class ContractParser:
    """Parse a Python class into a ContractModel"""

    def __init__(self, type_mapper: Optional[TypeMapper] = None, strict: bool = False):
        """
        Args:
            type_mapper: Annotation lookup table (default table if omitted)
            strict: Raise EmptyStateAccessError instead of omitting reads
        """
        self.type_mapper = type_mapper or DEFAULT_TYPE_MAPPER
        self.strict = strict

    def parse_file(self, file_path: str) -> ContractModel:
        with open(file_path, 'r', encoding='utf-8') as f:
            source = f.read()
        return self.build(ast.parse(source, filename=file_path), source)

    def parse_source(self, source: str) -> ContractModel:
        return self.build(ast.parse(source), source)

    def build(self, tree: ast.AST, source: Optional[str] = None) -> ContractModel:
        """
        Build the model from an already parsed tree.

        Args:
            tree: Module (or any) AST
            source: Source the tree was parsed from; when omitted, literal
                text is recovered with ast.unparse

        Returns:
            ContractModel, empty when the tree holds no class
        """
        contract = ContractModel()

        class_node = find_contract_class(tree)
        if class_node is None:
            logger.debug("No class definition found; returning empty contract")
            return contract

        contract.name = class_node.name or DEFAULT_CONTRACT_NAME
        logger.debug("Translating class %s", contract.name)

        # Storage and functions keep their own declaration orders
        for member in class_node.body:
            contract.storage.extend(self._storage_fields(member, source))

        for member in class_node.body:
            if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                contract.functions.append(self._function(member, source))

        self._warn_duplicate_storage(contract.storage)
        return contract

    def _annotation_type(self, annotation: Optional[ast.expr], source: Optional[str]) -> str:
        if annotation is None:
            return self.type_mapper.fallback
        return self.type_mapper.resolve(segment_text(annotation, source))

    def _storage_fields(self, member: ast.stmt, source: Optional[str]) -> List[StorageField]:
        if isinstance(member, ast.AnnAssign) and isinstance(member.target, ast.Name):
            return [StorageField(member.target.id, self._annotation_type(member.annotation, source))]

        if isinstance(member, ast.Assign):
            return [
                StorageField(target.id, self.type_mapper.fallback)
                for target in member.targets
                if isinstance(target, ast.Name)
            ]

        return []

    def _parameters(self, node: MethodNode, source: Optional[str]) -> List[Parameter]:
        # *args and **kwargs have no Cairo counterpart and are dropped
        args = node.args.posonlyargs + node.args.args + node.args.kwonlyargs
        return [
            Parameter(arg.arg, self._annotation_type(arg.annotation, source))
            for arg in args
            if arg.arg != INSTANCE_REFERENCE
        ]

    def _function(self, node: MethodNode, source: Optional[str]) -> FunctionModel:
        classification = Classification.VIEW if has_view_decorator(node) else Classification.MUTATING
        analysis = analyze_body(node.body, source)

        function = FunctionModel(
            name=node.name,
            parameters=self._parameters(node, source),
            return_type=self._annotation_type(node.returns, source),
            classification=classification,
            instructions=synthesize_instructions(
                classification, analysis, strict=self.strict, function_name=node.name
            )
        )
        logger.debug("Built %s function %s with %d instructions",
                     classification.value, node.name, len(function.instructions))
        return function

    @staticmethod
    def _warn_duplicate_storage(storage: List[StorageField]):
        seen = set()
        for slot in storage:
            if slot.name in seen:
                logger.warning("Duplicate storage field '%s' is emitted twice", slot.name)
            seen.add(slot.name)
