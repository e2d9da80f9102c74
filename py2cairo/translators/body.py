"""
Method body analysis: state accesses, state mutations and return presence
"""

import ast
import logging
from typing import List, Optional

from ..core.config import AUG_OP_TO_CAIRO, INSTANCE_REFERENCE
from ..core.models import BodyAnalysis, MutationKind, StateMutation

logger = logging.getLogger(__name__)

AUG_OP_TO_KIND = {
    ast.Add: MutationKind.ADD_ASSIGN,
    ast.Sub: MutationKind.SUB_ASSIGN
}


def segment_text(node: ast.AST, source: Optional[str] = None) -> str:
    """Literal source text of a subtree, unparsed when no source is available"""
    text = ast.get_source_segment(source, node) if source is not None else None
    if text is None:
        return ast.unparse(node)
    return text


def is_instance_member(node: ast.AST) -> bool:
    """True for `self.<name>`"""
    return (isinstance(node, ast.Attribute) and
            isinstance(node.value, ast.Name) and
            node.value.id == INSTANCE_REFERENCE)


class StateAccessCollector(ast.NodeVisitor):
    """Collects every field read or written through the instance reference"""

    def __init__(self):
        self.accesses: List[str] = []

    def visit_Attribute(self, node: ast.Attribute):
        if is_instance_member(node):
            self.accesses.append(node.attr)
        self.generic_visit(node)

    def distinct(self) -> List[str]:
        # dict keeps insertion order, so first occurrences win
        return list(dict.fromkeys(self.accesses))


class MutationExtractor(ast.NodeVisitor):
    """
    Extracts assignments to instance fields in document order.

    Handles:
    - self.x = e          (plain, also every target of a chained assignment)
    - self.x: T = e       (annotated with a value)
    - self.x += e         (read-then-add)
    - self.x -= e         (read-then-subtract)

    Other augmented operators are ignored.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self.mutations: List[StateMutation] = []

    def visit_Assign(self, node: ast.Assign):
        value = segment_text(node.value, self.source)
        for target in node.targets:
            if is_instance_member(target):
                self.mutations.append(StateMutation(target.attr, MutationKind.ASSIGN, value))
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign):
        if node.value is not None and is_instance_member(node.target):
            self.mutations.append(StateMutation(
                node.target.attr,
                MutationKind.ASSIGN,
                segment_text(node.value, self.source)
            ))
        self.generic_visit(node)

    def visit_AugAssign(self, node: ast.AugAssign):
        if is_instance_member(node.target):
            op = AUG_OP_TO_CAIRO.get(type(node.op))
            if op:
                variable = node.target.attr
                amount = segment_text(node.value, self.source)
                self.mutations.append(StateMutation(
                    variable,
                    AUG_OP_TO_KIND[type(node.op)],
                    f"self.{variable}.read() {op} {amount}"
                ))
            else:
                logger.debug("Ignoring unsupported operator %s on self.%s",
                             type(node.op).__name__, node.target.attr)
        self.generic_visit(node)


class ReturnFinder(ast.NodeVisitor):
    """Stops descending as soon as a return statement has been seen"""

    def __init__(self):
        self.found = False

    def visit_Return(self, node: ast.Return):
        self.found = True

    def generic_visit(self, node: ast.AST):
        if not self.found:
            super().generic_visit(node)


def analyze_body(statements: List[ast.stmt], source: Optional[str] = None) -> BodyAnalysis:
    """
    Run the three independent passes over a method body.

    Args:
        statements: Method body statements
        source: Module source text, used for literal expression text

    Returns:
        BodyAnalysis with distinct state accesses, mutations and return flag
    """
    accesses = StateAccessCollector()
    mutations = MutationExtractor(source)
    returns = ReturnFinder()

    for stmt in statements:
        accesses.visit(stmt)
        mutations.visit(stmt)
        returns.visit(stmt)

    return BodyAnalysis(
        state_accesses=accesses.distinct(),
        mutations=mutations.mutations,
        has_return=returns.found
    )
