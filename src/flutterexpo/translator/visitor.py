"""Node visitor shared by every UI AST output format."""

from typing import Generic, TypeVar

from ..mapping import MappingEntry, MappingRegistry
from ..models import UIASTNode

T = TypeVar("T")


class NodeVisitor(Generic[T]):
    """
    Dispatches each UI AST node by widget kind.

    ``visit`` resolves the node's type in the registry and calls
    ``visit_<kind>(node, entry)`` when the subclass defines one, otherwise
    ``visit_mapped(node, entry)``. Unresolved types go to ``visit_unmapped``.
    """

    include_markup = False

    def __init__(self, registry: MappingRegistry) -> None:
        self.registry = registry

    def visit(self, node: UIASTNode) -> T:
        entry = self.registry.resolve(node.type, include_markup=self.include_markup)
        if entry is None:
            return self.visit_unmapped(node)
        handler = getattr(self, f"visit_{entry.kind.value}", self.visit_mapped)
        return handler(node, entry)

    def visit_children(self, node: UIASTNode) -> list[T] | None:
        """Visit children in order; None when the node declares no children."""
        if node.children is None:
            return None
        return [self.visit(child) for child in node.children]

    def visit_mapped(self, node: UIASTNode, entry: MappingEntry) -> T:
        raise NotImplementedError

    def visit_unmapped(self, node: UIASTNode) -> T:
        raise NotImplementedError
