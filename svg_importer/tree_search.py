"""
Depth-first pre-order search over a document tree.

A node is visited before its children, and children are visited left to
right, each subtree fully before the next sibling. ``find`` relies on this
order for a stable "first match", and the resolver relies on it for a
reproducible export order.
"""
from typing import Callable, Iterator, Optional

from svg_importer.models import DocumentNode

NodePredicate = Callable[[DocumentNode], bool]


def walk(root: DocumentNode) -> Iterator[DocumentNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_all(root: DocumentNode, predicate: NodePredicate) -> Iterator[DocumentNode]:
    """Yield every node matching ``predicate``, root included, in pre-order"""
    for node in walk(root):
        if predicate(node):
            yield node


def find(root: DocumentNode, predicate: NodePredicate) -> Optional[DocumentNode]:
    """Return the first node matching ``predicate``, or None"""
    return next(find_all(root, predicate), None)


def find_by_id(root: DocumentNode, node_id: str) -> Optional[DocumentNode]:
    return find(root, lambda node: node.id == node_id)
