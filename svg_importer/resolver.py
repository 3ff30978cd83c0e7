import logging
from typing import Iterable, List, Optional

from svg_importer.exceptions import NodeNotFoundError
from svg_importer.models import ComponentRefNode, DocumentNode, FileSnapshot, KindTaggedNode
from svg_importer.tree_search import find_all, find_by_id, walk
from svg_importer.utils import normalize_node_id

logger = logging.getLogger(__name__)


def resolve(snapshot: FileSnapshot, subtree_root_id: Optional[str] = None,
            normalize_ids: bool = False) -> List[str]:
    """
    Determine which component ids to export.

    Without ``subtree_root_id`` every registered component is exported. With
    one, only components found beneath (and including) that node are kept.
    The result holds no duplicates and is ordered by registry order or by
    document discovery order respectively.

    Raises NodeNotFoundError when the subtree root is not in the document.
    """
    if not subtree_root_id:
        return list(snapshot.components)
    
    if normalize_ids:
        subtree_root_id = normalize_node_id(subtree_root_id)
    
    subtree_root = find_by_id(snapshot.document, subtree_root_id)
    if subtree_root is None:
        logger.error(f"Node {subtree_root_id} not found in document")
        raise NodeNotFoundError(subtree_root_id)
    
    logger.info(f"Found node {subtree_root_id} ({subtree_root.name or 'Unnamed'})")
    
    if isinstance(subtree_root, KindTaggedNode):
        candidates = _component_nodes(subtree_root)
    else:
        candidates = _component_references(subtree_root)
    
    component_ids = []
    for component_id in dict.fromkeys(candidates):
        if component_id in snapshot.components:
            component_ids.append(component_id)
        else:
            logger.debug(f"Skipping {component_id}: not in the file's component registry")
    
    logger.info(f"Resolved {len(component_ids)} components under node {subtree_root_id}")
    return component_ids


def _component_nodes(subtree_root: DocumentNode) -> Iterable[str]:
    return (node.id for node in find_all(
        subtree_root, lambda node: isinstance(node, KindTaggedNode) and node.is_component))


def _component_references(subtree_root: DocumentNode) -> Iterable[str]:
    for node in walk(subtree_root):
        if isinstance(node, ComponentRefNode) and node.component_id:
            yield node.component_id
