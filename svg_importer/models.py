"""
Typed views over the JSON returned by the Figma REST API.

Document nodes come in two shapes. Nodes that carry a ``type`` field are
parsed as :class:`KindTaggedNode`; nodes without one are parsed as
:class:`ComponentRefNode` and may point at a component through
``componentId``. The resolver picks its collection strategy from the shape.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DocumentNode:
    id: str
    name: str = ""
    children: List["DocumentNode"] = field(default_factory=list)


@dataclass(frozen=True)
class KindTaggedNode(DocumentNode):
    type: str = ""

    @property
    def is_component(self) -> bool:
        return self.type == "COMPONENT"


@dataclass(frozen=True)
class ComponentRefNode(DocumentNode):
    component_id: Optional[str] = None


@dataclass(frozen=True)
class ComponentRecord:
    key: str
    name: str
    description: str = ""
    remote: bool = False
    documentation_links: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ComponentRecord":
        return cls(
            key=data.get('key', ''),
            name=data.get('name', ''),
            description=data.get('description', ''),
            remote=bool(data.get('remote', False)),
            documentation_links=list(data.get('documentationLinks') or []),
        )


@dataclass(frozen=True)
class FileSnapshot:
    """A whole-file response. Fetched fresh for every import."""

    document: DocumentNode
    components: Dict[str, ComponentRecord]
    name: str = ""
    last_modified: Optional[str] = None
    thumbnail_url: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FileSnapshot":
        components = {
            component_id: ComponentRecord.from_api(component or {})
            for component_id, component in (data.get('components') or {}).items()
        }
        return cls(
            document=parse_node(data.get('document') or {}),
            components=components,
            name=data.get('name', ''),
            last_modified=data.get('lastModified'),
            thumbnail_url=data.get('thumbnailUrl'),
            version=data.get('version'),
        )


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {'type': 'file', 'content': self.content}


def parse_node(data: Dict[str, Any]) -> DocumentNode:
    """Build a node tree from API JSON, choosing each node's shape from its fields"""
    # Iterative so that very deep documents do not exhaust the recursion limit.
    # Frozen nodes need their children first, so build bottom-up from a post-order.
    order = []
    stack = [data]
    while stack:
        raw = stack.pop()
        order.append(raw)
        stack.extend(raw.get('children') or [])

    built: Dict[int, DocumentNode] = {}
    for raw in reversed(order):
        children = [built[id(child)] for child in (raw.get('children') or [])]
        node_id = str(raw.get('id', ''))
        name = raw.get('name', '')
        if 'type' in raw:
            node = KindTaggedNode(id=node_id, name=name, children=children, type=raw['type'])
        else:
            node = ComponentRefNode(
                id=node_id, name=name, children=children, component_id=raw.get('componentId')
            )
        built[id(raw)] = node
    return built[id(data)]
