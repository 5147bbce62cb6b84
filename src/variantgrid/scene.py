"""
In-memory host document.

``SceneDocument`` implements the ``Host`` interface on top of a networkx
directed tree: every node of the page is a graph node and every
parent -> child relation is an edge carrying the child's index in the
parent's child order.

Besides the document itself it records what a real host would show to the
user (notifications, the nodes scrolled into view, whether the run was
closed) and every mutation applied, which makes runs easy to inspect.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import networkx as nx

from .host import HostError
from .nodes import (
    Capability,
    Constraints,
    NodeKind,
    PageNode,
    SceneNode,
    TextNode,
    VariantSetNode,
)


class SceneDocument:
    """
    A single page of nodes.

    Example:
        >>> doc = SceneDocument()
        >>> icons = doc.add(VariantSetNode(name="Icons"))
        >>> doc.add(VariantNode(name="a", attributes={"Size": "16"}), parent=icons)
    """

    def __init__(self, page_name: str = "Page 1", fonts_available: bool = True):
        self.graph: nx.DiGraph = nx.DiGraph()
        self.page = PageNode(name=page_name)
        self.graph.add_node(self.page)

        self.selection: List[SceneNode] = []
        self.fonts_available = fonts_available

        self.notifications: List[Tuple[str, bool]] = []
        self.viewport: List[SceneNode] = []
        self.mutations: List[Tuple[str, SceneNode]] = []
        self.closed = False
        self.close_message: Optional[str] = None

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add(self, node: SceneNode, parent: Optional[SceneNode] = None) -> SceneNode:
        """Append ``node`` as the last child of ``parent`` (the page by default)."""
        parent = parent if parent is not None else self.page
        if parent not in self.graph:
            raise HostError(f"{parent!r} is not part of this document")
        if not parent.has(Capability.HAS_CHILDREN):
            raise HostError(f"{parent!r} cannot have children")
        if node in self.graph:
            raise HostError(f"{node!r} is already part of this document")

        self.graph.add_node(node)
        self.graph.add_edge(parent, node, index=self.graph.out_degree(parent))
        return node

    def parent(self, node: SceneNode) -> Optional[SceneNode]:
        predecessors = list(self.graph.predecessors(node))
        return predecessors[0] if predecessors else None

    def is_top_level(self, node: SceneNode) -> bool:
        """True when ``node`` is a direct child of the page."""
        return self.parent(node) is self.page

    def _child_index(self, child: SceneNode) -> int:
        return self.graph.edges[self.parent(child), child]["index"]

    def descendants(self, node: SceneNode) -> List[SceneNode]:
        """All nodes below ``node`` in depth-first, child-order sequence."""
        ordered = nx.dfs_preorder_nodes(
            self.graph,
            node,
            sort_neighbors=lambda nodes: sorted(nodes, key=self._child_index),
        )
        return list(ordered)[1:]

    def find_all(self, kind: NodeKind) -> List[SceneNode]:
        """Every node of ``kind`` on the page, in document order."""
        return [n for n in self.descendants(self.page) if n.kind is kind]

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def find_variant_sets(self) -> List[VariantSetNode]:
        return self.find_all(NodeKind.VARIANT_SET)

    def selected_variant_sets(self) -> List[VariantSetNode]:
        return [n for n in self.selection if n.kind is NodeKind.VARIANT_SET]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def children(self, node: SceneNode) -> List[SceneNode]:
        if node not in self.graph:
            raise HostError(f"{node!r} is not part of this document")
        edges = self.graph.out_edges(node, data="index")
        return [child for _, child, _ in sorted(edges, key=lambda e: e[2])]

    def read_attributes(self, node: SceneNode) -> Dict[str, str]:
        if node.kind is not NodeKind.VARIANT or node.attributes is None:
            raise HostError(f"Cannot read attributes of {node!r}")
        return dict(node.attributes)

    # ------------------------------------------------------------------
    # Mutate
    # ------------------------------------------------------------------

    def set_constraints(self, node: SceneNode, constraints: Constraints) -> None:
        if not node.has(Capability.CONSTRAINABLE):
            raise HostError(f"{node!r} does not support constraints")
        node.constraints = constraints
        self.mutations.append(("constraints", node))

    def move(self, node: SceneNode, x: float, y: float) -> None:
        if not node.has(Capability.POSITIONABLE):
            raise HostError(f"{node!r} cannot be positioned")
        node.x = x
        node.y = y
        self.mutations.append(("move", node))

    def reorder_children(
        self, container: SceneNode, ordered: Sequence[SceneNode]
    ) -> None:
        """
        Put ``ordered`` first in the child order of ``container``.

        Children not listed keep their relative order after them.
        """
        current = self.children(container)
        listed = set(ordered)
        for node in ordered:
            if self.parent(node) is not container:
                raise HostError(f"{node!r} is not a child of {container!r}")
        sequence = list(ordered) + [c for c in current if c not in listed]
        for index, child in enumerate(sequence):
            self.graph.edges[container, child]["index"] = index
        self.mutations.append(("reorder", container))

    def resize(self, node: SceneNode, width: float, height: float) -> None:
        if not node.has(Capability.RESIZABLE):
            raise HostError(f"{node!r} cannot be resized")
        node.width = width
        node.height = height
        self.mutations.append(("resize", node))

    def bring_to_front(self, nodes: Sequence[SceneNode]) -> None:
        """Move ``nodes`` to the start of the page's child order, in the given order."""
        self.reorder_children(self.page, [n for n in nodes if self.parent(n) is self.page])

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    def notify(self, message: str, error: bool = False) -> None:
        self.notifications.append((message, error))

    def load_report_fonts(self) -> bool:
        return self.fonts_available

    def insert_report(self, payload, x: float, y: float) -> SceneNode:
        line_count = payload.text.count("\n") + 1
        node = TextNode(
            name="Rotation report",
            x=x,
            y=y,
            width=max(len(line) for line in payload.text.split("\n")) * payload.font_size * 0.6,
            height=line_count * payload.font_size * 1.2,
            characters=payload.text,
            payload=payload,
        )
        return self.add(node)

    def scroll_into_view(self, nodes: Sequence[SceneNode]) -> None:
        self.viewport = list(nodes)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self, message: Optional[str] = None) -> None:
        self.closed = True
        self.close_message = message
