"""
Applies a planned layout to the host document.

Order of operations:

1. Pin every variant (and everything inside it) to top-left constraints and
   move it to (0, 0).
2. Move each variant to its planned position.
3. Reorder the container's children to match row-major visual order.
4. Shift the children so their bounding box starts at (padding, padding)
   and resize the container around them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .config import LayoutConfig
from .host import Host
from .keys import build_key
from .models import Position, VariantInfo
from .nodes import TOP_LEFT, Capability, SceneNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def bounding_box(nodes: Iterable[SceneNode]) -> Optional[BoundingBox]:
    """Tight bounds of ``nodes``, or None for an empty iterable."""
    nodes = list(nodes)
    if not nodes:
        return None
    return BoundingBox(
        min_x=min(n.x for n in nodes),
        min_y=min(n.y for n in nodes),
        max_x=max(n.x + n.width for n in nodes),
        max_y=max(n.y + n.height for n in nodes),
    )


def visual_order(nodes: Iterable[SceneNode]) -> List[SceneNode]:
    """Row-major order: top to bottom, then left to right."""
    return sorted(nodes, key=lambda n: (n.y, n.x))


def reset_constraints(host: Host, node: SceneNode) -> None:
    """Pin ``node`` and all of its descendants to top-left constraints."""
    if node.has(Capability.CONSTRAINABLE):
        host.set_constraints(node, TOP_LEFT)
    if node.has(Capability.HAS_CHILDREN):
        for child in host.children(node):
            reset_constraints(host, child)


class LayoutApplier:
    """
    Writes planned positions into the host and fits the container.

    Attributes:
        host: Host document receiving the mutations.
        config: Layout configuration (only ``padding`` is used here).
    """

    def __init__(self, host: Host, config: Optional[LayoutConfig] = None):
        self.host = host
        self.config = config or LayoutConfig()

    def apply(
        self,
        info: VariantInfo,
        positions: Dict[str, Position],
        container: SceneNode,
    ) -> Optional[BoundingBox]:
        """
        Apply ``positions`` to the variants of ``container``.

        Returns:
            Bounding box of the children before they were shifted into the
            padding, or None when the container has no children.
        """
        host = self.host

        for variant in info.variants:
            reset_constraints(host, variant.node)
            host.move(variant.node, 0, 0)

        for variant in info.variants:
            key = build_key(variant.attributes, info.property_keys)
            position = positions.get(key)
            if position is None:
                logger.warning("No planned position for variant %r", key)
                continue
            host.move(variant.node, position.x, position.y)

        children = [
            child
            for child in host.children(container)
            if child.has(Capability.POSITIONABLE)
        ]
        if not children:
            return None

        host.reorder_children(container, visual_order(children))
        return self.fit_container(container, children)

    def fit_container(
        self, container: SceneNode, children: List[SceneNode]
    ) -> BoundingBox:
        """Shift ``children`` into the padding and resize ``container`` to fit."""
        padding = self.config.padding
        box = bounding_box(children)

        for child in children:
            self.host.move(
                child,
                child.x - (box.min_x - padding),
                child.y - (box.min_y - padding),
            )

        self.host.resize(container, box.width + padding * 2, box.height + padding * 2)
        logger.info(
            "Final size of %s: %s x %s", container.name, container.width, container.height
        )
        return box
