"""
Node abstraction for the host document.

Every node declares what it can do through a set of capability flags, and
the layout code decides what to do with a node by checking those flags
rather than probing for incidental attributes.

Classes:
    NodeKind: Type tag of a node.
    Capability: Optional capabilities a node may expose.
    Constraints: Positioning behavior of a node when its parent resizes.
    SceneNode: Base node with geometry.
    PageNode, VariantSetNode, VariantNode, FrameNode, GroupNode, TextNode:
        Concrete node types.
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import ClassVar, Dict, Optional

_ids = itertools.count(1)


class NodeKind(Enum):
    PAGE = "PAGE"
    VARIANT_SET = "VARIANT_SET"
    VARIANT = "VARIANT"
    FRAME = "FRAME"
    GROUP = "GROUP"
    TEXT = "TEXT"


class Capability(Flag):
    NONE = 0
    POSITIONABLE = auto()
    RESIZABLE = auto()
    HAS_CHILDREN = auto()
    CONSTRAINABLE = auto()


BOX_CAPABILITIES = (
    Capability.POSITIONABLE
    | Capability.RESIZABLE
    | Capability.HAS_CHILDREN
    | Capability.CONSTRAINABLE
)


@dataclass(frozen=True)
class Constraints:
    """
    Resize behavior of a node relative to its parent.

    Each axis takes one of "MIN", "MAX", "CENTER", "STRETCH" or "SCALE".
    """

    horizontal: str = "MIN"
    vertical: str = "MIN"


TOP_LEFT = Constraints("MIN", "MIN")


@dataclass(eq=False)
class SceneNode:
    """
    A rectangular node in the host document.

    Nodes compare by identity so they can be used as graph nodes and
    dictionary keys.
    """

    kind: ClassVar[NodeKind]
    capabilities: ClassVar[Capability] = Capability.NONE

    name: str = ""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    rotation: float = 0.0
    constraints: Optional[Constraints] = None
    id: str = field(default_factory=lambda: f"node-{next(_ids)}")

    def has(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, id={self.id!r})"


@dataclass(eq=False, repr=False)
class PageNode(SceneNode):
    kind: ClassVar[NodeKind] = NodeKind.PAGE
    capabilities: ClassVar[Capability] = Capability.HAS_CHILDREN


@dataclass(eq=False, repr=False)
class VariantSetNode(SceneNode):
    """Container owning a family of variants."""

    kind: ClassVar[NodeKind] = NodeKind.VARIANT_SET
    capabilities: ClassVar[Capability] = BOX_CAPABILITIES

    constraints: Optional[Constraints] = field(default_factory=Constraints)


@dataclass(eq=False, repr=False)
class VariantNode(SceneNode):
    """
    One variant of a variant set.

    ``attributes`` is None when the host cannot produce a readable
    attribute mapping for the node.
    """

    kind: ClassVar[NodeKind] = NodeKind.VARIANT
    capabilities: ClassVar[Capability] = BOX_CAPABILITIES

    constraints: Optional[Constraints] = field(default_factory=Constraints)
    attributes: Optional[Dict[str, str]] = field(default_factory=dict)


@dataclass(eq=False, repr=False)
class FrameNode(SceneNode):
    kind: ClassVar[NodeKind] = NodeKind.FRAME
    capabilities: ClassVar[Capability] = BOX_CAPABILITIES

    constraints: Optional[Constraints] = field(default_factory=Constraints)


@dataclass(eq=False, repr=False)
class GroupNode(SceneNode):
    """Groups take their bounds from their children and carry no constraints."""

    kind: ClassVar[NodeKind] = NodeKind.GROUP
    capabilities: ClassVar[Capability] = (
        Capability.POSITIONABLE | Capability.HAS_CHILDREN
    )


@dataclass(eq=False, repr=False)
class TextNode(SceneNode):
    kind: ClassVar[NodeKind] = NodeKind.TEXT
    capabilities: ClassVar[Capability] = (
        Capability.POSITIONABLE | Capability.RESIZABLE | Capability.CONSTRAINABLE
    )

    constraints: Optional[Constraints] = field(default_factory=Constraints)
    characters: str = ""
    payload: Optional[object] = None
