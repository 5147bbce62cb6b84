"""
Data models for variant grid layout.

These dataclasses carry the analysis of one variant set from the indexer
through validation and planning to the applier. They are rebuilt from the
host document on every run and discarded afterwards.

Classes:
    Variant: One variant with its attribute mapping.
    VariantInfo: Analysis result for one variant set.
    AxisOrdering: Ordered distinct values of one grid axis.
    Position: Planned top-left coordinate of a variant.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from .nodes import SceneNode


@dataclass
class Variant:
    """
    One item to arrange.

    Attributes:
        node: The host node backing this variant.
        attributes: Attribute name to attribute value.
    """

    node: SceneNode
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def width(self) -> float:
        return self.node.width

    @property
    def height(self) -> float:
        return self.node.height

    @property
    def rotation(self) -> float:
        return self.node.rotation


@dataclass
class VariantInfo:
    """
    Analysis result for one variant set.

    Attributes:
        property_keys: Distinct attribute names, sorted ascending.
        property_values: Attribute name to the set of values observed for it.
        variants: Variants ordered by display name.
        set_name: Name of the owning variant set.
    """

    property_keys: List[str] = field(default_factory=list)
    property_values: Dict[str, Set[str]] = field(default_factory=dict)
    variants: List[Variant] = field(default_factory=list)
    set_name: str = ""


@dataclass
class AxisOrdering:
    """
    Ordered distinct values along one grid axis.

    Attributes:
        values: Values in layout order.
        index: Value to its position in ``values``.
    """

    values: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_values(cls, values: List[str]) -> "AxisOrdering":
        return cls(values=list(values), index={v: i for i, v in enumerate(values)})

    def position_of(self, value: str) -> int:
        """Index of ``value``, or 0 when the value is not on this axis."""
        return self.index.get(value, 0)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Position:
    """Top-left coordinate planned for one variant."""

    x: float
    y: float

    def as_tuple(self):
        return (self.x, self.y)
