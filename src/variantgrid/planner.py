"""
Grid planning for one variant set.

The grid is built from four attributes:

- set:   horizontal blocks, one per distinct value
- size:  column inside a block
- style: vertical section
- color: row inside a section

Each variant gets the top-left coordinate of its cell (optionally centered
vertically in the cell). Positions are keyed by the canonical key built
from every attribute name of the set, so attributes outside the grid axes
still tell variants apart without moving them.
"""

import logging
from typing import Dict, List, Optional

from .config import LayoutConfig
from .indexer import build_axes
from .keys import build_key
from .models import Position, Variant, VariantInfo

logger = logging.getLogger(__name__)


class LayoutPlanner:
    """
    Computes variant positions for a variant set.

    Attributes:
        config: Grid geometry and sort policy.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def group_by_set(self, info: VariantInfo) -> Dict[str, List[Variant]]:
        """Split variants into blocks by their set attribute value."""
        set_name = self.config.attribute_names.set
        groups: Dict[str, List[Variant]] = {}
        for variant in info.variants:
            value = variant.attributes.get(set_name, self.config.default_set_value)
            groups.setdefault(value, []).append(variant)
        return groups

    def block_order(self, groups: Dict[str, List[Variant]]) -> List[str]:
        return sorted(groups, reverse=self.config.sort_order.reverse)

    def plan(self, info: VariantInfo) -> Optional[Dict[str, Position]]:
        """
        Compute a position for every variant.

        Args:
            info: Analysis of one variant set.

        Returns:
            Canonical key -> Position, or None when the style, color or size
            axis has no values.
        """
        config = self.config
        names = config.attribute_names
        step = config.cell_size

        style_axis, color_axis, size_axis = build_axes(info, config)
        if not style_axis or not color_axis or not size_axis:
            return None

        groups = self.group_by_set(info)
        section_height = len(color_axis) * step
        block_width = len(size_axis) * step

        positions: Dict[str, Position] = {}
        base_x = 0
        for set_value in self.block_order(groups):
            for variant in groups[set_value]:
                attrs = variant.attributes
                size_idx = size_axis.position_of(attrs.get(names.size, ""))
                style_idx = style_axis.position_of(attrs.get(names.style, ""))
                color_idx = color_axis.position_of(attrs.get(names.color, ""))

                x = base_x + size_idx * step + config.padding
                cell_top = style_idx * section_height + color_idx * step + config.padding
                if config.center_in_cell:
                    y = cell_top + step / 2 - variant.height / 2
                else:
                    y = cell_top

                key = build_key(attrs, info.property_keys)
                positions[key] = Position(x, y)
                logger.debug("Variant: %s -> x: %s, y: %s", key, x, y)

            base_x += block_width + config.block_gap

        return positions


def plan_layout(
    info: VariantInfo, config: Optional[LayoutConfig] = None
) -> Optional[Dict[str, Position]]:
    """
    Convenience function to plan a variant set.

    Args:
        info: Analysis of one variant set.
        config: Layout configuration (defaults when omitted).

    Returns:
        Canonical key -> Position, or None if an axis is missing.
    """
    return LayoutPlanner(config).plan(info)
