"""
Layout configuration.

A single explicit configuration record is passed to the planner, the applier
and the runner. Nothing in the package reads process-wide settings.

Classes:
    SortOrder: Direction used for the style axis and the set-block order.
    AttributeNames: Attribute-name bindings for the four grouping axes.
    LayoutConfig: Grid geometry, gaps, sort policy and naming bindings.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

DEFAULT_PADDING = 20
DEFAULT_CELL_SIZE = 52
DEFAULT_INTER_SET_GAP = 20
DEFAULT_ROTATION_EPSILON = 0.001
DEFAULT_SET_VALUE = "default"
DEFAULT_REPORT_FONT_SIZE = 12


class SortOrder(Enum):
    """Lexicographic direction for style values and set blocks."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def reverse(self) -> bool:
        return self is SortOrder.DESCENDING


@dataclass(frozen=True)
class AttributeNames:
    """
    Names of the attributes that drive the grid.

    Matching against a variant's attribute mapping is exact and
    case-sensitive.

    Attributes:
        set: Attribute splitting the grid into horizontal blocks.
        style: Attribute splitting a block into vertical sections.
        color: Attribute selecting the row inside a section.
        size: Numeric attribute selecting the column inside a block.
    """

    set: str = "Set"
    style: str = "Style"
    color: str = "Color"
    size: str = "Size"

    def __post_init__(self):
        for label, value in (
            ("set", self.set),
            ("style", self.style),
            ("color", self.color),
            ("size", self.size),
        ):
            if not isinstance(value, str) or not value:
                raise ValueError(f"attribute name for '{label}' must be a non-empty string")

    @property
    def required(self) -> tuple:
        """Axis attributes that every variant set must expose."""
        return (self.style, self.color, self.size)


def _check_int(name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for one layout run.

    Attributes:
        padding: Uniform inner padding of a variant set container.
        cell_size: Edge length of one grid cell.
        block_gap: Horizontal gap between two set blocks.
        inter_set_gap: Gap between variant sets placed in whole-page mode.
        sort_order: Direction for style values and set blocks.
        center_in_cell: Center each variant vertically in its cell instead
            of aligning it to the cell top.
        attribute_names: Attribute-name bindings.
        rotation_epsilon: Rotations within this many degrees of zero pass
            the rotation check.
        default_set_value: Block used for variants without a set attribute.
        report_font_size: Font size of the rotation report.
    """

    padding: int = DEFAULT_PADDING
    cell_size: int = DEFAULT_CELL_SIZE
    block_gap: int = DEFAULT_CELL_SIZE
    inter_set_gap: int = DEFAULT_INTER_SET_GAP
    sort_order: SortOrder = SortOrder.ASCENDING
    center_in_cell: bool = True
    attribute_names: AttributeNames = field(default_factory=AttributeNames)
    rotation_epsilon: float = DEFAULT_ROTATION_EPSILON
    default_set_value: str = DEFAULT_SET_VALUE
    report_font_size: int = DEFAULT_REPORT_FONT_SIZE

    def __post_init__(self):
        _check_int("padding", self.padding, 0)
        _check_int("cell_size", self.cell_size, 1)
        _check_int("block_gap", self.block_gap, 0)
        _check_int("inter_set_gap", self.inter_set_gap, 0)
        _check_int("report_font_size", self.report_font_size, 1)

        if isinstance(self.sort_order, str):
            try:
                object.__setattr__(self, "sort_order", SortOrder(self.sort_order.lower()))
            except ValueError:
                raise ValueError(
                    "sort_order must be 'ascending' or 'descending'"
                ) from None
        if not isinstance(self.sort_order, SortOrder):
            raise ValueError("sort_order must be 'ascending' or 'descending'")
        if self.rotation_epsilon < 0:
            raise ValueError("rotation_epsilon must be >= 0")

    def replace(self, **changes) -> "LayoutConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
