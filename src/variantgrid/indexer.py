"""
Attribute indexing for variant sets.

Reads the variants of a variant set from the host, collects the distinct
attribute names and values, and orders the values of each grid axis:

- size: numeric ascending
- style: lexicographic, direction set by ``LayoutConfig.sort_order``
- color: values starting with "n" first, then "s", then the rest,
  plain codepoint order inside each bucket
"""

import math
from enum import Enum
from typing import Dict, Iterable, List, Set, Tuple

from .config import LayoutConfig, SortOrder
from .host import Host, HostError
from .models import AxisOrdering, Variant, VariantInfo
from .nodes import NodeKind, SceneNode
from .validation import AttributeReadError, NoAttributesError, NoVariantsError


class AxisKind(Enum):
    STYLE = "style"
    COLOR = "color"
    SIZE = "size"


def name_sort_key(name: str) -> Tuple[str, str]:
    """Case-insensitive order with exact spelling as tie-break."""
    return (name.casefold(), name)


def color_priority(value: str) -> int:
    first = value[:1].lower()
    if first == "n":
        return 0
    if first == "s":
        return 1
    return 2


def _size_sort_key(value: str) -> Tuple[float, str]:
    try:
        number = float(value)
    except ValueError:
        number = math.inf
    if math.isnan(number):
        number = math.inf
    return (number, value)


def collect_attributes(
    variants: Iterable[Variant],
) -> Tuple[List[str], Dict[str, Set[str]]]:
    """
    Collect attribute names and their distinct values.

    Returns:
        Tuple of (property_keys sorted ascending, name -> set of values).
    """
    property_values: Dict[str, Set[str]] = {}
    for variant in variants:
        for key, value in variant.attributes.items():
            property_values.setdefault(key, set()).add(value)
    return sorted(property_values), property_values


def build_axis(
    values: Iterable[str],
    kind: AxisKind,
    sort_order: SortOrder = SortOrder.ASCENDING,
) -> AxisOrdering:
    """
    Order the distinct values of one axis.

    Args:
        values: Distinct values observed for the axis attribute.
        kind: Which axis the values belong to.
        sort_order: Direction for the style axis. Ignored for size and color.

    Returns:
        AxisOrdering with values in layout order and a value -> index map.
    """
    distinct = set(values)
    if kind is AxisKind.SIZE:
        ordered = sorted(distinct, key=_size_sort_key)
    elif kind is AxisKind.COLOR:
        ordered = sorted(distinct, key=lambda v: (color_priority(v), v))
    else:
        ordered = sorted(distinct, reverse=sort_order.reverse)
    return AxisOrdering.from_values(ordered)


def build_axes(
    info: VariantInfo, config: LayoutConfig
) -> Tuple[AxisOrdering, AxisOrdering, AxisOrdering]:
    """Return the (style, color, size) axes of a variant set."""
    names = config.attribute_names
    style = build_axis(
        info.property_values.get(names.style, ()), AxisKind.STYLE, config.sort_order
    )
    color = build_axis(info.property_values.get(names.color, ()), AxisKind.COLOR)
    size = build_axis(info.property_values.get(names.size, ()), AxisKind.SIZE)
    return style, color, size


def variant_nodes(host: Host, container: SceneNode) -> List[SceneNode]:
    """Direct children of ``container`` that are variants."""
    return [
        child for child in host.children(container) if child.kind is NodeKind.VARIANT
    ]


def analyze_variant_set(host: Host, container: SceneNode) -> VariantInfo:
    """
    Read and index the variants of one variant set.

    Raises:
        AttributeReadError: The host could not read a variant's attributes.
        NoVariantsError: The container has no variant children.
        NoAttributesError: No variant carries any attribute.
    """
    variants: List[Variant] = []
    for node in variant_nodes(host, container):
        try:
            attributes = host.read_attributes(node)
        except HostError as exc:
            raise AttributeReadError(container.name, node.name) from exc
        variants.append(Variant(node=node, attributes=dict(attributes)))

    if not variants:
        raise NoVariantsError(container.name)

    property_keys, property_values = collect_attributes(variants)
    if not property_keys:
        raise NoAttributesError(container.name)

    variants.sort(key=lambda v: name_sort_key(v.name))
    return VariantInfo(
        property_keys=property_keys,
        property_values=property_values,
        variants=variants,
        set_name=container.name,
    )
