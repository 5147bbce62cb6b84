"""
variantgrid - Grid layout for variant sets

Arranges the variants of a variant set into a grid driven by their
Set / Style / Color / Size attributes, then fits the set around them.

Example:
    >>> from variantgrid import SceneDocument, VariantSetNode, VariantNode, run_layout
    >>> doc = SceneDocument()
    >>> icons = doc.add(VariantSetNode(name="Icons"))
    >>> doc.add(
    ...     VariantNode(
    ...         name="Size=16",
    ...         width=16,
    ...         height=16,
    ...         attributes={"Style": "filled", "Color": "none", "Size": "16"},
    ...     ),
    ...     parent=icons,
    ... )
    >>> result = run_layout(doc)
    >>> result.processed
    ['Icons']

Debug Mode Example:
    >>> runner = LayoutRunner(doc)
    >>> result = runner.run(debug=True)
    >>> print(runner.get_trace().summary())
"""

from .applier import BoundingBox, LayoutApplier, bounding_box
from .config import AttributeNames, LayoutConfig, SortOrder
from .host import Host, HostError
from .indexer import AxisKind, analyze_variant_set, build_axis, collect_attributes
from .keys import KEY_SEPARATOR, build_key
from .models import AxisOrdering, Position, Variant, VariantInfo
from .nodes import (
    Capability,
    Constraints,
    FrameNode,
    GroupNode,
    NodeKind,
    PageNode,
    SceneNode,
    TextNode,
    VariantNode,
    VariantSetNode,
)
from .planner import LayoutPlanner, plan_layout
from .report import ReportPayload, ReportRole, RotationReporter, StyledRange, build_report
from .runner import LayoutRunner, RunResult, run_layout
from .scene import SceneDocument
from .trace import PlacementRecord, RunTrace, TraceStage
from .validation import (
    AttributeReadError,
    DuplicateVariantError,
    MissingAttributesError,
    NoAttributesError,
    NoVariantsError,
    RotationIssue,
    VariantSetError,
    check_duplicates,
    check_rotation,
    find_duplicate_key,
)

__version__ = "0.3.0"

__all__ = [
    # Main API
    "LayoutRunner",
    "RunResult",
    "run_layout",
    "LayoutConfig",
    "AttributeNames",
    "SortOrder",
    # Host
    "Host",
    "HostError",
    "SceneDocument",
    # Nodes
    "NodeKind",
    "Capability",
    "Constraints",
    "SceneNode",
    "PageNode",
    "VariantSetNode",
    "VariantNode",
    "FrameNode",
    "GroupNode",
    "TextNode",
    # Analysis
    "Variant",
    "VariantInfo",
    "AxisOrdering",
    "AxisKind",
    "Position",
    "build_key",
    "KEY_SEPARATOR",
    "collect_attributes",
    "build_axis",
    "analyze_variant_set",
    # Validation
    "VariantSetError",
    "NoVariantsError",
    "NoAttributesError",
    "AttributeReadError",
    "MissingAttributesError",
    "DuplicateVariantError",
    "RotationIssue",
    "check_rotation",
    "check_duplicates",
    "find_duplicate_key",
    # Layout
    "LayoutPlanner",
    "plan_layout",
    "LayoutApplier",
    "BoundingBox",
    "bounding_box",
    # Report
    "RotationReporter",
    "ReportPayload",
    "ReportRole",
    "StyledRange",
    "build_report",
    # Debug/Tracing
    "RunTrace",
    "TraceStage",
    "PlacementRecord",
]
