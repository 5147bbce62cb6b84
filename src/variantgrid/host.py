"""
Collaborator interface between the layout core and the host document.

The core never reaches for a global document handle. Everything it needs to
query, read, mutate, report and end the run goes through an object
implementing ``Host``. ``variantgrid.scene.SceneDocument`` is the in-memory
implementation.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Sequence

from .nodes import Constraints, SceneNode, VariantSetNode

if TYPE_CHECKING:
    from .report import ReportPayload


class HostError(Exception):
    """Raised by a host when it cannot complete a read or a mutation."""


class Host(Protocol):
    # Query
    def find_variant_sets(self) -> List[VariantSetNode]: ...

    def selected_variant_sets(self) -> List[VariantSetNode]: ...

    # Read
    def children(self, node: SceneNode) -> List[SceneNode]: ...

    def read_attributes(self, node: SceneNode) -> Dict[str, str]: ...

    def is_top_level(self, node: SceneNode) -> bool: ...

    # Mutate
    def set_constraints(self, node: SceneNode, constraints: Constraints) -> None: ...

    def move(self, node: SceneNode, x: float, y: float) -> None: ...

    def reorder_children(
        self, container: SceneNode, ordered: Sequence[SceneNode]
    ) -> None: ...

    def resize(self, node: SceneNode, width: float, height: float) -> None: ...

    def bring_to_front(self, nodes: Sequence[SceneNode]) -> None: ...

    # Report
    def notify(self, message: str, error: bool = False) -> None: ...

    def load_report_fonts(self) -> bool: ...

    def insert_report(
        self, payload: "ReportPayload", x: float, y: float
    ) -> SceneNode: ...

    def scroll_into_view(self, nodes: Sequence[SceneNode]) -> None: ...

    # Lifecycle
    def close(self, message: Optional[str] = None) -> None: ...
