"""
Layout run orchestration.

A run goes through these steps:

1. Scope: the selected variant sets, or every variant set on the page when
   nothing is selected (whole-page mode). Sets are processed by name.
2. Rotation gate: if any variant in any set of the scope is rotated, a
   report is produced and the run ends without changing anything.
3. Per set: analyze, validate, plan, apply. A set that fails one of these
   steps is skipped and the run continues with the next one.
4. Whole-page mode: laid out sets directly on the page are lined up left to
   right, and every laid out set is moved to the front of the page.
5. Bring the laid out sets into view, notify the user and close the run.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .applier import BoundingBox, LayoutApplier
from .config import LayoutConfig
from .host import Host
from .indexer import analyze_variant_set, name_sort_key, variant_nodes
from .keys import build_key
from .nodes import SceneNode
from .planner import LayoutPlanner
from .report import ReportPayload, RotationReporter
from .trace import RunTrace
from .validation import (
    MissingAttributesError,
    RotationIssue,
    VariantSetError,
    check_rotation,
    missing_required_attributes,
    validate_variant_info,
)

logger = logging.getLogger(__name__)

NO_VARIANT_SETS_MESSAGE = "No variant sets found on the page."
NOTHING_ARRANGED_MESSAGE = "No variant sets were arranged."


@dataclass
class RunResult:
    """
    Outcome of a layout run.

    Attributes:
        processed: Names of the variant sets that were laid out.
        skipped: Variant set name -> reason it was skipped.
        aborted: True when the rotation gate stopped the run.
        rotation_issues: Rotated variants per variant set.
        report: Rotation report payload, when one was built.
        whole_page: True when the run covered every variant set on the page.
        message: Final message shown to the user.
    """

    processed: List[str] = field(default_factory=list)
    skipped: Dict[str, str] = field(default_factory=dict)
    aborted: bool = False
    rotation_issues: List[RotationIssue] = field(default_factory=list)
    report: Optional[ReportPayload] = None
    whole_page: bool = False
    message: str = ""

    @property
    def success(self) -> bool:
        return not self.aborted and bool(self.processed)


class LayoutRunner:
    """
    Runs the layout of every variant set in scope.

    Example:
        >>> runner = LayoutRunner(document, LayoutConfig(padding=16))
        >>> result = runner.run()
        >>> result.processed
        ['Buttons', 'Icons']
    """

    def __init__(self, host: Host, config: Optional[LayoutConfig] = None):
        self.host = host
        self.config = config or LayoutConfig()
        self.planner = LayoutPlanner(self.config)
        self.applier = LayoutApplier(host, self.config)
        self.reporter = RotationReporter(self.config.report_font_size)
        self._trace: Optional[RunTrace] = None

    def get_trace(self) -> Optional[RunTrace]:
        """Trace of the last run started with ``debug=True``."""
        return self._trace

    def _stage(self, name: str, data: Dict, set_name: str = "") -> None:
        if self._trace is not None:
            self._trace.add_stage(name, data, set_name)

    def resolve_scope(self) -> Tuple[List[SceneNode], bool]:
        """Return (variant sets sorted by name, whole-page mode flag)."""
        selected = self.host.selected_variant_sets()
        whole_page = not selected
        sets = self.host.find_variant_sets() if whole_page else selected
        return sorted(sets, key=lambda n: name_sort_key(n.name)), whole_page

    def check_rotations(self, sets: List[SceneNode]) -> List[RotationIssue]:
        issues = []
        for container in sets:
            names = check_rotation(
                variant_nodes(self.host, container), self.config.rotation_epsilon
            )
            if names:
                issues.append(RotationIssue(container.name, names))
        return issues

    def run(self, debug: bool = False) -> RunResult:
        """
        Lay out every variant set in scope.

        Args:
            debug: Record a RunTrace, available from ``get_trace()``.

        Returns:
            RunResult describing what was processed, skipped or reported.
        """
        self._trace = RunTrace() if debug else None
        host = self.host
        result = RunResult()

        sets, whole_page = self.resolve_scope()
        result.whole_page = whole_page
        self._stage(
            "scope",
            {"whole_page": whole_page, "sets": [s.name for s in sets]},
        )

        if not sets:
            logger.error(NO_VARIANT_SETS_MESSAGE)
            result.message = NO_VARIANT_SETS_MESSAGE
            host.notify(NO_VARIANT_SETS_MESSAGE, error=True)
            host.close(NO_VARIANT_SETS_MESSAGE)
            return result

        issues = self.check_rotations(sets)
        self._stage(
            "rotation_check",
            {"issues": {i.set_name: i.variant_names for i in issues}},
        )
        if issues:
            self._abort_on_rotation(sets, issues, result)
            return result

        offset_x = 0
        laid_out: List[SceneNode] = []
        for container in sets:
            logger.info("Processing variant set: %s", container.name)
            try:
                self.process(container)
            except VariantSetError as exc:
                logger.error("Skipping %s", exc)
                result.skipped[container.name] = exc.message
                host.notify(str(exc), error=True)
                self._stage("skipped", {"reason": exc.message}, container.name)
                continue

            # nested sets keep their place inside their parent
            if whole_page and host.is_top_level(container):
                host.move(container, offset_x, 0)
                offset_x += container.width + self.config.inter_set_gap
            laid_out.append(container)
            result.processed.append(container.name)

        if laid_out:
            if whole_page:
                host.bring_to_front(laid_out)
            host.scroll_into_view(laid_out)

        count = len(result.processed)
        if count == 0:
            logger.error(NOTHING_ARRANGED_MESSAGE)
            result.message = NOTHING_ARRANGED_MESSAGE
            host.notify(NOTHING_ARRANGED_MESSAGE, error=True)
        else:
            result.message = (
                f"Done! {count} variant set{'' if count == 1 else 's'} updated."
            )
            logger.info(result.message)
            host.notify(result.message)

        self._stage(
            "finished",
            {"processed": list(result.processed), "skipped": dict(result.skipped)},
        )
        host.close(result.message)
        return result

    def process(self, container: SceneNode) -> Optional[BoundingBox]:
        """
        Analyze, validate, plan and apply one variant set.

        Raises:
            VariantSetError: The set cannot be laid out. Nothing was changed.
        """
        names = self.config.attribute_names

        info = analyze_variant_set(self.host, container)
        self._stage(
            "analyzed",
            {"variants": len(info.variants), "property_keys": info.property_keys},
            container.name,
        )

        validate_variant_info(info, names)

        positions = self.planner.plan(info)
        if positions is None:
            raise MissingAttributesError(
                container.name, missing_required_attributes(info, names)
            )
        logger.info("Layout grid created with %d positions.", len(positions))
        self._stage("planned", {"positions": len(positions)}, container.name)

        if self._trace is not None:
            for variant in info.variants:
                key = build_key(variant.attributes, info.property_keys)
                position = positions[key]
                self._trace.add_placement(container.name, key, position.x, position.y)

        box = self.applier.apply(info, positions, container)
        self._stage(
            "applied",
            {"width": container.width, "height": container.height},
            container.name,
        )
        return box

    def _abort_on_rotation(
        self,
        sets: List[SceneNode],
        issues: List[RotationIssue],
        result: RunResult,
    ) -> None:
        host = self.host
        offending = [s for s in sets if any(i.set_name == s.name for i in issues)]

        fonts_loaded = host.load_report_fonts()
        payload = self.reporter.build_report(
            [(issue.set_name, issue.variant_names) for issue in issues]
        )

        if fonts_loaded:
            anchor = offending[0]
            host.insert_report(
                payload,
                anchor.x,
                anchor.y + anchor.height + self.config.inter_set_gap,
            )
        else:
            logger.warning("Report fonts unavailable, sending the report as a notification")
            host.notify(payload.text, error=True)

        host.scroll_into_view(offending)

        count = len(issues)
        message = (
            f"Rotation issues found in {count} variant "
            f"set{'' if count == 1 else 's'}. Nothing was changed."
        )
        logger.error(message)
        host.notify(message, error=True)
        host.close(message)

        result.aborted = True
        result.rotation_issues = issues
        result.report = payload
        result.message = message
        self._stage("aborted", {"report_inserted": fonts_loaded, "issues": count})


def run_layout(
    host: Host, config: Optional[LayoutConfig] = None, debug: bool = False
) -> RunResult:
    """
    Convenience function to run a layout on ``host``.

    Args:
        host: Host document.
        config: Layout configuration (defaults when omitted).
        debug: Record a trace of the run.

    Returns:
        RunResult of the run.
    """
    return LayoutRunner(host, config).run(debug=debug)
