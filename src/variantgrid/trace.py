"""
Debug tracing for layout runs.

When a run is started with ``debug=True`` the runner records every stage it
goes through (scope resolution, rotation check, analysis, planning,
application, page placement) and one placement record per variant.

Usage:
    >>> runner = LayoutRunner(document)
    >>> result = runner.run(debug=True)
    >>> trace = runner.get_trace()
    >>> print(trace.summary())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PlacementRecord:
    """
    Planned position of one variant.

    Attributes:
        set_name: Variant set the variant belongs to.
        key: Canonical key of the variant.
        x: Planned x coordinate (before the container is fitted).
        y: Planned y coordinate (before the container is fitted).
    """

    set_name: str
    key: str
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.set_name}: {self.key} -> ({self.x}, {self.y})"


@dataclass
class TraceStage:
    """
    Snapshot of one step of a run.

    Attributes:
        name: Stage name, e.g. "scope" or "planned".
        data: Relevant values at this stage.
        set_name: Variant set the stage refers to, empty for run-wide stages.
    """

    name: str
    data: Dict[str, Any]
    set_name: str = ""

    def __str__(self) -> str:
        title = f"=== Stage: {self.name}"
        if self.set_name:
            title += f" [{self.set_name}]"
        lines = [title + " ==="]
        for key, value in self.data.items():
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class RunTrace:
    """
    Complete trace of a layout run.

    Attributes:
        stages: Stages in the order they happened.
        placements: One record per planned variant position.
    """

    stages: List[TraceStage] = field(default_factory=list)
    placements: List[PlacementRecord] = field(default_factory=list)

    def add_stage(self, name: str, data: Dict[str, Any], set_name: str = "") -> None:
        self.stages.append(TraceStage(name, dict(data), set_name))

    def add_placement(self, set_name: str, key: str, x: float, y: float) -> None:
        self.placements.append(PlacementRecord(set_name, key, x, y))

    def get_stage(self, name: str, set_name: str = "") -> Optional[TraceStage]:
        """First stage called ``name`` (optionally for one variant set)."""
        for stage in self.stages:
            if stage.name == name and (not set_name or stage.set_name == set_name):
                return stage
        return None

    def get_placements_for(self, set_name: str) -> List[PlacementRecord]:
        return [p for p in self.placements if p.set_name == set_name]

    def summary(self) -> str:
        lines = [
            "=" * 60,
            "LAYOUT TRACE SUMMARY",
            "=" * 60,
            "",
            f"Stages: {len(self.stages)}",
        ]
        for stage in self.stages:
            suffix = f" [{stage.set_name}]" if stage.set_name else ""
            lines.append(f"  {stage.name}{suffix}")

        set_names = sorted({p.set_name for p in self.placements})
        lines.extend(["", f"Placements: {len(self.placements)}"])
        for name in set_names:
            lines.append(f"  {name}: {len(self.get_placements_for(name))}")

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the summary, every stage and every placement to a text file."""
        parts = [self.summary(), ""]
        parts.extend(str(stage) for stage in self.stages)
        parts.append("")
        parts.extend(str(p) for p in self.placements)
        with open(filename, "w", encoding="utf-8") as f:
            f.write("\n".join(parts))
