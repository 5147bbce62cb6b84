"""
Rotation report payload.

The report is plain text plus a list of character ranges tagged with a role,
so a renderer can make the title and the group names bold. Building the
payload does not touch fonts or the document.

Layout of the text::

    <title>
    <blank>
    • <group name>
        <item>
        <item>
    <blank>
    • <group name>
        <item>
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_REPORT_FONT_SIZE

REPORT_TITLE = "Rotation issues detected — normalize rotation to zero and re-run"
BULLET = "• "
ITEM_INDENT = "    "


class ReportRole(Enum):
    TITLE = "title"
    GROUP = "group"
    ITEM = "item"


@dataclass(frozen=True)
class StyledRange:
    """Half-open character range ``[start, end)`` of the report text."""

    start: int
    end: int
    role: ReportRole

    @property
    def bold(self) -> bool:
        return self.role in (ReportRole.TITLE, ReportRole.GROUP)


@dataclass
class ReportPayload:
    text: str = ""
    ranges: List[StyledRange] = field(default_factory=list)
    font_size: int = DEFAULT_REPORT_FONT_SIZE

    def ranges_for(self, role: ReportRole) -> List[StyledRange]:
        return [r for r in self.ranges if r.role is role]

    def slice(self, styled: StyledRange) -> str:
        return self.text[styled.start : styled.end]


class RotationReporter:
    """Builds the styled report for variants with a non-zero rotation."""

    def __init__(self, font_size: int = DEFAULT_REPORT_FONT_SIZE):
        self.font_size = font_size

    def build_report(
        self, grouped_issues: Sequence[Tuple[str, Sequence[str]]]
    ) -> ReportPayload:
        """
        Build the report payload.

        Args:
            grouped_issues: (group name, [item names]) pairs in display order.

        Returns:
            ReportPayload with the text and its styled ranges.
        """
        lines: List[str] = []
        ranges: List[StyledRange] = []
        length = 0

        def append_line(text: str, role: Optional[ReportRole] = None) -> None:
            nonlocal length
            if lines:
                length += 1  # newline
            if role is not None:
                ranges.append(StyledRange(length, length + len(text), role))
            lines.append(text)
            length += len(text)

        append_line(REPORT_TITLE, ReportRole.TITLE)
        append_line("")

        for i, (group_name, item_names) in enumerate(grouped_issues):
            append_line(BULLET + group_name, ReportRole.GROUP)
            for item in item_names:
                append_line(ITEM_INDENT + item, ReportRole.ITEM)
            if i < len(grouped_issues) - 1:
                append_line("")

        return ReportPayload(text="\n".join(lines), ranges=ranges, font_size=self.font_size)


def build_report(
    grouped_issues: Sequence[Tuple[str, Sequence[str]]],
    font_size: int = DEFAULT_REPORT_FONT_SIZE,
) -> ReportPayload:
    """Convenience wrapper around ``RotationReporter.build_report``."""
    return RotationReporter(font_size).build_report(grouped_issues)
