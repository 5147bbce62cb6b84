"""Unit tests for the rotation report payload."""

from variantgrid import ReportRole, RotationReporter, build_report
from variantgrid.report import REPORT_TITLE


class TestRotationReporter:
    """Tests for RotationReporter.build_report."""

    def test_text_layout(self):
        """Title, blank line, then bullet groups with indented items."""
        payload = build_report([("Icons", ["a", "b"]), ("Buttons", ["c"])])
        assert payload.text == "\n".join(
            [
                REPORT_TITLE,
                "",
                "• Icons",
                "    a",
                "    b",
                "",
                "• Buttons",
                "    c",
            ]
        )

    def test_no_trailing_separator(self):
        """The last group is not followed by a blank line."""
        payload = build_report([("Icons", ["a"])])
        assert payload.text.endswith("    a")

    def test_title_range(self):
        """The title is the first range and is bold."""
        payload = build_report([("Icons", ["a"])])
        title = payload.ranges[0]
        assert title.role is ReportRole.TITLE
        assert (title.start, title.end) == (0, len(REPORT_TITLE))
        assert title.bold is True

    def test_group_ranges(self):
        """Each group line gets a bold group range."""
        payload = build_report([("Icons", ["a"]), ("Buttons", ["c"])])
        groups = payload.ranges_for(ReportRole.GROUP)
        assert [payload.slice(r) for r in groups] == ["• Icons", "• Buttons"]
        assert all(r.bold for r in groups)

    def test_item_ranges(self):
        """Each item line gets a plain item range."""
        payload = build_report([("Icons", ["a", "b"]), ("Buttons", ["c"])])
        items = payload.ranges_for(ReportRole.ITEM)
        assert [payload.slice(r) for r in items] == ["    a", "    b", "    c"]
        assert not any(r.bold for r in items)

    def test_ranges_in_order(self):
        """Ranges appear in text order without overlapping."""
        payload = build_report([("Icons", ["a", "b"]), ("Buttons", ["c"])])
        ends = [r.end for r in payload.ranges]
        starts = [r.start for r in payload.ranges]
        assert all(starts[i + 1] > ends[i] for i in range(len(ends) - 1))

    def test_font_size(self):
        """The payload carries the configured font size."""
        assert RotationReporter(font_size=14).build_report([("A", ["x"])]).font_size == 14
        assert build_report([("A", ["x"])]).font_size == 12

    def test_reporter_reusable(self):
        """Building twice with one reporter gives independent payloads."""
        reporter = RotationReporter()
        first = reporter.build_report([("A", ["x"])])
        second = reporter.build_report([("B", ["y"])])
        assert "A" not in second.text
        assert len(second.ranges) == 3
        assert first.text.endswith("    x")
        assert [first.slice(r) for r in first.ranges][1:] == ["• A", "    x"]
        assert vars(reporter) == {"font_size": 12}

    def test_no_groups(self):
        """Without groups only the title and the blank line remain."""
        payload = build_report([])
        assert payload.text == REPORT_TITLE + "\n"
        assert len(payload.ranges) == 1
