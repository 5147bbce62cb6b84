"""Unit tests for applying a planned layout."""

from variantgrid import (
    BoundingBox,
    Constraints,
    FrameNode,
    GroupNode,
    LayoutApplier,
    LayoutPlanner,
    Position,
    VariantNode,
    analyze_variant_set,
    bounding_box,
)
from variantgrid.applier import reset_constraints, visual_order

STRETCH = Constraints("STRETCH", "STRETCH")


def _arrange(document, container, config):
    info = analyze_variant_set(document, container)
    positions = LayoutPlanner(config).plan(info)
    box = LayoutApplier(document, config).apply(info, positions, container)
    return info, positions, box


class TestBoundingBox:
    """Tests for bounding_box."""

    def test_single(self):
        """Bounds of one node are its own rectangle."""
        box = bounding_box([FrameNode(x=10, y=5, width=20, height=30)])
        assert box == BoundingBox(10, 5, 30, 35)
        assert box.width == 20
        assert box.height == 30

    def test_multiple(self):
        """Bounds cover all nodes."""
        nodes = [
            FrameNode(x=10, y=10, width=10, height=10),
            FrameNode(x=-5, y=40, width=20, height=5),
        ]
        assert bounding_box(nodes) == BoundingBox(-5, 10, 20, 45)

    def test_empty(self):
        """No nodes gives no bounds."""
        assert bounding_box([]) is None


class TestVisualOrder:
    """Tests for visual_order."""

    def test_row_major(self):
        """Nodes sort by y, then by x."""
        a = FrameNode(name="a", x=50, y=0)
        b = FrameNode(name="b", x=0, y=10)
        c = FrameNode(name="c", x=0, y=0)
        assert [n.name for n in visual_order([a, b, c])] == ["c", "a", "b"]


class TestResetConstraints:
    """Tests for reset_constraints."""

    def test_recursive(self, document, add_variant_set):
        """The variant and every constrainable descendant are pinned top-left."""
        variant = VariantNode(name="v", constraints=STRETCH, attributes={"Size": "1"})
        add_variant_set(document, "Icons", [variant])
        inner = document.add(FrameNode(name="inner", constraints=STRETCH), parent=variant)
        group = document.add(GroupNode(name="group"), parent=inner)
        leaf = document.add(FrameNode(name="leaf", constraints=STRETCH), parent=group)

        reset_constraints(document, variant)

        assert variant.constraints == Constraints("MIN", "MIN")
        assert inner.constraints == Constraints("MIN", "MIN")
        assert leaf.constraints == Constraints("MIN", "MIN")
        assert group.constraints is None


class TestLayoutApplier:
    """Tests for LayoutApplier.apply."""

    def test_scenario_grid(self, document, add_variant_set, grid_variants, config):
        """A 2x2 grid starts at the padding with a pitch of one cell."""
        icons = add_variant_set(document, "Icons", grid_variants, size=(52, 52))
        _arrange(document, icons, config)

        coords = sorted((c.x, c.y) for c in document.children(icons))
        assert coords == [(20, 20), (20, 72), (72, 20), (72, 72)]
        assert (icons.width, icons.height) == (144, 144)

    def test_centered_variants_shifted_into_padding(
        self, document, add_variant_set, grid_variants, config
    ):
        """Centered variants are moved so their bounds start at the padding."""
        icons = add_variant_set(document, "Icons", grid_variants, size=(24, 24))
        _, _, box = _arrange(document, icons, config)

        assert box == BoundingBox(20, 34, 96, 110)
        coords = sorted((c.x, c.y) for c in document.children(icons))
        assert coords == [(20, 20), (20, 72), (72, 20), (72, 72)]
        assert (icons.width, icons.height) == (116, 116)

    def test_children_reordered_row_major(self, document, add_variant_set, grid_variants, config):
        """Child order follows the visual grid, row by row."""
        icons = add_variant_set(document, "Icons", list(reversed(grid_variants)))
        _arrange(document, icons, config)

        names = [c.name for c in document.children(icons)]
        assert names == [
            "Set=a, Style=filled, Color=none, Size=16",
            "Set=a, Style=filled, Color=none, Size=24",
            "Set=a, Style=filled, Color=solid, Size=16",
            "Set=a, Style=filled, Color=solid, Size=24",
        ]

    def test_bounding_box_tight(self, document, add_variant_set, two_block_variants, config):
        """Container size equals child bounds plus padding on every side."""
        icons = add_variant_set(document, "Icons", two_block_variants, size=(30, 20))
        _arrange(document, icons, config)

        children = document.children(icons)
        box = bounding_box(children)
        assert icons.width == box.width + 2 * config.padding
        assert icons.height == box.height + 2 * config.padding
        assert min(c.x for c in children) == config.padding
        assert min(c.y for c in children) == config.padding
        assert max(c.x + c.width for c in children) == icons.width - config.padding
        assert max(c.y + c.height for c in children) == icons.height - config.padding

    def test_constraints_reset(self, document, add_variant_set, config):
        """Variants end up with top-left constraints."""
        variant = VariantNode(
            name="v",
            width=24,
            height=24,
            constraints=STRETCH,
            attributes={"Style": "s", "Color": "none", "Size": "16"},
        )
        icons = add_variant_set(document, "Icons", [variant])
        _arrange(document, icons, config)
        assert variant.constraints == Constraints("MIN", "MIN")

    def test_idempotent(self, document, add_variant_set, two_block_variants, config):
        """Running twice gives the same positions and size as running once."""
        icons = add_variant_set(document, "Icons", two_block_variants, size=(30, 20))

        _, first_positions, _ = _arrange(document, icons, config)
        first = [(c.name, c.x, c.y) for c in document.children(icons)]
        first_size = (icons.width, icons.height)

        _, second_positions, _ = _arrange(document, icons, config)
        second = [(c.name, c.x, c.y) for c in document.children(icons)]

        assert second_positions == first_positions
        assert second == first
        assert (icons.width, icons.height) == first_size

    def test_missing_position_left_at_origin(self, document, add_variant_set, config):
        """A variant without a planned position stays at the zeroed spot."""
        icons = add_variant_set(
            document,
            "Icons",
            [
                {"Style": "s", "Color": "none", "Size": "16"},
                {"Style": "s", "Color": "none", "Size": "24"},
            ],
        )
        info = analyze_variant_set(document, icons)
        LayoutApplier(document, config).apply(
            info, {"none|16|s": Position(100, 100)}, icons
        )
        by_name = {c.name: c for c in document.children(icons)}
        # bounds span (0, 0) to (124, 124) before the shift into the padding
        assert (by_name["Style=s, Color=none, Size=24"].x, by_name["Style=s, Color=none, Size=24"].y) == (20, 20)
        assert (by_name["Style=s, Color=none, Size=16"].x, by_name["Style=s, Color=none, Size=16"].y) == (120, 120)

    def test_empty_container_is_noop(self, document, add_variant_set, config, make_info):
        """A container without children is not resized."""
        icons = add_variant_set(document, "Icons", [])
        info = make_info([])
        box = LayoutApplier(document, config).apply(info, {}, icons)
        assert box is None
        assert (icons.width, icons.height) == (200, 200)
        assert document.mutations == []
