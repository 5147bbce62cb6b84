"""Pytest configuration and shared fixtures for variantgrid tests."""

import pytest

from variantgrid import (
    LayoutConfig,
    SceneDocument,
    Variant,
    VariantInfo,
    VariantNode,
    VariantSetNode,
    collect_attributes,
)


def _variant_name(attributes):
    return ", ".join(f"{k}={v}" for k, v in attributes.items())


@pytest.fixture
def document():
    """Empty scene document."""
    return SceneDocument()


@pytest.fixture
def add_variant_set():
    """
    Factory adding a variant set to a document.

    Each entry of ``variants`` is either an attribute dict or a ready
    VariantNode.
    """

    def _add(document, name, variants, size=(24, 24), x=0, y=0):
        container = document.add(
            VariantSetNode(name=name, x=x, y=y, width=200, height=200)
        )
        for i, entry in enumerate(variants):
            if isinstance(entry, VariantNode):
                node = entry
            else:
                node = VariantNode(
                    name=_variant_name(entry),
                    x=i * 30,
                    y=i * 10,
                    width=size[0],
                    height=size[1],
                    attributes=dict(entry),
                )
            document.add(node, parent=container)
        return container

    return _add


@pytest.fixture
def make_info():
    """Factory building a VariantInfo straight from attribute dicts."""

    def _make(variants, size=(24, 24), set_name="Icons"):
        items = [
            Variant(
                node=VariantNode(
                    name=_variant_name(attrs),
                    width=size[0],
                    height=size[1],
                    attributes=dict(attrs),
                ),
                attributes=dict(attrs),
            )
            for attrs in variants
        ]
        keys, values = collect_attributes(items)
        return VariantInfo(
            property_keys=keys, property_values=values, variants=items, set_name=set_name
        )

    return _make


@pytest.fixture
def grid_variants():
    """Two colors by two sizes in a single set and style."""
    return [
        {"Set": "a", "Style": "filled", "Color": "none", "Size": "16"},
        {"Set": "a", "Style": "filled", "Color": "solid", "Size": "16"},
        {"Set": "a", "Style": "filled", "Color": "none", "Size": "24"},
        {"Set": "a", "Style": "filled", "Color": "solid", "Size": "24"},
    ]


@pytest.fixture
def two_block_variants():
    """Two set blocks, two sizes, one style and one color."""
    return [
        {"Set": "b", "Style": "line", "Color": "none", "Size": "16"},
        {"Set": "b", "Style": "line", "Color": "none", "Size": "24"},
        {"Set": "a", "Style": "line", "Color": "none", "Size": "16"},
        {"Set": "a", "Style": "line", "Color": "none", "Size": "24"},
    ]


@pytest.fixture
def config():
    """Default configuration (cell 52, padding 20)."""
    return LayoutConfig()


@pytest.fixture
def top_aligned():
    """Configuration placing variants at the top of their cell."""
    return LayoutConfig(center_in_cell=False)
