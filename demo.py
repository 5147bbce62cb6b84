#!/usr/bin/env python3
"""
Demo script for variantgrid.

Builds a small page of variant sets in memory, lays it out and writes PNG
previews of the result.
"""

import logging

from variantgrid import LayoutRunner, SceneDocument, VariantNode, VariantSetNode
from variantgrid.preview import PreviewRenderer


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def add_icon_set(document, name, sets, styles, colors, sizes, rotated=()):
    container = document.add(VariantSetNode(name=name, x=300, y=200, width=400, height=400))
    for set_value in sets:
        for style in styles:
            for color in colors:
                for size in sizes:
                    attributes = {"Set": set_value, "Style": style, "Color": color, "Size": size}
                    label = ", ".join(f"{k}={v}" for k, v in attributes.items())
                    document.add(
                        VariantNode(
                            name=label,
                            width=int(size),
                            height=int(size),
                            rotation=15 if label in rotated else 0,
                            attributes=attributes,
                        ),
                        parent=container,
                    )
    return container


def print_result(result):
    print(f"Message:   {result.message}")
    print(f"Processed: {', '.join(result.processed) or '-'}")
    for name, reason in result.skipped.items():
        print(f"Skipped:   {name}: {reason}")


def demo_1():
    """Demo 1: Whole page"""
    print_header("Demo 1: Two variant sets on one page")

    document = SceneDocument()
    add_icon_set(document, "Icons", ["outline", "solid"], ["default"], ["none", "s", "blue"], ["16", "24"])
    add_icon_set(document, "Arrows", ["a"], ["filled", "line"], ["none", "red"], ["16", "20", "24"])

    runner = LayoutRunner(document)
    result = runner.run(debug=True)
    print_result(result)
    print()
    print(runner.get_trace().summary())

    PreviewRenderer().render_scene(document, "demo_layout.png")
    print("\nPreview written to demo_layout.png")


def demo_2():
    """Demo 2: Rotation report"""
    print_header("Demo 2: A rotated variant stops the run")

    document = SceneDocument()
    add_icon_set(
        document,
        "Icons",
        ["a"],
        ["filled"],
        ["none"],
        ["16", "24"],
        rotated=("Set=a, Style=filled, Color=none, Size=24",),
    )

    result = LayoutRunner(document).run()
    print_result(result)
    print()
    print(result.report.text)

    PreviewRenderer().render_report(result.report, "demo_report.png")
    print("\nReport written to demo_report.png")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    demo_1()
    demo_2()


if __name__ == "__main__":
    main()
