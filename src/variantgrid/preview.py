"""
PNG previews of a laid out page and of rotation reports.

Renders a ``SceneDocument`` page as an image: every variant set is drawn as
an outlined container and every variant as a labelled box at its position
inside the set. Rotation report payloads are rendered line by line with the
title and group names in bold.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .nodes import NodeKind, SceneNode
from .report import ReportPayload
from .scene import SceneDocument

REGULAR_FONTS = [
    "DejaVuSans",
    "DejaVu Sans",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "Arial",
    "C:/Windows/Fonts/arial.ttf",
]

BOLD_FONTS = [
    "DejaVuSans-Bold",
    "DejaVu Sans Bold",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "Arial Bold",
    "C:/Windows/Fonts/arialbd.ttf",
]


def load_font(font_size: int, bold: bool = False, font_name: Optional[str] = None):
    """
    Load a font for preview rendering.

    Tries the given font name, then common system fonts, then Pillow's
    default font.
    """
    fonts_to_try = [font_name] if font_name else []
    fonts_to_try.extend(BOLD_FONTS if bold else REGULAR_FONTS)

    for font in fonts_to_try:
        try:
            return ImageFont.truetype(font, font_size)
        except OSError:
            continue

    return ImageFont.load_default(size=font_size)


class PreviewRenderer:
    """
    Renders scene pages and reports to PNG.

    Attributes:
        scale: Resolution multiplier.
        margin: Blank border around the page content, in document units.
        font_size: Label font size, in document units.
        font_name: Optional font to try before the system fonts.
    """

    def __init__(
        self,
        scale: int = 2,
        margin: int = 20,
        font_size: int = 9,
        font_name: Optional[str] = None,
    ):
        self.scale = scale
        self.margin = margin
        self.font_size = font_size
        self.font_name = font_name

        self.bg_color = (255, 255, 255)
        self.set_outline = (151, 71, 255)
        self.variant_fill = (245, 245, 245)
        self.variant_outline = (90, 90, 90)
        self.text_color = (0, 0, 0)

    def _page_items(self, document: SceneDocument) -> List[Tuple[SceneNode, float, float]]:
        """Top-level nodes and their children with absolute coordinates."""
        items = []
        for node in document.children(document.page):
            items.append((node, node.x, node.y))
            if node.kind is NodeKind.VARIANT_SET:
                for child in document.children(node):
                    items.append((child, node.x + child.x, node.y + child.y))
        return items

    def render_scene(self, document: SceneDocument, output_path: str) -> str:
        """
        Render the page of ``document``.

        Args:
            document: Document to render.
            output_path: Path of the PNG file to write.

        Returns:
            Path to the saved PNG file.
        """
        items = self._page_items(document)
        if not items:
            img = Image.new("RGB", (200, 100), self.bg_color)
            img.save(output_path)
            return output_path

        s = self.scale
        min_x = min(x for _, x, _ in items)
        min_y = min(y for _, _, y in items)
        max_x = max(x + n.width for n, x, _ in items)
        max_y = max(y + n.height for n, _, y in items)

        width = int((max_x - min_x + self.margin * 2) * s) + 1
        height = int((max_y - min_y + self.margin * 2) * s) + 1
        img = Image.new("RGB", (width, height), self.bg_color)
        draw = ImageDraw.Draw(img)
        font = load_font(self.font_size * s, font_name=self.font_name)

        def to_px(x: float, y: float) -> Tuple[float, float]:
            return ((x - min_x + self.margin) * s, (y - min_y + self.margin) * s)

        for node, x, y in items:
            left, top = to_px(x, y)
            right, bottom = to_px(x + node.width, y + node.height)
            if node.kind is NodeKind.VARIANT_SET:
                draw.rectangle([left, top, right, bottom], outline=self.set_outline, width=s)
                draw.text((left, top - self.font_size * s * 1.4), node.name, fill=self.set_outline, font=font)
            elif node.kind is NodeKind.TEXT:
                draw.multiline_text((left, top), node.characters, fill=self.text_color, font=font)
            else:
                draw.rectangle(
                    [left, top, right, bottom],
                    fill=self.variant_fill,
                    outline=self.variant_outline,
                    width=max(1, s // 2),
                )
                draw.text((left + s, top + s), node.name, fill=self.text_color, font=font)

        img.save(output_path, "PNG")
        return output_path

    def render_report(self, payload: ReportPayload, output_path: str) -> str:
        """
        Render a rotation report with bold title and group lines.

        Args:
            payload: Report to render.
            output_path: Path of the PNG file to write.

        Returns:
            Path to the saved PNG file.
        """
        s = self.scale
        regular = load_font(payload.font_size * s, font_name=self.font_name)
        bold = load_font(payload.font_size * s, bold=True)
        bold_starts = {r.start for r in payload.ranges if r.bold}

        line_height = int(payload.font_size * s * 1.4)
        padding = self.margin * s

        measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        lines = []
        offset = 0
        max_width = 0
        for line in payload.text.split("\n"):
            font = bold if offset in bold_starts and line else regular
            bbox = measure.textbbox((0, 0), line, font=font)
            max_width = max(max_width, int(bbox[2] - bbox[0]) + 1)
            lines.append((line, font))
            offset += len(line) + 1

        img = Image.new(
            "RGB",
            (max_width + padding * 2, line_height * len(lines) + padding * 2),
            self.bg_color,
        )
        draw = ImageDraw.Draw(img)
        y = padding
        for line, font in lines:
            draw.text((padding, y), line, fill=self.text_color, font=font)
            y += line_height

        img.save(Path(output_path), "PNG")
        return output_path


def render_to_png(document: SceneDocument, output_path: str = "layout.png", **kwargs) -> str:
    """
    Convenience function to render a document page to PNG.

    Args:
        document: Document to render.
        output_path: Path to save the PNG file.
        **kwargs: Additional parameters for PreviewRenderer.

    Returns:
        Path to the saved PNG file.
    """
    return PreviewRenderer(**kwargs).render_scene(document, output_path)
