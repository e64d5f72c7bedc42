# -*- coding: utf-8 -*-
"""
Text bounding box calculation.

Works out the exact pixel box (single pixel precision) of a string so a
text layer can be sized to hold it. Coordinates are baseline relative:
the rasterizer reports four corners of the glyph outline with y growing
downwards, so anything above the baseline has a negative y.
"""

from typing import NamedTuple, Sequence, Tuple

Corner = Tuple[int, int]


class TextBox(NamedTuple):
    left: int    # x of the glyph origin inside the layer
    top: int     # y of the baseline inside the layer
    width: int   # layer width
    height: int  # layer height


def glyph_corners(font, text: str) -> Tuple[Corner, Corner, Corner, Corner]:
    """
    Return the four corners of ``text`` rendered with a Pillow FreeType font.

    Order is lower-left, lower-right, upper-right, upper-left. Text is
    always measured unrotated.
    """
    left, top, right, bottom = font.getbbox(text, anchor='ls')
    return (left, bottom), (right, bottom), (right, top), (left, top)


def text_box_from_corners(corners: Sequence[Corner]) -> TextBox:
    xs = [x for x, _ in corners]
    ys = [y for _, y in corners]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return TextBox(
        left=max(0, abs(min_x) - 1),
        top=max(0, abs(min_y) - 1),
        width=max_x - min_x,
        height=max_y - min_y,
    )


def measure_text(font, text: str) -> TextBox:
    """
    Measure ``text`` and return where to draw it and how big the layer must be.

    There is no size argument: the point size is the one the font was
    loaded with (``FontInterface.truetype(size)``), so the same font object
    is used for measuring and drawing.

    Args:
        font: A loaded ``PIL.ImageFont.FreeTypeFont``
        text (str): Text to measure

    Returns:
        TextBox: ``left``/``top`` are passed to the draw call as the
        baseline origin, ``width``/``height`` size the layer.
    """
    return text_box_from_corners(glyph_corners(font, text))
