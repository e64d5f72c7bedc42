# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a module matrix plus a ``RenderConfig`` into a Pillow image. The QR
layer is drawn in three passes: content modules, finder patterns (always
on top so the symbol stays scannable) and finally the hide mask in the
background color. An optional text layer is drawn separately and both
layers are centred on a base canvas that includes the quiet zone.

Every intermediate image is closed before ``render`` returns, on success
and on failure alike.

Functions:
    apply_mask: Fill the modules of a mask on a canvas
    make_qr_layer: Draw the symbol without border
    make_text_layer: Draw the centre text on its own canvas
    add_layer: Centre one image on another
    render: Build the final image
"""

import logging
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw

from .config import Color, RenderConfig
from .exceptions import PrettyQrError, RenderFailure
from .functional_areas import build_finder_footprint, build_finder_mask
from .masks import build_hide_mask, rotate_matrix, subtract_mask, union_masks, validate_mask
from .text_box import measure_text

logger = logging.getLogger(__name__)

MODE = 'RGBA'


def apply_mask(
    image: Image.Image,
    mask: Sequence[Sequence[bool]],
    module_size: int,
    color: Color,
    solid: bool = True
) -> None:
    """
    Draw every True module of ``mask`` onto ``image``.

    Module ``(i, j)`` (row, column) covers pixels ``[j*m, j*m+m-1]`` by
    ``[i*m, i*m+m-1]``. When ``solid`` is False the rectangle is inset by
    one pixel on each side, leaving a 2px gap between neighbours.

    Args:
        image (Image.Image): Canvas, modified in place
        mask (Sequence[Sequence[bool]]): Modules to fill
        module_size (int): Pixel size per module
        color (Color): Fill color
        solid (bool): Fill the whole module cell
    """
    draw = ImageDraw.Draw(image)
    fill = color.to_pillow()
    inset = 0 if solid else 1
    size = len(mask)

    for i in range(size):
        for j in range(size):
            if not mask[i][j]:
                continue
            x1 = j * module_size + inset
            y1 = i * module_size + inset
            x2 = x1 + module_size - 1 - 2 * inset
            y2 = y1 + module_size - 1 - 2 * inset
            draw.rectangle([x1, y1, x2, y2], fill=fill)


def make_qr_layer(
    matrix: Sequence[Sequence[bool]],
    config: RenderConfig,
    hide_mask: Optional[Sequence[Sequence[bool]]] = None
) -> Image.Image:
    """
    Create the QR image (no borders).

    ``hide_mask`` is taken as already rotated: it refers to the modules as
    they appear in the output. Modules belonging to a finder pattern are
    never hidden.
    """
    size = len(matrix)
    turns = config.quarter_turns
    px = size * config.module_size
    image = Image.new(MODE, (px, px), config.background.to_pillow())

    try:
        content = rotate_matrix(matrix, turns)
        apply_mask(image, content, config.module_size, config.foreground, config.solid)

        finder = rotate_matrix(build_finder_mask(size), turns)
        apply_mask(image, finder, config.module_size, config.foreground)

        if hide_mask is not None:
            footprint = rotate_matrix(build_finder_footprint(size), turns)
            apply_mask(image, subtract_mask(hide_mask, footprint), config.module_size, config.background)
    except Exception:
        image.close()
        raise

    logger.debug(f"QR layer {px}x{px}px ({size} modules, {turns} quarter turns, solid={config.solid})")
    return image


def make_text_layer(config: RenderConfig) -> Image.Image:
    """
    Create the font image: the centre text on a background-colored canvas
    sized to the exact glyph box.
    """
    request = config.center_text
    font = request.font.truetype(request.size)
    box = measure_text(font, request.text)

    image = Image.new(MODE, (box.width, box.height), config.background.to_pillow())
    try:
        draw = ImageDraw.Draw(image)
        draw.text((box.left, box.top), request.text, font=font,
                  fill=config.foreground.to_pillow(), anchor='ls')
    except Exception:
        image.close()
        raise

    logger.debug(f"Text layer {box.width}x{box.height}px for {request.text!r} at size {request.size}")
    return image


def add_layer(base: Image.Image, layer: Image.Image) -> None:
    """Paste ``layer`` centred on ``base`` (offsets rounded down)."""
    x = (base.width - layer.width) // 2
    y = (base.height - layer.height) // 2
    base.paste(layer, (x, y))


def render(config: RenderConfig, matrix: Sequence[Sequence[bool]]) -> Image.Image:
    """
    Build the final image for ``matrix``.

    Args:
        config (RenderConfig): Colors, rotation, style, masks and text
        matrix (Sequence[Sequence[bool]]): Unrotated module matrix (True=dark)

    Returns:
        Image.Image: RGBA image; the caller owns it and should close it

    Raises:
        ValidationError: If the hide mask does not match the matrix size
        RenderFailure: If Pillow fails to allocate, load a font or draw,
            or any other step of the render raises
    """
    size = len(matrix)
    layers: List[Image.Image] = []
    base = None
    done = False

    try:
        hide_mask = config.hide_mask
        if hide_mask is not None:
            validate_mask(hide_mask, size)

        text_layer = None
        if config.center_text is not None:
            text_layer = make_text_layer(config)
            layers.append(text_layer)
            text_mask = build_hide_mask(size, config.module_size, text_layer.width, text_layer.height)
            hide_mask = text_mask if hide_mask is None else union_masks(hide_mask, text_mask)

        qr_layer = make_qr_layer(matrix, config, hide_mask)
        layers.append(qr_layer)

        width = height = qr_layer.width + config.module_size * config.border_size * 2
        if text_layer is not None:
            width = max(width, text_layer.width)
            height = max(height, text_layer.height)

        base = Image.new(MODE, (width, height), config.background.to_pillow())
        add_layer(base, qr_layer)
        if text_layer is not None:
            add_layer(base, text_layer)
        done = True
    except PrettyQrError:
        raise
    except Exception as ex:
        logger.error(f"Rendering failed: {ex}")
        raise RenderFailure(f"Unable to render QR code: {ex}") from ex
    finally:
        for layer in layers:
            layer.close()
        if not done and base is not None:
            base.close()

    logger.debug(f"Rendered QR image {width}x{height}px")
    return base
