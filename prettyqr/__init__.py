# -*- coding: utf-8 -*-
"""
PrettyQR - Core Module

Renders QR codes as images with custom colors, gapped or solid modules,
rotation, centre text and caller-supplied hide masks, while keeping the
position and alignment squares intact.

Modules:
    generator: Fluent ``Generator`` front end
    qr_generator: segno encoding adapter
    renderer: Module drawing and layer compositing
    masks: Rotation, hide masks and mask helpers
    functional_areas: Position/alignment square masks
    text_box: Text bounding box calculation
    fonts: Font resources
    config: Colors and render configuration
"""

__version__ = "1.0.0"

from .config import Color, RenderConfig, TextRequest
from .exceptions import (
    EncodingError,
    FontNotFoundError,
    PrettyQrError,
    RenderFailure,
    SaveQrError,
    ValidationError,
)
from .fonts import FilesystemFont, FontInterface
from .functional_areas import build_finder_mask
from .generator import Generator
from .masks import build_hide_mask, empty_mask, rotate_matrix
from .qr_generator import encode, make_qr
from .renderer import apply_mask, render
from .text_box import TextBox, measure_text

__all__ = [
    'Color',
    'RenderConfig',
    'TextRequest',
    'EncodingError',
    'FontNotFoundError',
    'PrettyQrError',
    'RenderFailure',
    'SaveQrError',
    'ValidationError',
    'FilesystemFont',
    'FontInterface',
    'build_finder_mask',
    'Generator',
    'build_hide_mask',
    'empty_mask',
    'rotate_matrix',
    'encode',
    'make_qr',
    'apply_mask',
    'render',
    'TextBox',
    'measure_text',
]
