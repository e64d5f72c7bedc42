# -*- coding: utf-8 -*-
"""
Render Configuration Module

Holds the value types that describe one render session: colors, the
optional centre text request and the full ``RenderConfig``. The sizing
constants used to live as process-wide defines; here they are fields with
defaults so independent sessions can use different values.

Alpha follows the 0..127 convention (0 = opaque, 127 = fully transparent)
and is only converted to Pillow's 0..255 range when a canvas is painted.
"""

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any, NamedTuple, Optional, Tuple

from .exceptions import ValidationError
from .masks import validate_mask

# Defaults
MODULE_SIZE = 10        # module size in pixels
BORDER_SIZE = 4         # border (quiet zone) size in modules
ERROR_CORRECTION = 'L'  # error correction level
PNG_COMPRESSION = 6     # zlib level used by save()/to_png()

ERROR_LEVELS = ('L', 'M', 'Q', 'H')
MAX_ALPHA = 127

Mask = Tuple[Tuple[bool, ...], ...]


class Color(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = 0

    def to_pillow(self) -> Tuple[int, int, int, int]:
        """Return the color as a Pillow RGBA tuple (alpha 255 = opaque)."""
        return (self.red, self.green, self.blue,
                255 - int(round(self.alpha * 255 / MAX_ALPHA)))


BLACK = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255, 0)


def validate_rgba(r: Any, g: Any, b: Any, a: Any = 0) -> Color:
    """
    Validate the four channels and build a Color.

    Raises:
        ValidationError: if a channel is not an integer, an RGB channel is
            outside 0-255 or alpha is outside 0-127.
    """
    rgba = (r, g, b, a)
    for key, value in enumerate(rgba):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValidationError(f"All RGBA values must be integers: {rgba}")
        if key < 3:
            if value < 0 or value > 255:
                raise ValidationError(f"Each RGB value must be between 0-255: {rgba[:3]}")
        elif value < 0 or value > MAX_ALPHA:
            raise ValidationError(f"Alpha value must be between 0-{MAX_ALPHA}: [{value}]")
    return Color(*(int(v) for v in rgba))


def _as_color(value: Any) -> Color:
    try:
        channels = tuple(value)
    except TypeError:
        raise ValidationError(f"Color must be an RGBA tuple: [{value!r}]") from None
    if len(channels) not in (3, 4):
        raise ValidationError(f"Color must have 3 or 4 channels: [{value!r}]")
    return validate_rgba(*channels)


def validate_angle(angle: Any) -> int:
    """
    Validate a rotation angle and return it as an int.

    Numeric strings ("180") are accepted. The angle must be a whole
    multiple of 90; it is not normalized here.
    """
    value = angle
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValidationError(f"The angle must be numeric, actual value: [{angle!r}]") from None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"The angle must be numeric, actual type: [{type(angle).__name__}]")
    if not math.isfinite(value):
        raise ValidationError(f"The angle must be a finite number: [{angle}]")
    if value != int(value) or int(value) % 90:
        raise ValidationError(f"The angle must be a multiple of 90: [{angle}]")
    return int(value)


def validate_level(level: Any) -> str:
    ecc = str(level or '').strip().upper()
    if ecc not in ERROR_LEVELS:
        raise ValidationError(f"Error correction level must be one of {ERROR_LEVELS}: [{level}]")
    return ecc


@dataclass(frozen=True)
class TextRequest:
    """Text drawn in the middle of the symbol over a blanked-out area."""
    text: str
    font: Any  # FontInterface
    size: int


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything needed to turn a module matrix into an image.

    Instances are immutable; ``Generator`` setters validate their input
    and swap in a new instance with ``dataclasses.replace``.

    Attributes:
        module_size (int): Pixel size of one module
        border_size (int): Quiet zone width in modules
        error_correction (str): Default level used by ``content()``
        png_compression (int): zlib level for PNG output (0-9)
        foreground (Color): Dark module and text color
        background (Color): Canvas, light module and punch-out color
        rotation (int): Clockwise rotation in degrees, multiple of 90
        solid (bool): True to fill whole module cells, False for 1px gaps
        hide_mask (Optional[Mask]): Caller supplied modules to blank out
        center_text (Optional[TextRequest]): Text drawn over the centre
    """
    module_size: int = MODULE_SIZE
    border_size: int = BORDER_SIZE
    error_correction: str = ERROR_CORRECTION
    png_compression: int = PNG_COMPRESSION
    foreground: Color = BLACK
    background: Color = WHITE
    rotation: int = 0
    solid: bool = False
    hide_mask: Optional[Mask] = field(default=None, repr=False)
    center_text: Optional[TextRequest] = None

    def __post_init__(self):
        if isinstance(self.module_size, bool) or not isinstance(self.module_size, Integral) \
                or self.module_size < 1:
            raise ValidationError(f"module_size must be a positive integer: [{self.module_size}]")
        if isinstance(self.border_size, bool) or not isinstance(self.border_size, Integral) \
                or self.border_size < 0:
            raise ValidationError(f"border_size must be a non-negative integer: [{self.border_size}]")
        if not 0 <= self.png_compression <= 9:
            raise ValidationError(f"png_compression must be between 0-9: [{self.png_compression}]")
        object.__setattr__(self, 'error_correction', validate_level(self.error_correction))
        object.__setattr__(self, 'foreground', _as_color(self.foreground))
        object.__setattr__(self, 'background', _as_color(self.background))
        object.__setattr__(self, 'rotation', validate_angle(self.rotation))
        if self.hide_mask is not None:
            try:
                size = len(self.hide_mask)
            except TypeError:
                raise ValidationError("hide_mask must be a sequence of rows") from None
            validate_mask(self.hide_mask, size)

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise quarter turns, wrapped into 0..3."""
        return rotation_count(self.rotation)


def rotation_count(angle: int) -> int:
    """
    Convert an angle in degrees into clockwise quarter turns (0..3).

    Negative angles wrap around: -90 -> 3.
    """
    return (int(angle) // 90) % 4
