# -*- coding: utf-8 -*-
"""
Fluent QR code generator.

Example:
    >>> qr = (Generator()
    ...       .content("https://example.com")
    ...       .foreground(20, 90, 160)
    ...       .rotate(90)
    ...       .solid())
    >>> qr.save("qr.png")

Every setter validates its input immediately and returns the generator;
a rejected value leaves the previous configuration untouched.
"""

import dataclasses
import logging
from io import BytesIO
from typing import List, Optional, Sequence

from PIL import Image

from .config import RenderConfig, TextRequest, validate_angle, validate_level, validate_rgba
from .exceptions import ValidationError, SaveQrError
from .masks import empty_mask, validate_mask
from .qr_generator import encode
from .renderer import render

logger = logging.getLogger(__name__)


class Generator:
    """
    Builds a styled QR code image.

    Args:
        config (Optional[RenderConfig]): Starting configuration; module
            size, border and default error correction come from here
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self._config = config or RenderConfig()
        self._text: Optional[str] = None
        self._matrix = None
        self._version: Optional[int] = None

    @property
    def config(self) -> RenderConfig:
        return self._config

    def _update(self, **changes) -> 'Generator':
        self._config = dataclasses.replace(self._config, **changes)
        return self

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def content(self, text, level: Optional[str] = None) -> 'Generator':
        """
        Set the content to be encoded.

        Args:
            text: Data to encode (converted with ``str``)
            level (Optional[str]): Error correction level, defaults to
                ``config.error_correction``

        Raises:
            ValidationError: Unknown level
            EncodingError: Content does not fit at that level
        """
        ecc = validate_level(level) if level is not None else self._config.error_correction
        text = str(text)
        matrix, version = encode(text, ecc)
        self._text = text
        self._matrix = matrix
        self._version = version
        return self

    def qr_size(self) -> Optional[int]:
        """Width/height of the symbol in modules, None before ``content()``."""
        return len(self._matrix) if self._matrix is not None else None

    def version(self) -> Optional[int]:
        return self._version

    def empty_mask(self) -> List[List[bool]]:
        """An all-False mask the size of the current symbol, for ``set_hide_mask``."""
        return empty_mask(self._require_size())

    def _require_size(self) -> int:
        if self._matrix is None:
            raise ValidationError("No content set; call content() first")
        return len(self._matrix)

    # ------------------------------------------------------------------
    # Styling
    # ------------------------------------------------------------------

    def foreground(self, r, g, b, a=0) -> 'Generator':
        return self._update(foreground=validate_rgba(r, g, b, a))

    def background(self, r, g, b, a=0) -> 'Generator':
        return self._update(background=validate_rgba(r, g, b, a))

    def rotate(self, angle) -> 'Generator':
        """Rotate clockwise; ``angle`` must be a multiple of 90 (negative allowed)."""
        return self._update(rotation=validate_angle(angle))

    def solid(self, value: bool = True) -> 'Generator':
        """Make a solid QR code with no gaps between modules."""
        return self._update(solid=bool(value))

    def set_hide_mask(self, mask: Sequence[Sequence]) -> 'Generator':
        """
        Blank out the True modules of ``mask`` (as they appear after rotation).

        Raises:
            ValidationError: If no content is set or the mask is not N x N
        """
        validate_mask(mask, self._require_size())
        frozen = tuple(tuple(bool(cell) for cell in row) for row in mask)
        return self._update(hide_mask=frozen)

    def text(self, text: str, font, size: int) -> 'Generator':
        """
        Add text to the middle of the QR code.

        Args:
            text (str): The text to draw
            font (FontInterface): Font, e.g. ``FilesystemFont(path)``
            size (int): Font size in points (used as pixels)
        """
        if not isinstance(text, str) or not text:
            raise ValidationError("Centre text must be a non-empty string")
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValidationError(f"Font size must be a positive integer: [{size}]")
        if not hasattr(font, 'truetype'):
            raise ValidationError(f"Font must provide truetype(size): [{font!r}]")
        return self._update(center_text=TextRequest(text=text, font=font, size=size))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def make(self) -> Image.Image:
        """
        Create the image. The caller owns the returned image.

        Raises:
            ValidationError: No content set, or the hide mask no longer
                matches the symbol size
            RenderFailure: Pillow could not build the image
        """
        self._require_size()
        logger.info(f"Rendering QR code for {len(self._text)} chars "
                    f"(rotation={self._config.rotation}, solid={self._config.solid}, "
                    f"text={self._config.center_text is not None})")
        return render(self._config, self._matrix)

    def to_png(self) -> bytes:
        """Render and return PNG bytes."""
        image = self.make()
        try:
            buf = BytesIO()
            image.save(buf, format='PNG', compress_level=self._config.png_compression)
            return buf.getvalue()
        finally:
            image.close()

    def save(self, filepath) -> None:
        """
        Save the QR code to disk as PNG.

        Raises:
            SaveQrError: If the file cannot be written
        """
        image = self.make()
        try:
            image.save(filepath, format='PNG', compress_level=self._config.png_compression)
        except (OSError, ValueError) as ex:
            logger.error(f"Unable to save QR code to {filepath}: {ex}")
            raise SaveQrError(f"Unable to save QR code to: [{filepath}]") from ex
        finally:
            image.close()
        logger.info(f"Saved QR code to {filepath}")
