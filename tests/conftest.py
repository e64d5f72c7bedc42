# -*- coding: utf-8 -*-
import pytest
from PIL import ImageFont

from prettyqr.fonts import FontInterface


class BundledFont(FontInterface):
    """Pillow's built-in scalable font, so tests need no font file on disk."""

    def truetype(self, size):
        return ImageFont.load_default(size=size)


@pytest.fixture
def bundled_font():
    try:
        font = ImageFont.load_default(size=20)
    except TypeError:
        pytest.skip("Pillow too old for a sized default font")
    if not isinstance(font, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType")
    return BundledFont()
