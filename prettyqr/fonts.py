# -*- coding: utf-8 -*-
"""
Font resources used for centre text.
"""

import logging
import os

from PIL import ImageFont

from .exceptions import FontNotFoundError

logger = logging.getLogger(__name__)


class FontInterface:
    """Anything that can provide a Pillow FreeType font at a given size."""

    def truetype(self, size: int) -> ImageFont.FreeTypeFont:
        raise NotImplementedError


class FilesystemFont(FontInterface):
    """
    A TrueType/OpenType font stored on disk.

    The path is checked when the font is created so a bad path fails
    before any rendering starts.
    """

    def __init__(self, filepath):
        self._filepath = None
        self.filepath = filepath

    @property
    def filepath(self) -> str:
        return self._filepath

    @filepath.setter
    def filepath(self, filepath):
        path = os.fspath(filepath)
        if not os.path.isfile(path):
            raise FontNotFoundError(f"Could not locate font file: [{path}]")
        self._filepath = path

    def truetype(self, size: int) -> ImageFont.FreeTypeFont:
        logger.debug(f"Loading font {self._filepath} at size {size}")
        return ImageFont.truetype(self._filepath, size)

    def __repr__(self):
        return f"FilesystemFont({self._filepath!r})"
