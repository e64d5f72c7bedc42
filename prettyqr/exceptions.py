# -*- coding: utf-8 -*-
"""
Exception hierarchy for PrettyQR.

Validation errors are raised eagerly by the setters that receive the bad
value; encoding and render failures surface from ``Generator.make``.
"""


class PrettyQrError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(PrettyQrError, ValueError):
    """An argument (color, angle, mask, text...) is out of range or malformed."""


class EncodingError(PrettyQrError):
    """The content cannot be encoded at the requested error correction level."""


class FontNotFoundError(PrettyQrError, FileNotFoundError):
    """The font file does not exist."""


class RenderFailure(PrettyQrError):
    """A canvas allocation, draw or font rasterization step failed."""


class SaveQrError(PrettyQrError):
    """The rendered image could not be written to disk."""
