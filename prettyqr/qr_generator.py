# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Thin adapter around segno: turns content plus an error correction level
into the boolean module matrix the renderer works on.

Functions:
    make_qr: Generate the segno symbol
    encode: Generate the symbol and return its module matrix
"""

import logging
from typing import Tuple

import segno

from .config import Mask, validate_level
from .exceptions import EncodingError

logger = logging.getLogger(__name__)


def make_qr(text: str, ecc: str = 'L') -> segno.QRCode:
    """
    Generate a QR code symbol at exactly the requested level.

    Args:
        text (str): The data to encode
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        segno.QRCode: Generated QR code object (never a Micro QR)

    Raises:
        ValidationError: If the level is unknown
        EncodingError: If the data cannot be encoded at that level
    """
    level = validate_level(ecc)
    try:
        # boost_error would silently raise the level; keep what was asked for
        return segno.make_qr(text, error=level, boost_error=False)
    except (segno.DataOverflowError, ValueError) as ex:
        logger.error(f"QR encoding failed at level {level}: {ex}")
        raise EncodingError(f"Unable to encode content at level {level}: {ex}") from ex


def encode(text: str, ecc: str = 'L') -> Tuple[Mask, int]:
    """
    Encode text and return ``(matrix, version)``.

    The matrix holds True for dark modules and has no quiet zone.
    """
    symbol = make_qr(text, ecc)
    matrix = tuple(tuple(bool(cell) for cell in row) for row in symbol.matrix)
    logger.info(f"Encoded QR code version {symbol.version} ({len(matrix)}x{len(matrix)}, ecc={symbol.error})")
    return matrix, symbol.version
