# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

Builds the masks for the position (finder) squares and the alignment
square. These are drawn on top of the content so a scanner can always
locate the symbol, whatever the rotation or hide mask.

All masks are indexed ``mask[row][col]``.

Functions:
    build_finder_mask: Mask of the dark modules of the finder patterns
    build_finder_footprint: Mask of every module covered by a finder pattern
    finder_origins: Top-left corners of the four patterns
"""

from typing import List, Tuple

# Position pattern (7x7): outer ring on, ring off, solid 3x3 centre
POSITION_SQUARE = (
    (1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1),
)

# Alignment pattern (5x5): outer ring on, ring off, single centre cell
ALIGNMENT_SQUARE = (
    (1, 1, 1, 1, 1),
    (1, 0, 0, 0, 1),
    (1, 0, 1, 0, 1),
    (1, 0, 0, 0, 1),
    (1, 1, 1, 1, 1),
)


def finder_origins(size: int) -> List[Tuple[int, int, Tuple[Tuple[int, ...], ...]]]:
    """
    Return ``(row, col, template)`` for each pattern of a ``size`` symbol.

    Three position squares sit in the top-left, bottom-left and top-right
    corners; the alignment square's corner is at ``(size-9, size-9)``.
    """
    return [
        (0, 0, POSITION_SQUARE),
        (size - 7, 0, POSITION_SQUARE),
        (0, size - 7, POSITION_SQUARE),
        (size - 9, size - 9, ALIGNMENT_SQUARE),
    ]


def _stamp(mask: List[List[bool]], row0: int, col0: int, template, fill_all: bool = False) -> None:
    size = len(mask)
    for i, template_row in enumerate(template):
        for j, value in enumerate(template_row):
            r, c = row0 + i, col0 + j
            if 0 <= r < size and 0 <= c < size:
                mask[r][c] = True if fill_all else bool(value)


def build_finder_mask(size: int) -> List[List[bool]]:
    """
    Build the finder mask for a symbol of ``size`` modules.

    Args:
        size (int): QR code size in modules (must be at least 9)

    Returns:
        List[List[bool]]: mask[r][c] = True where a pattern module is dark

    Example:
        >>> mask = build_finder_mask(21)
        >>> mask[0][:8]
        [True, True, True, True, True, True, True, False]
    """
    mask = [[False] * size for _ in range(size)]
    for row0, col0, template in finder_origins(size):
        _stamp(mask, row0, col0, template)
    return mask


def build_finder_footprint(size: int) -> List[List[bool]]:
    """
    Build a mask covering the whole 7x7 and 5x5 blocks, light rings included.

    Used to keep hide masks away from the patterns.
    """
    mask = [[False] * size for _ in range(size)]
    for row0, col0, template in finder_origins(size):
        _stamp(mask, row0, col0, template, fill_all=True)
    return mask


"""
Finder layout (21x21 example, P = position square, A = alignment square):

   0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0
 0 P P P P P P P . . . . . . . P P P P P P P
 1 P . . . . . P . . . . . . . P . . . . . P
 2 P . P P P . P . . . . . . . P . P P P . P
 3 P . P P P . P . . . . . . . P . P P P . P
 4 P . P P P . P . . . . . . . P . P P P . P
 5 P . . . . . P . . . . . . . P . . . . . P
 6 P P P P P P P . . . . . . . P P P P P P P
 ...
12 . . . . . . . . . . . . A A A A A . . . .
13 . . . . . . . . . . . . A . . . A . . . .
14 . . . . . . . . . . . . A . A . A . . . .
15 . . . . . . . . . . . . A . . . A . . . .
16 . . . . . . . . . . . . A A A A A . . . .
"""
