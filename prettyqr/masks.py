# -*- coding: utf-8 -*-
"""
Module Mask Operations

A mask has the same N x N shape as the QR matrix but marks modules to act
on rather than dark modules. This module rotates matrices, builds the
centred hide mask used to make room for text and combines masks.

Functions:
    empty_mask: All-False mask of a given size
    rotate_matrix: Rotate a matrix clockwise by quarter turns
    build_hide_mask: Centred block of modules covering a pixel area
    union_masks: Cell-wise OR
    subtract_mask: Cell-wise ``a AND NOT b``
    validate_mask: Check a mask against the current symbol size
"""

import math
from typing import List, Sequence

from .exceptions import ValidationError

Matrix = Sequence[Sequence[bool]]


def empty_mask(size: int) -> List[List[bool]]:
    return [[False] * size for _ in range(size)]


def rotate_matrix(matrix: Matrix, quarter_turns: int) -> List[List[bool]]:
    """
    Rotate a square matrix clockwise by ``quarter_turns * 90`` degrees.

    Any integer is accepted and normalized modulo 4, so -1 behaves as 3.
    One quarter turn maps ``output[i][j] = input[N-1-j][i]``; it is applied
    repeatedly using the previous output as the next input.

    Args:
        matrix (Matrix): Square boolean matrix
        quarter_turns (int): Number of clockwise quarter turns

    Returns:
        List[List[bool]]: A new matrix (a plain copy for zero turns)
    """
    size = len(matrix)
    last = size - 1
    output = [[bool(cell) for cell in row] for row in matrix]
    for _ in range(quarter_turns % 4):
        source = output
        output = [[source[last - j][i] for j in range(size)] for i in range(size)]
    return output


def build_hide_mask(size: int, module_size: int, width: int, height: int) -> List[List[bool]]:
    """
    Mark a centred block of modules large enough to cover ``width x height`` pixels.

    The block is ``ceil(width / module_size) + 1`` columns by
    ``ceil(height / module_size) + 1`` rows; the extra module absorbs
    rounding. The block starts ``ceil(count / 2)`` modules before
    ``size // 2`` on each axis and is clipped to the matrix. For an even
    count this is the same as ``count // 2``; an odd count starts one
    module up/left of ``center - count // 2``, so an 11 column block on a
    25 module symbol covers columns 6..16, not 7..17.

    Example:
        >>> mask = build_hide_mask(25, 10, 95, 45)
        >>> [r for r in range(25) if any(mask[r])]
        [9, 10, 11, 12, 13, 14]
        >>> mask[12].index(True), 25 - mask[12][::-1].index(True)
        (6, 17)
    """
    mask_cols = math.ceil(width / module_size) + 1
    mask_rows = math.ceil(height / module_size) + 1

    center = size // 2
    first_row = max(0, center - math.ceil(mask_rows / 2))
    first_col = max(0, center - math.ceil(mask_cols / 2))

    mask = empty_mask(size)
    for r in range(first_row, min(size, first_row + mask_rows)):
        for c in range(first_col, min(size, first_col + mask_cols)):
            mask[r][c] = True
    return mask


def union_masks(*masks: Matrix) -> List[List[bool]]:
    size = len(masks[0])
    return [[any(m[r][c] for m in masks) for c in range(size)] for r in range(size)]


def subtract_mask(mask: Matrix, other: Matrix) -> List[List[bool]]:
    size = len(mask)
    return [[bool(mask[r][c]) and not other[r][c] for c in range(size)] for r in range(size)]


def validate_mask(mask, size: int) -> None:
    """
    Raise ValidationError unless ``mask`` is a ``size x size`` grid.
    """
    try:
        rows = len(mask)
    except TypeError:
        raise ValidationError(f"Mask must be a sequence of rows, got [{type(mask).__name__}]") from None
    if rows != size:
        raise ValidationError(f"Mask size must match size of QR code. Expected: {size}, Actual: {rows}")
    for index, row in enumerate(mask):
        try:
            cols = len(row)
        except TypeError:
            raise ValidationError(f"Mask row {index} is not a sequence") from None
        if cols != size:
            raise ValidationError(
                f"Mask row {index} must have {size} columns, Actual: {cols}"
            )
