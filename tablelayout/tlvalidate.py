#
# Structural validation of an ASCII layout grid, one position at a time.
#

import logging
logger = logging.getLogger(__name__)

from .tlgrid import H, V, I, H_OR_I, V_OR_I, STRUCTURAL_CHARS
from .tlerrors import ValidationError, make_diagnostic



def raise_invalid_char(grid, row, col):
    raise ValidationError(make_diagnostic(grid, row, col))


def is_interior_dash(grid, row, col):
    r"""
    Check whether the '-' character at `(row, col)` is part of a cell's name
    rather than of a cell boundary.

    Starting at the given position, we scan left and right along the row up
    to the first '+' or '|'.  The dash belongs to a cell name if a '|' is found
    on both sides.  For example::

        +----+
        |    |
        | x  |
        +--y-+

    This returns `True` for a '-' at location 'x' and `False` for a '-' at
    location 'y'.
    """
    line = grid[row]

    col_left = col
    while col_left >= 0 and line[col_left] not in (I, V):
        col_left -= 1

    col_right = col
    while col_right < grid.cols and line[col_right] not in (I, V):
        col_right += 1

    return (
        col_left >= 0 and line[col_left] == V
        and col_right < grid.cols and line[col_right] == V
    )


def _is_valid_corner(c, l, r, t, b):
    # +-   -+   |    |
    # |  ,  | , +- , -+
    return c == I and (
        (b == V and r == H)
        or (b == V and l == H)
        or (t == V and r == H)
        or (t == V and l == H)
    )


def validate_position(grid, row, col):
    r"""
    Validate the character at position `(row, col)` of `grid`.  Raises
    :py:exc:`ValidationError` if the character makes the layout description
    invalid.
    """
    c = grid[row][col]
    l, r, t, b = grid.neighbors(row, col)

    if grid.is_grid_corner(row, col):
        if not _is_valid_corner(c, l, r, t, b):
            raise_invalid_char(grid, row, col)
        return

    if c == I:
        if t == H or b == H or l == V or r == V:
            raise_invalid_char(grid, row, col)
        # at least 3 of the 4 adjoining characters must continue a border
        num_neighbors = (
            (t in V_OR_I) + (b in V_OR_I) + (l in H_OR_I) + (r in H_OR_I)
        )
        if num_neighbors < 3:
            raise_invalid_char(grid, row, col)
        return

    if c == H:
        if (t in STRUCTURAL_CHARS or b in STRUCTURAL_CHARS
            or l not in H_OR_I or r not in H_OR_I):
            if not (
                    (b == H and is_interior_dash(grid, row+1, col))
                    or (t == H and is_interior_dash(grid, row-1, col))
                    or is_interior_dash(grid, row, col)
            ):
                raise_invalid_char(grid, row, col)
        return

    if c == V:
        if (l in STRUCTURAL_CHARS or r in STRUCTURAL_CHARS
            or t not in V_OR_I or b not in V_OR_I):
            raise_invalid_char(grid, row, col)
        return

    # any other character is part of a cell name and is always allowed here


def validate_grid(grid):
    r"""
    Validate every position of `grid` in reading order, raising
    :py:exc:`ValidationError` for the first invalid position.
    """
    for row in range(grid.rows):
        for col in range(grid.cols):
            validate_position(grid, row, col)
    logger.debug("Layout grid %r is valid", grid)
