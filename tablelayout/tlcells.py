import logging
logger = logging.getLogger(__name__)

from .tlgrid import I, H_OR_I, V_OR_I
from .tlerrors import ValidationError, make_diagnostic



class CellModel:
    r"""
    A table cell discovered in a layout grid.

    The cell's border runs from the top left corner `(r1, c1)` to the bottom
    right corner `(r2, c2)`, both inclusive.  The `name` is the concatenation
    of all non-space characters inside the border, in reading order.
    """
    def __init__(self, top_left, bottom_right, rowspan, colspan, name):
        super().__init__()
        self.top_left = top_left
        self.bottom_right = bottom_right
        self.rowspan = rowspan
        self.colspan = colspan
        self.name = name

    _fields = ('top_left', 'bottom_right', 'rowspan', 'colspan', 'name',)

    @property
    def row(self):
        return self.top_left[0]

    def __eq__(self, other):
        if not isinstance(other, CellModel):
            return NotImplemented
        return all( getattr(self, f) == getattr(other, f) for f in self._fields )

    def __repr__(self):
        return (
            f"<Cell ‘{self.name}’ @{self.top_left}-{self.bottom_right} "
            f"rowspan={self.rowspan} colspan={self.colspan}>"
        )


def find_cell_name(grid, r1, c1, r2, c2):
    r"""
    Return all the non-space characters strictly inside the rectangle with
    corners `(r1, c1)` and `(r2, c2)`, concatenated in reading order.  If the
    cell is blank, the empty string is returned::

        (r1,c1)
               +---+
               |   |
               +---+
                    (r2,c2)
    """
    return ''.join(
        ch
        for r in range(r1 + 1, r2)
        for ch in grid[r][c1 + 1:c2]
        if ch != ' '
    )


def is_cell_top_left(grid, r, c):
    # any of the forms:
    #  +-  ++  +-  ++
    #  | , | , + , +
    return (
        grid[r][c] == I
        and grid[r][c+1] in H_OR_I
        and grid[r+1][c] in V_OR_I
    )


def _find_cell_extent(grid, r, c):
    width = 1
    while not (grid.at(r, c+width) == I and grid.at(r+1, c+width) in V_OR_I):
        width += 1
        if c + width >= grid.cols:
            raise ValidationError(make_diagnostic(grid, r, c))

    height = 1
    while not (grid.at(r+height, c) == I and grid.at(r+height, c+1) in H_OR_I):
        height += 1
        if r + height >= grid.rows:
            raise ValidationError(make_diagnostic(grid, r, c))

    return height, width


def extract_cells(grid, row_spans, col_spans):
    r"""
    Walk the (validated) grid and yield a :py:class:`CellModel` for each table
    cell, in the order of their top left corners (row by row, and from left to
    right within each row).

    The last two rows and columns of the grid can only contain the bottom and
    right borders of the table and are not searched for top left corners.
    """
    for r in range(grid.rows - 2):
        for c in range(grid.cols - 2):
            if not is_cell_top_left(grid, r, c):
                continue

            height, width = _find_cell_extent(grid, r, c)

            cell = CellModel(
                top_left=(r, c),
                bottom_right=(r + height, c + width),
                rowspan=row_spans[r + height] - row_spans[r],
                colspan=col_spans[c + width] - col_spans[c],
                name=find_cell_name(grid, r, c, r + height, c + width),
            )
            logger.debug("Found cell %r", cell)
            yield cell
