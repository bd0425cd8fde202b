import logging
logger = logging.getLogger(__name__)

from .tlgrid import I



def compute_span_vectors(grid):
    r"""
    Compute the row span and column span vectors of a (validated) layout grid.

    Returns a tuple `(row_spans, col_spans)` of integer lists of lengths
    `grid.rows` and `grid.cols`.  A table cell whose top left and bottom right
    corners are at positions `(r1, c1)` and `(r2, c2)` has a column span of
    ``col_spans[c2] - col_spans[c1]`` and a row span of
    ``row_spans[r2] - row_spans[r1]``.  Pictorially::

            11112223334
          1 +---+-----+
          1 |   |     |
          2 |   +--+--+
          2 |   |  |  |
          3 +---+--+--+
    """
    row_spans = [ 0 for _ in range(grid.rows) ]
    col_spans = [ 0 for _ in range(grid.cols) ]

    row_increment = 0
    for r in range(grid.rows):
        line = grid[r]
        # whether this row of the grid is a horizontal boundary, i.e., whether
        # it contains the start of a new table row
        is_boundary_row = False
        prev_col_span = 0
        col_increment = 0
        for c in range(grid.cols):
            if line[c] == I and col_spans[c] == prev_col_span:
                # first '+' seen in this column of the grid beyond what the
                # column to the left has seen
                col_increment += 1
            # keep the old value of col_spans[c] for the next column
            prev_col_span = col_spans[c]
            col_spans[c] += col_increment
            if line[c] == I:
                is_boundary_row = True
        if is_boundary_row:
            row_increment += 1
        row_spans[r] = row_increment

    logger.debug("Computed span vectors, rows = %r, cols = %r", row_spans, col_spans)

    return row_spans, col_spans
