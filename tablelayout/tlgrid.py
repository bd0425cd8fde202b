import re

import logging
logger = logging.getLogger(__name__)

from .tlerrors import StructuralError


# Character used to indicate a horizontal separator.
H = '-'

# Character used to indicate a vertical separator.
V = '|'

# Character used to indicate an intersection of a horizontal and vertical
# separator.
I = '+'

H_OR_I = (H, I)
V_OR_I = (V, I)
STRUCTURAL_CHARS = (H, V, I)


_rx_line_terminator = re.compile(r'\r\n|\r|\n')


class Grid:
    r"""
    A rectangular buffer of characters obtained from an ASCII layout
    description.

    Characters are accessed with ``grid[row][col]`` or with :py:meth:`at`,
    which returns `None` for positions outside of the grid.
    """
    def __init__(self, lines):
        super().__init__()
        self.lines = tuple(lines)
        self.rows = len(self.lines)
        self.cols = len(self.lines[0]) if self.lines else 0

    def __getitem__(self, row):
        return self.lines[row]

    def __len__(self):
        return self.rows

    def at(self, row, col):
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            return None
        return self.lines[row][col]

    def neighbors(self, row, col):
        r"""
        Return the characters `(left, right, top, bottom)` adjacent to
        `(row, col)`, with `None` standing for positions outside of the grid.
        """
        return (
            self.at(row, col-1),
            self.at(row, col+1),
            self.at(row-1, col),
            self.at(row+1, col),
        )

    def is_grid_corner(self, row, col):
        return (row in (0, self.rows-1)) and (col in (0, self.cols-1))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.rows}×{self.cols}>"


def split_layout_lines(layout_text):
    lines = _rx_line_terminator.split(layout_text)
    # a trailing line terminator does not introduce an additional (empty) row
    while lines and lines[-1] == '':
        lines.pop()
    return lines


def build_grid(layout_text):
    r"""
    Convert the layout description `layout_text` into a :py:class:`Grid`.

    Lines may be terminated by ``\n``, ``\r\n`` or ``\r``.  Raises
    :py:exc:`StructuralError` if the layout is empty or if its lines do not
    all have the same length.
    """
    lines = split_layout_lines(layout_text)
    if not layout_text or len(lines) == 0:
        raise StructuralError("layout description cannot be empty")

    cols = len(lines[0])
    for r, line in enumerate(lines):
        # every line of the layout description must have the same number of
        # characters
        if len(line) != cols:
            raise StructuralError(
                f"incorrectly formatted layout: line {r} has incorrect length",
                row=r,
            )

    grid = Grid(lines)
    logger.debug("Built layout grid %r", grid)
    return grid
