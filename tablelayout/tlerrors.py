import collections

import logging
logger = logging.getLogger(__name__)

from pylatexenc.latexnodes import LatexWalkerParseError



class ParseError(LatexWalkerParseError):
    r"""
    Raised when an ASCII table layout description cannot be parsed.

    This is a located parse error in the same hierarchy as the errors reported
    by `pylatexenc`, so that callers which already report
    `LatexWalkerError`\ s can report layout errors in the same way.  The
    attributes `lineno` and `colno` are set whenever the error can be
    attributed to a specific position in the layout (note that `lineno` is
    one-based, as everywhere in `pylatexenc`, whereas `row` and `col` on the
    subclasses are zero-based grid indices).
    """

    def __init__(self, message, *, row=None, col=None):
        lineno, colno = None, None
        if row is not None:
            lineno = row + 1
        if col is not None:
            colno = col
        super().__init__(message, lineno=lineno, colno=colno)
        self.message = message
        self.row = row
        self.col = col

    def __str__(self):
        return self.message


class StructuralError(ParseError):
    r"""
    The layout text is empty, or its lines do not all have the same length.
    `row` is the index of the offending line, if applicable.
    """
    pass



# the excerpt reaches this many rows/columns on each side of the offending
# position
EXCERPT_RADIUS = 2

LayoutDiagnostic = collections.namedtuple(
    'LayoutDiagnostic',
    ('row', 'col', 'excerpt',)
)


class ValidationError(ParseError):
    r"""
    A character of the layout grid is not allowed where it appears (a border
    segment is misaligned, a corner is malformed, etc.).

    The full diagnostic information is available as `diagnostic`, a
    `LayoutDiagnostic(row, col, excerpt)` tuple; `row`, `col` and `excerpt`
    are also available directly as attributes.
    """

    def __init__(self, diagnostic):
        super().__init__(
            format_diagnostic(diagnostic),
            row=diagnostic.row,
            col=diagnostic.col,
        )
        self.diagnostic = diagnostic
        self.excerpt = diagnostic.excerpt


def make_diagnostic(grid, row, col):
    r"""
    Build the :py:class:`LayoutDiagnostic` for position `(row, col)` of `grid`,
    including an excerpt of the characters surrounding that position.
    """
    excerpt_lines = []
    for r in range(row - EXCERPT_RADIUS, row + EXCERPT_RADIUS + 1):
        if r < 0 or r >= grid.rows:
            continue
        c_start = max(0, col - EXCERPT_RADIUS)
        excerpt_lines.append( grid.lines[r][c_start:col + EXCERPT_RADIUS + 1] )

    return LayoutDiagnostic(row=row, col=col, excerpt="\n    ".join(excerpt_lines))


def format_diagnostic(diagnostic):
    return (
        f"invalid characters around position ({diagnostic.row},{diagnostic.col}):"
        f"\n    {diagnostic.excerpt}"
    )
