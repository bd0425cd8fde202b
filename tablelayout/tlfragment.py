import logging
logger = logging.getLogger(__name__)



class LayoutFragmentBase:
    r"""
    One piece of a parsed table layout.

    A parsed layout is a tuple of fragments that a
    :py:class:`~tablelayout.fragmentrenderer.FragmentRenderer` expands in order.
    Fragments are immutable and compare equal if they are of the same type and
    carry the same value.
    """

    __slots__ = ('_value',)

    fragment_type = None

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def isFragmentType(self, fragment_type):
        return self.fragment_type == fragment_type

    def __eq__(self, other):
        if not isinstance(other, LayoutFragmentBase):
            return NotImplemented
        return self.fragment_type == other.fragment_type and self._value == other._value

    def __hash__(self):
        return hash( (self.fragment_type, self._value) )

    def __repr__(self):
        return f"{self.__class__.__name__}({self._value!r})"


class BoilerplateFragment(LayoutFragmentBase):
    r"""
    Markup template that refers to the table-level properties (``${id}``,
    ``${class}``, with ``${if:...}``/``${else}``/``${endif}`` conditionals).
    """
    __slots__ = ()

    fragment_type = 'boilerplate'

    @property
    def text(self):
        return self._value


class LiteralFragment(LayoutFragmentBase):
    r"""
    Markup that is emitted verbatim.
    """
    __slots__ = ()

    fragment_type = 'literal'

    @property
    def text(self):
        return self._value


class CellRefFragment(LayoutFragmentBase):
    r"""
    Placeholder for the contents of the cell called `name`, which is looked up
    in the render context at render time.
    """
    __slots__ = ()

    fragment_type = 'cellref'

    @property
    def name(self):
        return self._value


# ------------------------------------------------------------------------------


TABLE_OPEN_BOILERPLATE = (
    '<table${if:id} id="${id}"${endif}${if:class} class="${class}"${endif} '
    'cellspacing="0" >\n'
)

TABLE_CLOSE_BOILERPLATE = '</table>\n'

ROW_OPEN_LITERAL = '  <tr>\n'
ROW_CLOSE_LITERAL = '  </tr>\n'

CELL_CLOSE_LITERAL = '    </td>\n'


def cell_open_literal(cell):
    return f'    <td colspan="{cell.colspan}" rowspan="{cell.rowspan}">\n'


def assemble_fragments(grid, row_spans, cells):
    r"""
    Produce the tuple of fragments representing the table with the given
    `cells` (as produced by :py:func:`~tablelayout.tlcells.extract_cells`).

    For example, the layout::

        +---+---+---+
        | a | b |   |
        +---+---+ d |
        |   c   |   |
        +-------+---+

    produces fragments that expand to the following markup::

        <table cellspacing="0" >
          <tr>
            <td colspan="1" rowspan="1">
        a
            </td>
            <td colspan="1" rowspan="1">
        b
            </td>
            <td colspan="1" rowspan="2">
        d
            </td>
          </tr>
          <tr>
            <td colspan="2" rowspan="1">
        c
            </td>
          </tr>
        </table>
    """
    cells_by_row = {}
    for cell in cells:
        cells_by_row.setdefault(cell.row, []).append(cell)

    fragments = [ BoilerplateFragment(TABLE_OPEN_BOILERPLATE) ]

    for r in range(grid.rows - 2):
        # a new table row starts at each horizontal boundary line of the grid
        is_new_table_row = (r == 0 or row_spans[r] != row_spans[r-1])
        if is_new_table_row:
            fragments.append( LiteralFragment(ROW_OPEN_LITERAL) )
        for cell in cells_by_row.get(r, []):
            fragments.append( LiteralFragment(cell_open_literal(cell)) )
            fragments.append( CellRefFragment(cell.name) )
            fragments.append( LiteralFragment(CELL_CLOSE_LITERAL) )
        if is_new_table_row:
            fragments.append( LiteralFragment(ROW_CLOSE_LITERAL) )

    fragments.append( BoilerplateFragment(TABLE_CLOSE_BOILERPLATE) )

    logger.debug("Assembled %d layout fragments", len(fragments))

    return tuple(fragments)
