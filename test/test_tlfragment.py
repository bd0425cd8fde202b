import unittest

from tablelayout.tlgrid import build_grid
from tablelayout.tlspans import compute_span_vectors
from tablelayout.tlcells import extract_cells
from tablelayout.tlfragment import (
    BoilerplateFragment,
    LiteralFragment,
    CellRefFragment,
    TABLE_OPEN_BOILERPLATE,
    assemble_fragments,
)



class TestFragments(unittest.TestCase):

    def test_immutable(self):
        f = LiteralFragment('  <tr>\n')
        with self.assertRaises(AttributeError):
            f.text = 'something else'
        with self.assertRaises(AttributeError):
            f.new_attribute = 1

    def test_equality(self):
        self.assertEqual(CellRefFragment('a'), CellRefFragment('a'))
        self.assertNotEqual(CellRefFragment('a'), CellRefFragment('b'))
        self.assertNotEqual(LiteralFragment('a'), BoilerplateFragment('a'))
        self.assertEqual(hash(LiteralFragment('x')), hash(LiteralFragment('x')))

    def test_fragment_type(self):
        self.assertTrue(CellRefFragment('a').isFragmentType('cellref'))
        self.assertFalse(CellRefFragment('a').isFragmentType('literal'))
        self.assertEqual(CellRefFragment('a').name, 'a')
        self.assertEqual(BoilerplateFragment('x').text, 'x')


class TestAssembleFragments(unittest.TestCase):

    maxDiff = None

    def test_single_cell(self):
        grid = build_grid("+----+\n"
                          "| 1  |\n"
                          "+----+\n")
        row_spans, col_spans = compute_span_vectors(grid)
        cells = list(extract_cells(grid, row_spans, col_spans))

        fragments = assemble_fragments(grid, row_spans, cells)

        self.assertEqual(fragments, (
            BoilerplateFragment(TABLE_OPEN_BOILERPLATE),
            LiteralFragment('  <tr>\n'),
            LiteralFragment('    <td colspan="1" rowspan="1">\n'),
            CellRefFragment('1'),
            LiteralFragment('    </td>\n'),
            LiteralFragment('  </tr>\n'),
            BoilerplateFragment('</table>\n'),
        ))

    def test_row_grouping(self):
        grid = build_grid("+---+---+---+\n"
                          "| a | b |   |\n"
                          "+---+---+ d |\n"
                          "|   c   |   |\n"
                          "+-------+---+\n")
        row_spans, col_spans = compute_span_vectors(grid)
        cells = list(extract_cells(grid, row_spans, col_spans))

        fragments = assemble_fragments(grid, row_spans, cells)

        self.assertEqual(
            [ f.name for f in fragments if f.isFragmentType('cellref') ],
            [ 'a', 'b', 'd', 'c' ]
        )
        self.assertEqual(
            [ f.text for f in fragments
              if f.isFragmentType('literal') and 'tr>' in f.text ],
            [ '  <tr>\n', '  </tr>\n', '  <tr>\n', '  </tr>\n' ]
        )



if __name__ == '__main__':
    unittest.main()
