import unittest

from tablelayout.fragmentrenderer.html import HtmlFragmentRenderer
from tablelayout.tlrendercontext import TableLayoutRenderContext
from tablelayout.tlfragment import TABLE_OPEN_BOILERPLATE



class TestHtmlFragmentRenderer(unittest.TestCase):

    def test_escape_attribs(self):
        fr = HtmlFragmentRenderer()

        self.assertEqual(
            fr.htmlescape_double_quoted_attribute_value('tbl-main'),
            'tbl-main'
        )

        self.assertEqual(
            fr.htmlescape_double_quoted_attribute_value('a"b&c'),
            'a&quot;b&c'
        )

        self.assertEqual(
            fr.htmlescape_double_quoted_attribute_value('layout &amp; style'),
            'layout &amp;amp; style'
        )

        fr.aggressively_escape_html_attributes = True
        self.assertEqual(
            fr.htmlescape_double_quoted_attribute_value('a&b'),
            'a&amp;b'
        )

    def test_table_open_escaped(self):
        fr = HtmlFragmentRenderer()
        rc = TableLayoutRenderContext(fr, properties={'id': 'x"y', 'class': 'wide'})
        self.assertEqual(
            fr.render_boilerplate(TABLE_OPEN_BOILERPLATE, rc),
            '<table id="x&quot;y" class="wide" cellspacing="0" >\n'
        )

    def test_cell_ref_verbatim(self):
        fr = HtmlFragmentRenderer()
        rc = TableLayoutRenderContext(fr, data={'a': '<b>bold</b>', 'n': 3})
        self.assertEqual(fr.render_cell_ref('a', rc), '<b>bold</b>')
        self.assertEqual(fr.render_cell_ref('n', rc), '3')

    def test_cell_ref_escaped(self):
        fr = HtmlFragmentRenderer(config={'escape_cell_values': True})
        rc = TableLayoutRenderContext(fr, data={'a': '<b>x & y</b>'})
        self.assertEqual(fr.render_cell_ref('a', rc), '&lt;b&gt;x &amp; y&lt;/b&gt;')

    def test_cell_ref_missing(self):
        fr = HtmlFragmentRenderer()
        rc = TableLayoutRenderContext(fr, data={})
        self.assertEqual(fr.render_cell_ref('a', rc), '')

        fr = HtmlFragmentRenderer(config={'missing_cell_value': '&nbsp;'})
        rc = TableLayoutRenderContext(fr)
        self.assertEqual(fr.render_cell_ref('a', rc), '&nbsp;')




if __name__ == '__main__':
    unittest.main()
