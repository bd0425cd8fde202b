import unittest

from tablelayout.fragmentrenderer import FragmentRenderer
from tablelayout.tlrendercontext import TableLayoutRenderContext
from tablelayout.tllayout import parse_layout


def _register_call(store, what, args):
    store['calls'].append( (what, args) )


class _MyTestFragmentRenderer(FragmentRenderer):

    pieces_joiner_string = "|"

    def __init__(self, store):
        super().__init__()
        self.store = store

    def render_join(self, content_list):
        _register_call(self.store, 'render_join', (content_list,))
        return self.pieces_joiner_string.join(content_list)

    def render_boilerplate(self, template_text, render_context):
        _register_call(self.store, 'render_boilerplate', (template_text,))
        return 'B'

    def render_literal(self, text, render_context):
        _register_call(self.store, 'render_literal', (text,))
        return 'L'

    def render_cell_ref(self, name, render_context):
        _register_call(self.store, 'render_cell_ref', (name,))
        return f"[{render_context.get_cell_value(name)}]"



class TestFragmentRenderer(unittest.TestCase):

    maxDiff = None

    def test_render_fragments(self):
        store = {'calls': []}
        fr = _MyTestFragmentRenderer(store)
        fragments = parse_layout("+---+---+\n"
                                 "| a | b |\n"
                                 "+---+---+\n")

        result = fr.render_fragments(
            fragments,
            TableLayoutRenderContext(fr, data={'a': 'AAA', 'b': 'BBB'})
        )

        self.assertEqual(result, 'B|L|L|[AAA]|L|L|[BBB]|L|L|B')
        self.assertEqual(
            [ what for (what, args) in store['calls'] ],
            [ 'render_boilerplate', 'render_literal', 'render_literal',
              'render_cell_ref', 'render_literal', 'render_literal',
              'render_cell_ref', 'render_literal', 'render_literal',
              'render_boilerplate', 'render_join' ]
        )

    def test_default_render_context(self):
        store = {'calls': []}
        fr = _MyTestFragmentRenderer(store)
        fragments = parse_layout("+---+\n"
                                 "| a |\n"
                                 "+---+\n")
        self.assertEqual(fr.render_fragments(fragments), 'B|L|L|[None]|L|L|B')

    def test_config_sets_attributes(self):
        fr = FragmentRenderer(config={'pieces_joiner_string': '\n'})
        self.assertEqual(fr.pieces_joiner_string, '\n')

    def test_base_not_implemented(self):
        fr = FragmentRenderer()
        with self.assertRaises(RuntimeError):
            fr.render_fragments(parse_layout("+---+\n"
                                             "| a |\n"
                                             "+---+\n"))



if __name__ == '__main__':
    unittest.main()
