import logging
logger = logging.getLogger(__name__)

from ..tlfragment import (
    BoilerplateFragment,
    LiteralFragment,
    CellRefFragment,
)
from ..tlrendercontext import TableLayoutRenderContext


class FragmentRenderer:
    r"""
    Expands the fragments of a parsed table layout into an output format.

    Subclasses implement :py:meth:`render_boilerplate()`,
    :py:meth:`render_literal()` and :py:meth:`render_cell_ref()`.
    """

    pieces_joiner_string = ''

    def __init__(self, config=None):
        super().__init__()
        # use config to set properties on the class object.
        if config is not None:
            for k,v in config.items():
                setattr(self, k, v)

    def ensure_render_context(self, render_context):
        if render_context is None:
            return TableLayoutRenderContext(self)
        return render_context

    def render_fragments(self, fragments, render_context=None):
        render_context = self.ensure_render_context(render_context)
        return self.render_join([
            self.render_fragment(fragment, render_context)
            for fragment in fragments
        ])

    def render_fragment(self, fragment, render_context):
        if fragment.isFragmentType(BoilerplateFragment.fragment_type):
            return self.render_boilerplate(fragment.text, render_context)
        if fragment.isFragmentType(LiteralFragment.fragment_type):
            return self.render_literal(fragment.text, render_context)
        if fragment.isFragmentType(CellRefFragment.fragment_type):
            return self.render_cell_ref(fragment.name, render_context)

        raise ValueError(f"Invalid fragment type: {fragment!r}")

    def render_join(self, content_list):
        return self.pieces_joiner_string.join(content_list)

    # ---

    def render_boilerplate(self, template_text, render_context):
        raise RuntimeError("Subclasses must reimplement render_boilerplate()")

    def render_literal(self, text, render_context):
        raise RuntimeError("Subclasses must reimplement render_literal()")

    def render_cell_ref(self, name, render_context):
        raise RuntimeError("Subclasses must reimplement render_cell_ref()")
