import logging
logger = logging.getLogger(__name__)

from .tlerrors import ParseError
from .tlgrid import build_grid
from .tlvalidate import validate_grid
from .tlspans import compute_span_vectors
from .tlcells import extract_cells
from .tlfragment import assemble_fragments
from .tlcache import default_layout_cache
from .tlrendercontext import TableLayoutRenderContext



def parse_layout(layout_text):
    r"""
    Validate and parse the ASCII table layout description `layout_text` and
    return its intermediate representation, a tuple of fragments (see
    :py:mod:`tablelayout.tlfragment`).  Nothing is cached here.

    Raises :py:exc:`~tablelayout.tlerrors.StructuralError` or
    :py:exc:`~tablelayout.tlerrors.ValidationError` if the layout is invalid.
    """

    logger.debug("Parsing table layout %r", layout_text)

    grid = build_grid(layout_text)

    validate_grid(grid)

    # First pass: the row and column span vectors.  Second pass: identify each
    # table cell, using the span vectors to compute its row span and column
    # span.
    row_spans, col_spans = compute_span_vectors(grid)

    cells = list(extract_cells(grid, row_spans, col_spans))

    return assemble_fragments(grid, row_spans, cells)


class TableLayout:
    r"""
    A table layout specified using an ASCII picture of a table.  For example,
    the following layout places the values with names ``heading``, ``img1``,
    ``img2`` and ``img3``::

        +-------------+
        |   heading   |
        +------+------+
        | img1 |      |
        +------+ img3 |
        | img2 |      |
        +------+------+

    Layouts consist of the characters ``|``, ``-`` and ``+``, plus the names
    of the cells.  A ``-`` that has a ``|`` on both of its sides in the same
    row (before any ``+``) is part of a cell name rather than of a border.

    The parsed representation is stored in the layout cache `cache` (by
    default, the process-wide cache), unless `use_cache=False`.

    Arguments `properties` specify the table-level configuration used when
    rendering the layout: ``id`` is used as the `id` attribute of the HTML
    table, and ``class`` as its `class` attribute.

    Raises :py:exc:`~tablelayout.tlerrors.ParseError` if the layout
    description is invalid.  The error is also logged, unless `silent=True`.
    """

    def __init__(
            self,
            layout_text,
            *,
            properties=None,
            cache=None,
            use_cache=True,
            what='(unknown)',
            silent=False,
    ):
        super().__init__()

        self.layout_text = layout_text
        self.properties = dict(properties) if properties else {}
        self.cache = cache if cache is not None else default_layout_cache
        self.use_cache = use_cache
        self.what = what
        self.silent = silent

        try:
            if self.use_cache:
                self.fragments = self.cache.get_or_parse(layout_text, parse_layout)
            else:
                self.fragments = parse_layout(layout_text)
        except ParseError as e:
            if not self.silent:
                logger.error(
                    f"Error in table layout ‘{self.what}’: {e}\n"
                    f"Given layout was:\n{self.layout_text}\n"
                )
            raise

    def render(self, render_context):
        return render_context.fragment_renderer.render_fragments(
            self.fragments, render_context
        )

    def render_html(self, data=None, *, lookup=None, properties=None, **renderer_config):
        r"""
        Shorthand to render the layout to HTML.  Cell values are looked up with
        `lookup(name)` or in the mapping `data`.  The `properties` given here
        are applied on top of those given to the constructor, and any further
        keyword arguments configure the
        :py:class:`~tablelayout.fragmentrenderer.html.HtmlFragmentRenderer`.
        """
        from .fragmentrenderer.html import HtmlFragmentRenderer

        all_properties = dict(self.properties)
        if properties:
            all_properties.update(properties)

        render_context = TableLayoutRenderContext(
            HtmlFragmentRenderer(config=renderer_config),
            properties=all_properties,
            data=data,
            lookup=lookup,
        )
        return self.render(render_context)

    def __repr__(self):
        thetext = self.layout_text
        if len(thetext) > 50:
            thetext = thetext[:49]+'…'
        return f"<{self.__class__.__name__} {thetext!r}>"
