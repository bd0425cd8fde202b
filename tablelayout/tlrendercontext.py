import logging
logger = logging.getLogger(__name__)



class TableLayoutRenderContext:
    r"""
    Provides everything that is needed to expand a parsed table layout beyond
    the layout itself:

    - `fragment_renderer` is the
      :py:class:`~tablelayout.fragmentrenderer.FragmentRenderer` instance that
      produces the output;

    - `properties` is a mapping with the table-level configuration (the keys
      ``id`` and ``class`` are used by the standard table boilerplate);

    - the value of each cell is obtained by calling `lookup(name)`, or, if no
      `lookup` callable is given, by looking up `name` in the mapping `data`.
      A value of `None` means that there is no value for this cell.
    """

    def __init__(self, fragment_renderer, *, properties=None, data=None, lookup=None):
        super().__init__()
        self.fragment_renderer = fragment_renderer
        self.properties = dict(properties) if properties else {}
        self.data = data
        self.lookup = lookup

    def get_property(self, key, default=None):
        return self.properties.get(key, default)

    def get_cell_value(self, name):
        if self.lookup is not None:
            return self.lookup(name)
        if self.data is not None:
            return self.data.get(name, None)
        return None
