import html
import re

import logging
logger = logging.getLogger(__name__)

from ._base import FragmentRenderer
from ..tltemplate import expand_boilerplate



_rx_html_entity = re.compile(r'[&]([a-zA-Z]+|[#][0-9]+|[#]x[0-9a-fA-F]+);')


class HtmlFragmentRenderer(FragmentRenderer):

    escape_cell_values = False
    r"""
    Cell values are normally pieces of HTML code (e.g., the rendered contents
    of a child section) and are inserted as they are.  Set this attribute to
    `True` to treat cell values as plain text that needs to be escaped.
    """

    aggressively_escape_html_attributes = False
    r"""
    If True, then values of HTML attributes (e.g., the table's ``id`` and
    ``class``) are escaped as normal HTML with HTML entities like '&amp;'.  The
    default setting only escapes '"' characters, and will escape an '&'
    character only if it looks like part of an entity.
    """

    missing_cell_value = ''
    r"""
    Content to insert for a cell whose value cannot be found in the render
    context.
    """

    # ------------------

    def htmlescape(self, value):
        return html.escape(value)

    def htmlescape_double_quoted_attribute_value(self, value):

        if self.aggressively_escape_html_attributes:
            return self.htmlescape(value)

        # escape the '&' in patterns that happen to look like HTML entities.
        value = _rx_html_entity.sub(lambda m: '&amp;'+m.group(1)+';', value)
        # also escape double quote characters !
        value = value.replace('"', '&quot;')
        return value

    # ------------------

    def render_boilerplate(self, template_text, render_context):
        return expand_boilerplate(
            template_text,
            render_context.properties,
            escape_value=self.htmlescape_double_quoted_attribute_value,
        )

    def render_literal(self, text, render_context):
        return text

    def render_cell_ref(self, name, render_context):
        value = render_context.get_cell_value(name)
        if value is None:
            logger.debug("No value for layout cell ‘%s’", name)
            return self.missing_cell_value
        value = str(value)
        if self.escape_cell_values:
            return self.htmlescape(value)
        return value
