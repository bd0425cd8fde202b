#
# Expansion of boilerplate fragments: `string.Template` substitution with a
# cheap if/else/endif mechanism.
#

import re
import string
import functools

import logging
logger = logging.getLogger(__name__)



class _PropertiesLookup:
    r"""
    Mapping interface handed to `string.Template.substitute()`.  Conditional
    keys (``if:key``, ``else``, ``endif``) are turned into marks that are
    resolved after substitution.
    """
    def __init__(self, properties, ifmarks, escape_value=None):
        self.properties = properties
        self.ifmarks = ifmarks
        self.escape_value = escape_value

    def __getitem__(self, key):

        if key.startswith('if:'):
            if self.properties.get(key[3:], None):
                return self.ifmarks['iftrue']
            return self.ifmarks['iffalse']
        if key in ('else', 'endif'):
            return self.ifmarks[key]

        value = self.properties.get(key, None)
        if value is None:
            return ''
        value = str(value)
        if self.escape_value is not None:
            value = self.escape_value(value)
        return value


class _StrTemplate(string.Template):
    braceidpattern = r'(?a:[_.:a-z0-9-]+)'


# markers that cannot appear in table boilerplate or in escaped attribute values
_default_ifmarks = {
    'iftrue': '\x00TLIF:1\x00',
    'iffalse': '\x00TLIF:0\x00',
    'else': '\x00TLELSE\x00',
    'endif': '\x00TLENDIF\x00',
}


class BoilerplateTemplate:
    r"""
    A boilerplate template such as::

        <table${if:id} id="${id}"${endif} cellspacing="0" >

    ``${key}`` is replaced by the value of the property `key` (missing
    properties expand to the empty string), and
    ``${if:key}...${else}...${endif}`` keeps the first or the second block
    depending on whether the property `key` is set to a true value.
    Conditionals may be nested.
    """

    def __init__(self, template_text, *, ifmarks=None):
        super().__init__()
        self.template_text = template_text
        self.ifmarks = dict(ifmarks) if ifmarks is not None else _default_ifmarks

        self._template = _StrTemplate(template_text)

        rxp_if = (
            '(?:(?P<iftrue>' + re.escape(self.ifmarks['iftrue']) + ')'
            + '|(?P<iffalse>' + re.escape(self.ifmarks['iffalse']) + '))'
        )
        self._rx_if = re.compile(rxp_if)
        self._rx_conditional = re.compile(
            rxp_if
            + '(?P<block_if>.*?)'
            + '(?:' + re.escape(self.ifmarks['else']) + '(?P<block_else>.*?))?'
            + re.escape(self.ifmarks['endif']),
            flags=re.DOTALL
        )

    def expand(self, properties, *, escape_value=None):
        if properties is None:
            properties = {}
        content = self._template.substitute(
            _PropertiesLookup(properties, self.ifmarks, escape_value)
        )
        return self.resolve_conditionals(content)

    def resolve_conditionals(self, content):
        # The innermost conditional is the one that starts last; resolve
        # conditionals one at a time starting from there.
        while True:
            last_if = None
            for last_if in self._rx_if.finditer(content):
                pass
            if last_if is None:
                return content

            pos = last_if.start()
            m = self._rx_conditional.match(content, pos)
            if m is None:
                raise ValueError(
                    f"Invalid if[/else]/endif construct in boilerplate "
                    f"“{self.template_text}”"
                )

            if m.group('iftrue'):
                block = m.group('block_if')
            else:
                block = m.group('block_else')

            content = content[:pos] + (block or '') + content[m.end():]


@functools.lru_cache(maxsize=64)
def get_boilerplate_template(template_text):
    logger.debug("Compiling boilerplate template %r", template_text)
    return BoilerplateTemplate(template_text)


def expand_boilerplate(template_text, properties, *, escape_value=None):
    r"""
    Expand the boilerplate `template_text` with the table-level `properties`
    (a mapping, e.g. ``{'id': 'mytable', 'class': 'layout'}``), passing
    property values through `escape_value` if it is given.  See
    :py:class:`BoilerplateTemplate`.
    """
    return get_boilerplate_template(template_text).expand(
        properties,
        escape_value=escape_value,
    )
