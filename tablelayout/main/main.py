import sys
import os.path
import fileinput
import json

import logging
logger = logging.getLogger(__name__)

import yaml
import frontmatter

from ..tlgrid import build_grid
from ..tlvalidate import validate_grid
from ..tlspans import compute_span_vectors
from ..tlcells import extract_cells
from ..tllayout import TableLayout
from ..tlcache import LayoutCache
from ..tlrendercontext import TableLayoutRenderContext
from ..fragmentrenderer.html import HtmlFragmentRenderer

from .configmerger import ConfigMerger
configmerger = ConfigMerger()



_default_config_file = os.path.join(os.path.dirname(__file__), 'default_config.yaml')

def load_default_config():
    with open(_default_config_file, encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_external_configs(arg_config):
    r"""
    Return a list of configuration dictionaries to merge, in order of
    precedence.  `arg_config` is either a dictionary, the name of a YAML file,
    or `None`, in which case ``tablelayoutconfig.yaml`` (or ``.yml``) is loaded
    from the current directory if it exists.
    """

    if isinstance(arg_config, dict):
        return [ arg_config ]

    if isinstance(arg_config, str) and arg_config:
        config_file = arg_config
    else:
        config_file = None
        # only the first existing extension is read.
        for ext in ('.yaml', '.yml',):
            tryfname = f"tablelayoutconfig{ext}"
            if os.path.exists(tryfname):
                config_file = tryfname
                break

    if config_file is None:
        return [ {} ]

    with open(config_file, encoding='utf-8') as f:
        logger.info(f"Loading tablelayout config from {config_file}")
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    return [ data ]


def parse_data_assignments(data_args):
    data = {}
    for assignment in (data_args or []):
        if '=' not in assignment:
            raise ValueError(
                f"Invalid cell value assignment ‘{assignment}’, expected NAME=VALUE"
            )
        name, value = assignment.split('=', 1)
        data[name.strip()] = value
    return data


class Main:
    def __init__(self, **kwargs):
        super().__init__()

        self.kwargs = kwargs

        self.arg_files = kwargs.get('files', None)
        self.arg_layout_content = kwargs.get('layout_content', None)
        self.arg_config = kwargs.get('config', None)
        self.arg_output = kwargs.get('output', None)
        self.arg_id = kwargs.get('id', None)
        self.arg_class_name = kwargs.get('class_name', None)
        self.arg_data = kwargs.get('data', None)
        self.arg_no_cache = kwargs.get('no_cache', False)
        self.arg_list_cells = kwargs.get('list_cells', False)

        # get the layout content

        input_content = ''
        if self.arg_layout_content is not None:
            if self.arg_files:
                raise ValueError(
                    "You cannot specify both FILEs and --layout-content options. "
                    "Type `tablelayout --help` for more information."
                )
            input_content = self.arg_layout_content
        elif self.arg_files is None:
            # only happens on programmatic invocation of main(); on the command
            # line, arg_files is always a (possibly empty) list
            raise ValueError(
                r"No input specified. Please use layout_content or specify input files."
            )
        else:
            for line in fileinput.input(files=self.arg_files, encoding='utf-8'):
                input_content += line

        frontmatter_metadata, layout_content = frontmatter.parse(input_content)

        logger.debug("Input frontmatter_metadata is\n%s",
                     json.dumps(frontmatter_metadata, indent=4, default=str))

        # load config & defaults

        self.config = configmerger.recursive_assign_defaults([
            self.get_cmdline_config(),
            frontmatter_metadata or {},
            *load_external_configs(self.arg_config),
            load_default_config(),
        ])

        logger.debug("Merged configuration is\n%s",
                     json.dumps(self.config, indent=4, default=str))

        self.input_content = input_content
        self.frontmatter_metadata = frontmatter_metadata
        self.layout_content = layout_content

    def get_cmdline_config(self):
        cmdline_config = {}
        if self.arg_id is not None:
            cmdline_config['id'] = self.arg_id
        if self.arg_class_name is not None:
            cmdline_config['class'] = self.arg_class_name
        data = parse_data_assignments(self.arg_data)
        if data:
            cmdline_config['data'] = data
        if self.arg_no_cache:
            cmdline_config['tablelayout'] = { 'use_cache': False }
        return cmdline_config

    def run(self):

        if self.arg_list_cells:
            result = self.list_cells()
        else:
            result = self.render_html()

        self.write_output(result)

    def render_html(self):

        tablelayout_config = self.config.get('tablelayout', {})
        use_cache = tablelayout_config.get('use_cache', True)

        layout = TableLayout(
            self.layout_content,
            properties={ 'id': self.config.get('id'), 'class': self.config.get('class') },
            # each run of the command gets its own cache
            cache=LayoutCache(),
            use_cache=use_cache,
            what=self.get_input_description(),
            silent=True,
        )

        render_context = TableLayoutRenderContext(
            HtmlFragmentRenderer(config=self.config.get('html', {})),
            properties=layout.properties,
            data=self.config.get('data') or {},
        )

        return layout.render(render_context)

    def list_cells(self):
        grid = build_grid(self.layout_content)
        validate_grid(grid)
        row_spans, col_spans = compute_span_vectors(grid)
        return ''.join([
            f"{cell.name!r}\trowspan={cell.rowspan}\tcolspan={cell.colspan}\t"
            f"{cell.top_left}-{cell.bottom_right}\n"
            for cell in extract_cells(grid, row_spans, col_spans)
        ])

    def get_input_description(self):
        if self.arg_layout_content is not None:
            return '(layout content)'
        if not self.arg_files or self.arg_files == ['-']:
            return '(standard input)'
        return ", ".join(self.arg_files)

    def write_output(self, result):
        arg_output = self.arg_output
        if arg_output is None or arg_output == '-':
            sys.stdout.write(result)
        elif isinstance(arg_output, str):
            with open(arg_output, 'w', encoding='utf-8') as f:
                f.write(result)
        else:
            # file-like object
            arg_output.write(result)


def main(**kwargs):
    Main(**kwargs).run()
