import sys
import argparse
import logging

from pylatexenc.latexnodes import LatexWalkerError

import colorlog

from .main.main import main as _main
from tablelayout import __version__ as tablelayout_version


def setup_logging(level):
    # You should use colorlog >= 6.0.0a4
    handler = colorlog.StreamHandler()
    handler.setFormatter( colorlog.LevelFormatter(
        log_colors={
            "DEBUG": "white",
            "INFO": "",
            "WARNING": "red",
            "ERROR": "bold_red",
            "CRITICAL": "bold_red",
        },
        fmt={
            "DEBUG":    "%(log_color)s〰️    %(message)s",
            "INFO":     "%(log_color)s✨  %(message)s",
            "WARNING":  "%(log_color)s⚠️   %(message)s",
            "ERROR":    "%(log_color)s🚨  %(message)s",
            "CRITICAL": "%(log_color)s🚨  %(message)s",
        },
        stream=sys.stderr
    ) )

    root = colorlog.getLogger()
    root.addHandler(handler)

    root.setLevel(level)



def run_main(cmdargs=None, exit_code_on_error=1):
    try:
        _run_main_inner(cmdargs)
    except LatexWalkerError as e:
        logging.getLogger('tablelayout').debug("Got layout error, traceback = ",
                                               exc_info=True)
        logging.getLogger('tablelayout').critical(
            f"Table layout error\n{e}",
        )
        if exit_code_on_error is not None:
            sys.exit(exit_code_on_error)
    except Exception as e:
        logging.getLogger('tablelayout').critical('Error.', exc_info=e)
        if exit_code_on_error is not None:
            sys.exit(exit_code_on_error)


def _run_main_inner(cmdargs=None):

    args_parser = argparse.ArgumentParser(
        prog='tablelayout',
        description='Convert ASCII-art table layouts into HTML tables',
        epilog='Have fun with tables!',
    )

    args_parser.add_argument('-c', '--layout-content', action='store',
                             help="Layout description to parse and convert")

    args_parser.add_argument('-C', '--config', action='store',
                             default=None,
                             help="YAML configuration file.  By default, "
                             "‘tablelayoutconfig.yaml’ is used in the current directory "
                             "if it exists.  The input's YAML front matter takes "
                             "precedence over this config.")

    args_parser.add_argument('-o', '--output', action='store',
                             default=None,
                             help="Output file name (stdout by default or with ‘--output=-’)")

    args_parser.add_argument('--id', action='store', dest='id',
                             default=None,
                             help="‘id’ attribute of the generated HTML table")

    args_parser.add_argument('--class', action='store', dest='class_name',
                             default=None,
                             help="‘class’ attribute of the generated HTML table")

    args_parser.add_argument('-d', '--data', action='append',
                             default=[],
                             metavar='NAME=VALUE',
                             help="Value to insert in the cell named NAME.  You can "
                             "specify this argument multiple times.")

    args_parser.add_argument('--no-cache', action='store_true',
                             default=False,
                             help="Do not store the parsed layout in the layout cache")

    args_parser.add_argument('--list-cells', action='store_true',
                             default=False,
                             help="Instead of generating HTML, list the cells found in "
                             "the layout along with their row and column spans")

    args_parser.add_argument('-v', '--verbose', action='store_true',
                             default=False,
                             help="Enable verbose debugging output")
    args_parser.add_argument('--version', action='version', version=tablelayout_version)

    args_parser.add_argument('files', metavar="FILE", nargs='*',
                             help='Input files (if none specified, read from standard input)')

    args = args_parser.parse_args(args=cmdargs)

    #
    # set up logging
    #
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    setup_logging(level=level)

    #
    # Dispatch call to our main function
    #

    d = dict(args.__dict__)
    d.pop('verbose')

    _main(**d)



if __name__ == '__main__':
    run_main()
