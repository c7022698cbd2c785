# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
    DiffOptions, ARRAY_DIFF_METHODS, KEY_ORDER_POLICIES, UNDEFINED_BEHAVIORS,
)
from .log import init_logging, set_jsondiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsondiff_log_level(level, True)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        json.dump({header: config}, sys.stderr, indent=2, sort_keys=True)
        sys.stderr.write('\n')
        sys.exit(1)


class ToggleAction(argparse.Action):
    """Adds the supplied positive options and a negative --no- version as well"""

    def __init__(self, option_strings, dest, default=None, required=False, help=None):
        opts = []
        for opt in option_strings:
            if opt[:2] != '--':
                raise ValueError('Could not turn option "%s" into a ToggleAction option.' % opt)
            opts.append(opt)
            opts.append('--no-' + opt[2:])

        # Put positives first, negatives last:
        opts = opts[0::2] + opts[1::2]

        super(ToggleAction, self).__init__(
            opts, dest, nargs=0, const=None,
            default=default, required=required,
            help=help)

    def __call__(self, parser, ns, values, option_string=None):
        setattr(ns, self.dest, not option_string.startswith('--no-'))


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError('%r is not a positive integer' % value)
    return number


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondiffkit commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds the arguments mapping onto DiffOptions traits."""
    options = parser.add_argument_group(
        title='diff options',
        description='Set how the two values are compared.')
    options.add_argument(
        '--detect-circular',
        action=ToggleAction,
        default=True,
        help="fail on values referring back to themselves.")
    options.add_argument(
        '--max-depth',
        type=positive_int,
        default=None,
        help="truncate values nested deeper than this.")
    options.add_argument(
        '--show-modifications',
        action=ToggleAction,
        default=True,
        help="show changed values as modified lines rather than removed "
             "and added lines.")
    options.add_argument(
        '--array-diff-method',
        choices=ARRAY_DIFF_METHODS,
        default='normal',
        help="how to align array items.")
    options.add_argument(
        '--ignore-case',
        action=ToggleAction,
        default=False,
        help="compare string values case-insensitively.")
    options.add_argument(
        '--ignore-case-for-key',
        action=ToggleAction,
        default=False,
        help="compare object keys case-insensitively.")
    options.add_argument(
        '--recursive-equal',
        action=ToggleAction,
        default=False,
        help="only align array items that are deeply equal or similar.")
    options.add_argument(
        '--preserve-key-order',
        choices=KEY_ORDER_POLICIES,
        default=None,
        help="keep the key order of one side instead of sorting keys.")
    options.add_argument(
        '--undefined-behavior',
        choices=UNDEFINED_BEHAVIORS,
        default='stringify',
        help="what to do with values that have no json representation.")


def options_from_args(args):
    """Build DiffOptions from parsed arguments."""
    names = DiffOptions.class_own_traits(config=True).keys()
    return DiffOptions(**{name: getattr(args, name) for name in names
                          if hasattr(args, name)})
