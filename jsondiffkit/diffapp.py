# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, options_from_args, ConfigBackedParser,
)
from .diff_format import to_json
from .diffing import Differ
from .merging import merge_diff, build_text

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


_description = "Compute the difference between two JSON files."


def read_json(filename):
    """Read a JSON value from filename, or null for the null filename"""
    if filename == EXPLICIT_MISSING_FILE:
        return None
    with io.open(filename, encoding='utf-8') as f:
        return json.load(f)


def main_diff(args):
    """Main handler of diff CLI"""
    before, after = args.before, args.after
    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (before, after):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    a = read_json(before)
    b = read_json(after)

    differ = Differ(options_from_args(args))
    merged = merge_diff(differ.diff(a, b))

    # Output as JSON to file, or print to stdout:
    if args.out:
        with io.open(args.out, "w", encoding="utf-8") as df:
            json.dump(to_json(merged), df, indent=2, separators=(",", ": "))
    else:
        print(build_text(merged), end="")

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsondiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondiff',
        )
    add_generic_args(parser)
    add_diff_args(parser)

    parser.add_argument(
        "before", help="the JSON file before the change.",
    )
    parser.add_argument(
        "after", help="the JSON file after the change.",
    )
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the merged diff lines are written to this file "
             "as JSON. Otherwise the diff is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
