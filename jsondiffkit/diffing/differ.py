# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..config import DiffOptions
from ..diff_format import (
    LineKind, CircularReferenceError, line_equal, make_line, validate_diff,
)
from ..diff_utils import post_process
from ..formatting import (
    UndefinedBehavior, clean_fields, detect_circular, format_lines, get_type,
)
from ..log import debug

from .comparing import sort_inner_arrays
from .generic import append_value_lines, diff_object
from .sequences import array_differ

__all__ = ["Differ", "diff"]


def _format_circular(container):
    if get_type(container) == "object":
        return "object (with keys {})".format(
            ", ".join('"{}"'.format(key) for key in container.keys()))
    return "array (with {} items)".format(len(container))


def _replacement_lines(value, kind, options):
    return [make_line(indent, kind, text) for indent, text
            in format_lines(value, options.max_depth, options.undefined_behavior)]


class Differ(object):
    """Line diff of two tree values with a set of options.

    Options are passed either as a DiffOptions instance or as keyword
    arguments naming its traits::

        differ = Differ(array_diff_method='lcs', recursive_equal=True)
        left, right = differ.diff(before, after)

    `diff` returns two lists of DiffLine of equal length, one for each
    side, where the lines at the same index describe the same row.
    """

    def __init__(self, options=None, **kwargs):
        if options is None:
            options = DiffOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a DiffOptions instance or keyword options, not both")
        self.options = options

    @property
    def diff_array(self):
        "The array diff function for the current `array_diff_method`."
        return array_differ(self.options.array_diff_method)

    def check_circular(self, source):
        if not self.options.detect_circular:
            return
        container = detect_circular(source)
        if container is not None:
            raise CircularReferenceError(
                "Circular reference detected in " + _format_circular(container))

    def prepare(self, source):
        """Apply the input transformations selected by the options."""
        options = self.options
        if options.array_diff_method in ('unorder-normal', 'unorder-lcs'):
            source = sort_inner_arrays(source, options.ignore_case)
        if options.undefined_behavior == UndefinedBehavior.IGNORE:
            source = clean_fields(source)
            if get_type(source) == "missing":
                source = None
        return source

    def diff(self, source_left, source_right):
        """Compute the aligned line diff of two values."""
        options = self.options
        diff_array = self.diff_array
        self.check_circular(source_left)
        self.check_circular(source_right)
        source_left = self.prepare(source_left)
        source_right = self.prepare(source_right)

        type_left = get_type(source_left)
        type_right = get_type(source_right)
        debug("Diffing %s against %s, arrays by %r",
              type_left, type_right, options.array_diff_method)

        if type_left != type_right:
            # Wholesale replacement: the whole left value, then the whole right one
            removed = _replacement_lines(source_left, LineKind.REMOVE, options)
            added = _replacement_lines(source_right, LineKind.ADD, options)
            result_left = removed + [line_equal(0) for _ in added]
            result_right = [line_equal(0) for _ in removed] + added
        elif type_left == "object":
            result_left, result_right = diff_object(
                source_left, source_right, 1, options, diff_array)
            result_left = [line_equal(0, '{')] + result_left + [line_equal(0, '}')]
            result_right = [line_equal(0, '{')] + result_right + [line_equal(0, '}')]
        elif type_left == "array":
            result_left, result_right = diff_array(
                source_left, source_right, None, None, 0, options)
        else:
            result_left, result_right = [], []
            append_value_lines(result_left, result_right, None, None,
                               source_left, source_right, 0, options)

        # We can turn this off for performance after the library has been well tested:
        validate_diff(result_left, result_right)

        return post_process(result_left, result_right)


def diff(source_left, source_right, options=None, **kwargs):
    """Compute the aligned line diff of two values with a one-off Differ."""
    return Differ(options, **kwargs).diff(source_left, source_right)
