# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import LineKind, line_equal, line_add, line_remove, line_modify
from ..formatting import format_value, get_type, is_composite

from .comparing import compare, is_equal
from .generic import (
    append_block, append_value_lines, diff_object_item, with_key,
)

__all__ = ["diff_array_normal", "array_differ"]


def open_array(key_left, key_right, level):
    "Opening bracket lines of an array, with the mapping key if any."
    return ([line_equal(level, with_key(key_left, '['))],
            [line_equal(level, with_key(key_right, '['))])


def close_array(lines_left, lines_right, level):
    lines_left.append(line_equal(level, ']'))
    lines_right.append(line_equal(level, ']'))


def reached_max_depth(level, options):
    return options.max_depth is not None and level >= options.max_depth


def _diff_scalars(lines_left, lines_right, item_left, item_right, level, options):
    text_left = format_value(item_left, undefined_behavior=options.undefined_behavior)
    text_right = format_value(item_right, undefined_behavior=options.undefined_behavior)
    if compare(item_left, item_right, ignore_case=options.ignore_case) == 0:
        lines_left.append(line_equal(level, text_left))
        lines_right.append(line_equal(level, text_right))
    elif options.show_modifications:
        lines_left.append(line_modify(level, text_left))
        lines_right.append(line_modify(level, text_right))
    else:
        lines_left.append(line_remove(level, text_left))
        lines_left.append(line_equal(level))
        lines_right.append(line_equal(level))
        lines_right.append(line_add(level, text_right))


def diff_array_normal(arr_left, arr_right, key_left, key_right, level, options):
    """Positional line diff of two arrays.

    Items are paired by index. Pairs of mappings or arrays are always
    diffed structurally, whatever their contents; surplus items on the
    longer side are added or removed whole.
    """
    lines_left, lines_right = open_array(key_left, key_right, level)
    if reached_max_depth(level, options):
        lines_left.append(line_equal(level + 1, '...'))
        lines_right.append(line_equal(level + 1, '...'))
        close_array(lines_left, lines_right, level)
        return lines_left, lines_right

    n, m = len(arr_left), len(arr_right)
    for i in range(max(n, m)):
        if i < n and i < m:
            item_left = arr_left[i]
            item_right = arr_right[i]
            type_left = get_type(item_left)
            type_right = get_type(item_right)
            if type_left != type_right:
                append_value_lines(lines_left, lines_right, None, None,
                                   item_left, item_right, level + 1, options)
            elif (options.recursive_equal and is_composite(type_left) and
                    is_equal(item_left, item_right, options)):
                append_value_lines(lines_left, lines_right, None, None,
                                   item_left, item_right, level + 1, options)
            elif type_left == "object":
                left, right = diff_object_item(item_left, item_right, level + 1,
                                               options, diff_array_normal)
                lines_left.extend(left)
                lines_right.extend(right)
            elif type_left == "array":
                left, right = diff_array_normal(item_left, item_right, None, None,
                                                level + 1, options)
                lines_left.extend(left)
                lines_right.extend(right)
            else:
                _diff_scalars(lines_left, lines_right, item_left, item_right,
                              level + 1, options)
        elif i < n:
            append_block(lines_left, lines_right, LineKind.REMOVE, level + 1,
                         arr_left[i], options)
        else:
            append_block(lines_left, lines_right, LineKind.ADD, level + 1,
                         arr_right[i], options)

    close_array(lines_left, lines_right, level)
    return lines_left, lines_right


def array_differ(method):
    """Return the array diff function for an `array_diff_method` value."""
    if method in ("lcs", "unorder-lcs"):
        from .lcs import diff_array_lcs
        return diff_array_lcs
    elif method in ("normal", "unorder-normal"):
        return diff_array_normal
    raise ValueError("Unknown array diff method %r" % (method,))
