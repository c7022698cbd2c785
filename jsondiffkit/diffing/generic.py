# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import (
    LineKind, DiffLengthError, make_line, line_equal,
)
from ..formatting import format_lines, format_key, get_type

from .comparing import compare, sort_keys

__all__ = ["diff_object", "append_value_lines", "append_block"]


def _is_absent(value):
    return value is None or get_type(value) == "missing"


def with_key(key, text):
    if key is None:
        return text
    return format_key(key) + ': ' + text


def append_block(lines_left, lines_right, kind, level, value, options, key=None):
    """Append value, pretty-printed, as a block only present on one side.

    `kind` is LineKind.REMOVE for a left-only value or LineKind.ADD for a
    right-only value. The other side gets one blank placeholder per line.
    """
    formatted = format_lines(value, None, options.undefined_behavior)
    if kind == LineKind.REMOVE:
        present, blank = lines_left, lines_right
    else:
        present, blank = lines_right, lines_left
    for i, (indent, text) in enumerate(formatted):
        present.append(make_line(level + indent, kind, with_key(key, text) if i == 0 else text))
        blank.append(line_equal(level))


def _lines_from_formatted(lines, formatted, key, level, kind):
    for i, (indent, text) in enumerate(formatted):
        lines.append(make_line(level + indent, kind, with_key(key, text) if i == 0 else text))


def _pad(lines, count, level):
    for _ in range(count):
        lines.append(line_equal(level))


def append_value_lines(lines_left, lines_right, key_left, key_right,
                       value_left, value_right, level, options):
    """Append the value-level diff of two values.

    Both values are pretty-printed whole. Values that compare unequal
    become one `modify` block per side when `options.show_modifications`,
    otherwise a `remove` block followed by an `add` block, each facing
    blank placeholders on the other side.
    """
    formatted_left = format_lines(value_left, options.max_depth, options.undefined_behavior)
    formatted_right = format_lines(value_right, options.max_depth, options.undefined_behavior)
    height = max(len(formatted_left), len(formatted_right))

    if compare(value_left, value_right, ignore_case=options.ignore_case) == 0:
        kind = LineKind.EQUAL
    elif options.show_modifications:
        kind = LineKind.MODIFY
    else:
        _lines_from_formatted(lines_left, formatted_left, key_left, level, LineKind.REMOVE)
        _pad(lines_left, len(formatted_right), level)
        _pad(lines_right, len(formatted_left), level)
        _lines_from_formatted(lines_right, formatted_right, key_right, level, LineKind.ADD)
        return

    _lines_from_formatted(lines_left, formatted_left, key_left, level, kind)
    _pad(lines_left, height - len(formatted_left), level)
    _lines_from_formatted(lines_right, formatted_right, key_right, level, kind)
    _pad(lines_right, height - len(formatted_right), level)


def diff_object_item(item_left, item_right, level, options, diff_array):
    """Diff two mappings sitting in an array, wrapped in bare braces."""
    left, right = diff_object(item_left, item_right, level + 1, options, diff_array)
    lines_left = [line_equal(level, '{')] + left + [line_equal(level, '}')]
    lines_right = [line_equal(level, '{')] + right + [line_equal(level, '}')]
    return lines_left, lines_right


def _ordered_keys(lhs, rhs, options):
    """Return both key lists in walking order, and the key order map if any."""
    keys_left = list(lhs.keys())
    keys_right = list(rhs.keys())
    if options.preserve_key_order is None:
        sort_keys(keys_left, options.ignore_case_for_key)
        sort_keys(keys_right, options.ignore_case_for_key)
        return keys_left, keys_right, None

    if options.preserve_key_order == 'before':
        leading, following = keys_left, keys_right
    else:
        leading, following = keys_right, keys_left
    key_orders = {key: i for i, key in enumerate(leading)}
    for i, key in enumerate(following):
        key_orders.setdefault(key, len(leading) + i)
    following.sort(key=key_orders.__getitem__)
    return keys_left, keys_right, key_orders


def _diff_entry(lines_left, lines_right, key_left, key_right,
                value_left, value_right, level, options, diff_array):
    type_left = get_type(value_left)
    type_right = get_type(value_right)
    if type_left != type_right:
        append_value_lines(lines_left, lines_right, key_left, key_right,
                           value_left, value_right, level, options)
    elif type_left == "array":
        left, right = diff_array(value_left, value_right, key_left, key_right, level, options)
        lines_left.extend(left)
        lines_right.extend(right)
    elif type_left == "null":
        lines_left.append(line_equal(level, with_key(key_left, 'null')))
        lines_right.append(line_equal(level, with_key(key_right, 'null')))
    elif type_left == "object":
        left, right = diff_object(value_left, value_right, level + 1, options, diff_array)
        lines_left.append(line_equal(level, with_key(key_left, '{')))
        lines_left.extend(left)
        lines_left.append(line_equal(level, '}'))
        lines_right.append(line_equal(level, with_key(key_right, '{')))
        lines_right.extend(right)
        lines_right.append(line_equal(level, '}'))
    else:
        append_value_lines(lines_left, lines_right, key_left, key_right,
                           value_left, value_right, level, options)


def diff_object(lhs, rhs, level, options, diff_array):
    """Compute the line diff of two mappings at the given indentation level.

    Either side may also be None or Missing, in which case the other side
    is added or removed whole. Array values are handed to `diff_array`,
    which is called as ``diff_array(left, right, key_left, key_right,
    level, options)`` and must return a pair of aligned line lists.

    Returns a pair of line lists of equal length, one per side.
    """
    if options.max_depth is not None and level > options.max_depth:
        return [line_equal(level, '...')], [line_equal(level, '...')]

    lines_left = []
    lines_right = []
    if _is_absent(lhs) and _is_absent(rhs):
        return lines_left, lines_right
    elif _is_absent(lhs):
        append_block(lines_left, lines_right, LineKind.ADD, level, rhs, options)
        return lines_left, lines_right
    elif _is_absent(rhs):
        append_block(lines_left, lines_right, LineKind.REMOVE, level, lhs, options)
        return lines_left, lines_right

    keys_left, keys_right, key_orders = _ordered_keys(lhs, rhs, options)

    # Merge-join of the two ordered key lists
    i, j = 0, 0
    while i < len(keys_left) or j < len(keys_right):
        if i < len(keys_left) and j < len(keys_right):
            key_left = keys_left[i]
            key_right = keys_right[j]
            order = compare(key_left, key_right,
                            ignore_case=options.ignore_case_for_key,
                            key_orders=key_orders)
            if order == 0:
                _diff_entry(lines_left, lines_right, key_left, key_right,
                            lhs[key_left], rhs[key_right], level, options, diff_array)
                i += 1
                j += 1
            elif order < 0:
                append_block(lines_left, lines_right, LineKind.REMOVE, level,
                             lhs[key_left], options, key_left)
                i += 1
            else:
                append_block(lines_left, lines_right, LineKind.ADD, level,
                             rhs[key_right], options, key_right)
                j += 1
        elif i < len(keys_left):
            key_left = keys_left[i]
            append_block(lines_left, lines_right, LineKind.REMOVE, level,
                         lhs[key_left], options, key_left)
            i += 1
        else:
            key_right = keys_right[j]
            append_block(lines_left, lines_right, LineKind.ADD, level,
                         rhs[key_right], options, key_right)
            j += 1

    if len(lines_left) != len(lines_right):
        raise DiffLengthError(
            "Diff error: length mismatch for left ({}) and right ({}) lines, "
            "please report a bug with your data.".format(
                len(lines_left), len(lines_right)))
    return lines_left, lines_right
