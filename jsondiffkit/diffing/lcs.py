# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import LineKind, line_equal, line_modify
from ..formatting import format_value, get_type, is_composite
from ..log import warning

from .comparing import is_equal, shallow_similarity
from .generic import append_block, append_value_lines, diff_object_item
from .sequences import open_array, close_array, reached_max_depth

__all__ = ["diff_array_lcs", "compute_lcs_table"]


# Backtrack steps
DIAG = "diag"
UP = "up"
LEFT = "left"

# Above this many table cells a warning about quadratic cost is logged
LCS_WARN_CELLS = 1000000

# Minimal shallow similarity for two containers to be aligned
SIMILARITY_THRESHOLD = 0.5


def items_match(item_left, item_right, options):
    """Whether two array items may be aligned with each other.

    Two mappings, or two arrays, always match unless recursive_equal is
    set, so that their differences show up inside them. With
    recursive_equal they must be equal or shallowly similar.
    """
    type_left = get_type(item_left)
    if type_left == get_type(item_right) and is_composite(type_left):
        if not options.recursive_equal:
            return True
        return (is_equal(item_left, item_right, options) or
                shallow_similarity(item_left, item_right) > SIMILARITY_THRESHOLD)
    return is_equal(item_left, item_right, options)


def compute_lcs_table(arr_left, arr_right, options):
    """Compute the longest common subsequence tables of two arrays.

    Returns (f, backtrack) where f[i][j] is the length of the LCS of
    arr_left[:i] and arr_right[:j], and backtrack[i][j] the step taken
    to reach that cell. Ties prefer UP, i.e. removing from the left.
    """
    n, m = len(arr_left), len(arr_right)
    if n * m > LCS_WARN_CELLS:
        warning("Aligning arrays of %d and %d items, this takes quadratic "
                "time and memory", n, m)
    f = [[0] * (m + 1) for _ in range(n + 1)]
    backtrack = [[None] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        backtrack[i][0] = UP
    for j in range(1, m + 1):
        backtrack[0][j] = LEFT

    for i in range(1, n + 1):
        item_left = arr_left[i - 1]
        for j in range(1, m + 1):
            if items_match(item_left, arr_right[j - 1], options):
                f[i][j] = f[i - 1][j - 1] + 1
                backtrack[i][j] = DIAG
            elif f[i - 1][j] >= f[i][j - 1]:
                f[i][j] = f[i - 1][j]
                backtrack[i][j] = UP
            else:
                f[i][j] = f[i][j - 1]
                backtrack[i][j] = LEFT
    return f, backtrack


def _diff_matched(item_left, item_right, level, options):
    lines_left, lines_right = [], []
    kind = get_type(item_left)
    if (options.recursive_equal and is_composite(kind) and
            is_equal(item_left, item_right, options)):
        append_value_lines(lines_left, lines_right, None, None,
                           item_left, item_right, level, options)
    elif kind == "array":
        return diff_array_lcs(item_left, item_right, None, None, level, options)
    elif kind == "object":
        return diff_object_item(item_left, item_right, level, options, diff_array_lcs)
    else:
        append_value_lines(lines_left, lines_right, None, None,
                           item_left, item_right, level, options)
    return lines_left, lines_right


def _diff_modified(item_left, item_right, level, options):
    lines_left, lines_right = [], []
    kind = get_type(item_left)
    if kind != get_type(item_right):
        append_value_lines(lines_left, lines_right, None, None,
                           item_left, item_right, level, options)
    elif kind == "array":
        return diff_array_lcs(item_left, item_right, None, None, level, options)
    elif kind == "object":
        return diff_object_item(item_left, item_right, level, options, diff_array_lcs)
    else:
        lines_left.append(line_modify(level, format_value(
            item_left, undefined_behavior=options.undefined_behavior)))
        lines_right.append(line_modify(level, format_value(
            item_right, undefined_behavior=options.undefined_behavior)))
    return lines_left, lines_right


def align_lcs(arr_left, arr_right, level, options):
    """Line diff of the items of two arrays aligned on their LCS.

    Items are emitted at `level + 1`. The backtrack walks from the end of
    both arrays to their start, so each block is pushed reversed and the
    result is flipped once at the end.
    """
    _, backtrack = compute_lcs_table(arr_left, arr_right, options)
    item_level = level + 1
    reversed_left, reversed_right = [], []

    i, j = len(arr_left), len(arr_right)
    while i > 0 or j > 0:
        step = backtrack[i][j]
        if step == DIAG:
            block_left, block_right = _diff_matched(
                arr_left[i - 1], arr_right[j - 1], item_level, options)
            i -= 1
            j -= 1
        elif step == UP:
            if options.show_modifications and i > 1 and backtrack[i - 1][j] == LEFT:
                # A removal right after an addition: one modified item
                block_left, block_right = _diff_modified(
                    arr_left[i - 1], arr_right[j - 1], item_level, options)
                i -= 1
                j -= 1
            else:
                block_left, block_right = [], []
                append_block(block_left, block_right, LineKind.REMOVE, item_level,
                             arr_left[i - 1], options)
                i -= 1
        else:
            block_left, block_right = [], []
            append_block(block_left, block_right, LineKind.ADD, item_level,
                         arr_right[j - 1], options)
            j -= 1
        reversed_left.extend(reversed(block_left))
        reversed_right.extend(reversed(block_right))

    reversed_left.reverse()
    reversed_right.reverse()
    return reversed_left, reversed_right


def diff_array_lcs(arr_left, arr_right, key_left, key_right, level, options):
    """Line diff of two arrays aligned on their longest common subsequence.

    Tolerates insertions, deletions and moves in the middle of the arrays,
    at the price of O(len(arr_left) * len(arr_right)) time and memory.
    """
    lines_left, lines_right = open_array(key_left, key_right, level)
    if reached_max_depth(level, options):
        lines_left.append(line_equal(level + 1, '...'))
        lines_right.append(line_equal(level + 1, '...'))
    else:
        left, right = align_lcs(arr_left, arr_right, level, options)
        lines_left.extend(left)
        lines_right.extend(right)
    close_array(lines_left, lines_right, level)
    return lines_left, lines_right
