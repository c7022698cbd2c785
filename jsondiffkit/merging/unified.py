# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import DiffLine, LineKind, is_blank
from ..diff_utils import calculate_commas

__all__ = ["merge_diff", "build_text", "diff_to_text"]


# Prefixes of changed lines in the unified stream
REMOVE_PREFIX = "- "
ADD_PREFIX = "+ "

# Indentation per level in built text
IND = "  "


def _prefixed(line, prefix):
    merged = DiffLine(line)
    merged.text = prefix + line.text
    return merged


def merge_diff(diff):
    """Fold the two sides of a diff into one unified stream of lines.

    Rows unchanged on both sides become one unmarked line, the before
    side of a changed row is prefixed with "- " and the after side with
    "+ ". Commas are computed again over the merged stream, since the
    neighbours of a line change once both sides are interleaved.
    """
    left, right = diff
    merged = []
    for line_left, line_right in zip(left, right):
        if line_left.kind == LineKind.EQUAL and line_right.kind == LineKind.EQUAL:
            if not is_blank(line_left):
                merged.append(DiffLine(line_left))
            continue
        if line_left.kind in (LineKind.MODIFY, LineKind.REMOVE):
            merged.append(_prefixed(line_left, REMOVE_PREFIX))
        if line_right.kind in (LineKind.MODIFY, LineKind.ADD):
            merged.append(_prefixed(line_right, ADD_PREFIX))
    calculate_commas(merged)
    return merged


def build_text(merged, indent=IND):
    """Render merged lines as indented text, one line per entry."""
    return "".join(
        indent * line.level + line.text + ("," if line.comma else "") + "\n"
        for line in merged)


def diff_to_text(before, after, differ=None, **kwargs):
    """Diff two values and render the unified result as text."""
    if differ is None:
        from ..diffing import Differ
        differ = Differ(**kwargs)
    return build_text(merge_diff(differ.diff(before, after)))
