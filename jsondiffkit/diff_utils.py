# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import LineKind, is_blank


def sort_result_lines(left, right):
    """Move removals above additions they were emitted below.

    Swaps rows i-1 and i of both sides in place where row i-1 is a blank
    facing an addition and row i a removal facing a blank, until no such
    pair is left. Every pass moves a removal one row up, so the number of
    passes is capped at the number of rows.
    """
    for _ in range(len(left)):
        changed = False
        for i in range(1, len(left)):
            if (left[i].kind == LineKind.REMOVE and
                    left[i - 1].kind == LineKind.EQUAL and
                    right[i].kind == LineKind.EQUAL and
                    right[i - 1].kind == LineKind.ADD):
                left[i - 1], left[i] = left[i], left[i - 1]
                right[i - 1], right[i] = right[i], right[i - 1]
                changed = True
        if not changed:
            break


def calculate_line_numbers(lines):
    """Number the lines with text, starting from 1.

    Blank placeholder lines get no number.
    """
    line_number = 0
    for line in lines:
        if is_blank(line):
            line.line_number = None
            continue
        line_number += 1
        line.line_number = line_number


def calculate_commas(lines):
    """Set the comma flag of every line in place.

    A line takes a trailing comma when it has text, does not open a
    bracket, and the next line with text sits at the same or a deeper
    level. The last line of an object or array is followed by its
    closing bracket one level up, and so gets none.
    """
    next_line = [None] * len(lines)
    following = None
    for i in range(len(lines) - 1, -1, -1):
        next_line[i] = following
        if lines[i].text:
            following = i

    for i, line in enumerate(lines):
        text = line.text
        j = next_line[i]
        line.comma = bool(
            text and
            not text.endswith(('{', '[')) and
            j is not None and
            line.level <= lines[j].level)


def post_process(left, right):
    "Normalize the two sides of a finished diff in place."
    sort_result_lines(left, right)
    calculate_line_numbers(left)
    calculate_line_numbers(right)
    calculate_commas(left)
    calculate_commas(right)
    return left, right
