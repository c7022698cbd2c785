# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondiffkit import Differ, merge_diff


def kinds(lines):
    return [line.kind for line in lines]


def texts(lines):
    "Texts of the lines that are not blank placeholders."
    return [line.text for line in lines if line.text]


def rows(diff):
    "Pairs of (left kind, left text, right kind, right text) per row."
    left, right = diff
    return [(l.kind, l.text, r.kind, r.text) for l, r in zip(left, right)]


def assert_aligned(diff):
    left, right = diff
    assert len(left) == len(right)


def check_diff(a, b, **options):
    "Diff a against b and check the result is aligned."
    d = Differ(**options).diff(a, b)
    assert_aligned(d)
    return d


def merged_texts(a, b, **options):
    return [line.text for line in merge_diff(check_diff(a, b, **options))]
