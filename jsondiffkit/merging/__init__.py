# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .unified import merge_diff, build_text, diff_to_text

__all__ = ["merge_diff", "build_text", "diff_to_text"]
