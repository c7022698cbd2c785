# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .config import DiffOptions
from .diff_format import (
    DiffLine, LineKind, Missing,
    CircularReferenceError, InvalidValueError, DiffLengthError,
)
from .diffing import Differ, diff
from .log import DiffError
from .merging import merge_diff, build_text, diff_to_text


__all__ = [
    "__version__",
    "diff", "Differ", "DiffOptions",
    "merge_diff", "build_text", "diff_to_text",
    "DiffLine", "LineKind", "Missing",
    "DiffError", "CircularReferenceError", "InvalidValueError", "DiffLengthError",
    ]
