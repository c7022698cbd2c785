# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .differ import Differ, diff

__all__ = ["Differ", "diff"]
