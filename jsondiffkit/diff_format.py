# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffError


class _MissingType(object):
    """Type of the sentinel standing in for an absent (undefined) value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_MissingType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'Missing'

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


# Sentinel to allow None as a value
Missing = _MissingType()


class CircularReferenceError(DiffError):
    pass


class InvalidValueError(DiffError):
    pass


class DiffLengthError(DiffError):
    pass


class DiffLine(dict):
    """A single line of one side of a diff.

    Minimal class providing attribute access to the line keys
    ``level``, ``kind``, ``text``, ``line_number`` and ``comma``,
    while staying a plain dict for json conversion.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class LineKind:
    "Collection of valid values for the kind field in diff lines."
    EQUAL = "equal"
    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"


def make_line(level, kind, text):
    "Create a diff line with no line number or comma assigned yet."
    return DiffLine(level=level, kind=kind, text=text, line_number=None, comma=False)

def line_equal(level, text=''):
    "Create an unchanged line, or a blank placeholder when text is empty."
    return make_line(level, LineKind.EQUAL, text)

def line_add(level, text):
    "Create a line only present on the after side."
    return make_line(level, LineKind.ADD, text)

def line_remove(level, text):
    "Create a line only present on the before side."
    return make_line(level, LineKind.REMOVE, text)

def line_modify(level, text):
    "Create a line that changed in place."
    return make_line(level, LineKind.MODIFY, text)


def is_blank(line):
    return not line.text


def validate_diff(left, right):
    """Check that the two sides of a diff are aligned row by row.

    Raises DiffLengthError on any mismatch, which is always an
    engine bug and never a problem with the input data.
    """
    if len(left) != len(right):
        raise DiffLengthError(
            "Diff error: length mismatch for left ({}) and right ({}) "
            "lines, please report a bug with your data.".format(
                len(left), len(right)))
    kinds = (LineKind.EQUAL, LineKind.ADD, LineKind.REMOVE, LineKind.MODIFY)
    for lines in (left, right):
        for line in lines:
            if not isinstance(line, DiffLine) or line.kind not in kinds:
                raise DiffError("Invalid diff line {!r}".format(line))


def to_json(lines):
    "Convert diff lines to plain dicts for json output."
    return [dict(line) for line in lines]
