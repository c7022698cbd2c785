# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Turning tree values into json-like text.

Values are laid out the way ``json.dumps(value, indent=1)`` would lay
them out, except that the text is kept as a list of ``(indent, text)``
pairs without trailing commas, so that callers can attach their own
indentation level and comma placement to each line.
"""

from collections.abc import Mapping, Sequence
import json
import math

from .diff_format import Missing, InvalidValueError


# Largest integer a json number (an IEEE double) holds exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1

# Placeholder for containers nested deeper than the depth limit
ELLIPSIS = '"..."'


class UndefinedBehavior:
    "Collection of valid policies for values without a json representation."
    STRINGIFY = "stringify"
    IGNORE = "ignore"
    THROW = "throw"


def is_array(value):
    return (isinstance(value, Sequence) and
            not isinstance(value, (str, bytes, bytearray)))


def is_object(value):
    return isinstance(value, Mapping)


def get_type(value):
    """Return the kind name of a tree value.

    One of "missing", "null", "boolean", "number", "string", "bigint",
    "array", "object", "function" or "symbol".
    """
    if value is Missing:
        return "missing"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return "bigint"
        return "number"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_object(value):
        return "object"
    if is_array(value):
        return "array"
    if callable(value):
        return "function"
    return "symbol"


def is_composite(kind):
    return kind in ("array", "object")


def is_invalid_value(value):
    """Whether value has no direct json text."""
    kind = get_type(value)
    if kind == "number":
        return math.isnan(value) or math.isinf(value)
    return kind in ("missing", "bigint", "function", "symbol")


def stringify_invalid_value(value):
    if value is Missing:
        return 'undefined'
    if get_type(value) == "bigint":
        return '{}n'.format(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        return 'Infinity' if value > 0 else '-Infinity'
    return str(value)


def format_scalar(value, undefined_behavior=UndefinedBehavior.STRINGIFY):
    "Format a non-container value as a single json token."
    if is_invalid_value(value):
        if undefined_behavior == UndefinedBehavior.THROW:
            raise InvalidValueError(
                "Value is not valid in JSON, got {!r}".format(value))
        # Values are cleaned up front for the ignore policy, so anything
        # still here is rendered as a literal token.
        return stringify_invalid_value(value)
    return json.dumps(value, ensure_ascii=False)


def format_key(key):
    return json.dumps(str(key), ensure_ascii=False)


def _append_lines(lines, value, indent, prefix, depth, undefined_behavior):
    kind = get_type(value)
    if not is_composite(kind):
        lines.append((indent, prefix + format_scalar(value, undefined_behavior)))
        return
    if depth is not None and depth < 1:
        lines.append((indent, prefix + ELLIPSIS))
        return
    if depth is not None:
        depth -= 1
    if kind == "array":
        if not value:
            lines.append((indent, prefix + '[]'))
            return
        lines.append((indent, prefix + '['))
        for item in value:
            _append_lines(lines, item, indent + 1, '', depth, undefined_behavior)
        lines.append((indent, ']'))
    else:
        if not value:
            lines.append((indent, prefix + '{}'))
            return
        lines.append((indent, prefix + '{'))
        for key, item in value.items():
            _append_lines(lines, item, indent + 1, format_key(key) + ': ',
                          depth, undefined_behavior)
        lines.append((indent, '}'))


def format_lines(value, depth=None, undefined_behavior=UndefinedBehavior.STRINGIFY):
    """Pretty-print value as a list of (indent, text) pairs.

    Containers nested more than `depth` levels below value are
    replaced by a quoted ellipsis. `depth=None` means no limit.
    """
    lines = []
    _append_lines(lines, value, 0, '', depth, undefined_behavior)
    return lines


def format_value(value, depth=None, pretty=False,
                 undefined_behavior=UndefinedBehavior.STRINGIFY):
    """Format value as text, one line per element when pretty."""
    if not pretty:
        return _format_compact(value, depth, undefined_behavior)
    lines = format_lines(value, depth, undefined_behavior)
    out = []
    for i, (indent, text) in enumerate(lines):
        # Opening lines are always followed by deeper ones
        if i + 1 < len(lines) and lines[i + 1][0] == indent:
            text += ','
        out.append(' ' * indent + text)
    return "\n".join(out)


def _format_compact(value, depth, undefined_behavior):
    kind = get_type(value)
    if not is_composite(kind):
        return format_scalar(value, undefined_behavior)
    if depth is not None and depth < 1:
        return ELLIPSIS
    if depth is not None:
        depth -= 1
    if kind == "array":
        return '[' + ','.join(
            _format_compact(item, depth, undefined_behavior)
            for item in value) + ']'
    return '{' + ','.join(
        format_key(key) + ':' + _format_compact(item, depth, undefined_behavior)
        for key, item in value.items()) + '}'


def clean_fields(value):
    """Drop values without a json representation, recursively.

    Mapping entries holding such values are dropped along with them.
    Containers left empty are kept. Returns Missing when value itself
    is invalid.
    """
    if is_invalid_value(value):
        return Missing
    kind = get_type(value)
    if kind == "array":
        cleaned = (clean_fields(item) for item in value)
        return [item for item in cleaned if item is not Missing]
    if kind == "object":
        result = {}
        for key, item in value.items():
            item = clean_fields(item)
            if item is not Missing:
                result[key] = item
        return result
    return value


def detect_circular(value, _ancestors=None):
    """Find a container that refers back to itself or one of its ancestors.

    Returns the offending container, or None when value is a tree.
    """
    kind = get_type(value)
    if not is_composite(kind):
        return None
    if _ancestors is None:
        _ancestors = set()
    _ancestors.add(id(value))
    children = value.values() if kind == "object" else value
    try:
        for child in children:
            if id(child) in _ancestors:
                return value
            found = detect_circular(child, _ancestors)
            if found is not None:
                return found
    finally:
        _ancestors.discard(id(value))
    return None
