# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from functools import cmp_to_key
import math

from ..formatting import get_type, is_composite

__all__ = ["compare", "sort_keys", "sort_inner_arrays",
           "is_equal", "deep_equal", "shallow_similarity"]


# Ranking of values of different kinds
_type_order = {
    "boolean": 0,
    "number": 1,
    "string": 2,
    "null": 3,
    "array": 4,
    "object": 5,
    "symbol": 6,
    "function": 7,
    "bigint": 8,
}


def _sign(x):
    return (x > 0) - (x < 0)


def _compare_numbers(a, b):
    a_nan = isinstance(a, float) and math.isnan(a)
    b_nan = isinstance(b, float) and math.isnan(b)
    if a_nan or b_nan:
        # NaN ranks first among numbers, and equals itself
        return b_nan - a_nan
    if a == b:
        # Also covers same-signed infinities
        return 0
    return _sign(a - b)


def compare(a, b, ignore_case=False, key_orders=None):
    """Total order over tree values, returning a negative, zero or positive int.

    Values of different kinds are ranked boolean < number < string < null
    < array < object < symbol < function < bigint. Arrays compare equal to
    arrays and objects to objects: their contents are diffed, not ranked.

    When `key_orders` maps both a and b to a position, that position wins.
    """
    if key_orders is not None and a in key_orders and b in key_orders:
        return _sign(key_orders[a] - key_orders[b])
    type_a = get_type(a)
    type_b = get_type(b)
    order_a = _type_order.get(type_a, -1)
    order_b = _type_order.get(type_b, -1)
    if order_a != order_b:
        return _sign(order_a - order_b)
    if is_composite(type_a) or type_a in ("null", "missing"):
        return 0
    if type_a == "number":
        return _compare_numbers(a, b)
    if type_a == "string":
        if ignore_case:
            a = a.lower()
            b = b.lower()
        return (a > b) - (a < b)
    if type_a == "boolean":
        return int(a) - int(b)
    if type_a == "bigint":
        return _sign(a - b)
    a, b = str(a), str(b)
    return (a > b) - (a < b)


def sort_keys(keys, ignore_case=False):
    "Sort a list of mapping keys in place."
    keys.sort(key=cmp_to_key(lambda a, b: compare(a, b, ignore_case=ignore_case)))
    return keys


def sort_inner_arrays(source, ignore_case=False):
    """Return a copy of source with every array sorted by `compare`.

    Used for order-insensitive array diffing. Items are sorted before
    their own contents are, so composite items keep their relative order.
    """
    kind = get_type(source)
    if kind == "array":
        result = sorted(source, key=cmp_to_key(
            lambda a, b: compare(a, b, ignore_case=ignore_case)))
        return [sort_inner_arrays(item, ignore_case) for item in result]
    if kind == "object":
        return {key: sort_inner_arrays(value, ignore_case)
                for key, value in source.items()}
    return source


def strict_equal(a, b):
    """Equality of scalars of the same kind, identity for containers.

    NaN equals NaN, True is not equal to 1.
    """
    kind = get_type(a)
    if kind != get_type(b):
        return False
    if is_composite(kind):
        return a is b
    if kind == "number" and a != a:
        return b != b
    return a == b


def deep_equal(a, b, ignore_case=False):
    """Structural equality of two tree values.

    NaN equals NaN here, and strings are case-folded when `ignore_case`.
    """
    if a is b:
        return True
    kind = get_type(a)
    if kind != get_type(b):
        return False
    if kind == "string":
        if ignore_case:
            return a.lower() == b.lower()
        return a == b
    if kind == "number":
        if a != a and b != b:
            return True
        return a == b
    if kind == "array":
        return len(a) == len(b) and all(
            deep_equal(x, y, ignore_case) for x, y in zip(a, b))
    if kind == "object":
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not deep_equal(value, b[key], ignore_case):
                return False
        return True
    return a == b


def is_equal(a, b, options):
    """Decide whether a and b are the same element for alignment purposes."""
    if options.recursive_equal:
        return deep_equal(a, b, options.ignore_case)
    if options.ignore_case and isinstance(a, str) and isinstance(b, str):
        return a.lower() == b.lower()
    return strict_equal(a, b)


def _keys(value):
    if get_type(value) == "array":
        return list(range(len(value)))
    return list(value.keys())


def shallow_similarity(left, right):
    """Fraction of shared top-level keys of two containers, in [0, 1].

    The count of shared keys is divided by the key count of the smaller
    side. Array indices count as keys. A single shared key whose first
    values differ scores 0 when either side has only that key.
    """
    if left is right:
        return 1
    if not is_composite(get_type(left)) or not is_composite(get_type(right)):
        return 0
    left_keys = _keys(left)
    right_keys = _keys(right)
    if not left_keys or not right_keys:
        return 0
    shared = set(left_keys) & set(right_keys)
    if not shared:
        return 0
    if (len(shared) == 1 and (len(left_keys) == 1 or len(right_keys) == 1) and
            not strict_equal(left[left_keys[0]], right[right_keys[0]])):
        return 0
    return max(len(shared) / len(left_keys), len(shared) / len(right_keys))
