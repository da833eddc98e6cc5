"""Structural equality over engine property values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_NUMBER_TYPES = (int, float)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def deep_equal(left: Any, right: Any) -> bool:
    """Return ``True`` when *left* and *right* are structurally equal.

    Mappings compare by key set and value, sequences element-wise.
    ``None`` never equals an empty mapping and ``bool`` never equals a
    number, so an absent field and an empty one are told apart.
    """
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if left.keys() != right.keys():
            return False
        return all(deep_equal(value, right[key]) for key, value in left.items())

    if _is_sequence(left) or _is_sequence(right):
        if not (_is_sequence(left) and _is_sequence(right)):
            return False
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right, strict=True))

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right

    if isinstance(left, _NUMBER_TYPES) and isinstance(right, _NUMBER_TYPES):
        return left == right

    return type(left) is type(right) and bool(left == right)
