"""Structural equality for JSON-like values.

Documents are trees of mappings, sequences and scalars. Mapping key order never
matters, ``1`` equals ``1.0`` and booleans are kept apart from numbers so
``true`` never equals ``1``.
"""

from typing import Any

from deepdiff import DeepDiff

MISSING = object()


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def same_value(a: Any, b: Any) -> bool:
    """Return True when two JSON-like values are structurally equal."""
    if a is b:
        return True
    if a is MISSING or b is MISSING:
        return False

    # bool is not in DeepDiff's numeric group, so True vs 1 stays a type change
    diff = DeepDiff(a, b, ignore_numeric_type_changes=True)
    return not diff
