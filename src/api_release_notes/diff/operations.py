"""Operation diffing keyed by path and HTTP method."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any, NamedTuple

from .base import HTTP_METHODS, TRACKED_FIELDS, ModifiedOperation
from .values import MISSING, same_value

logger = logging.getLogger(__name__)


class OperationDiff(NamedTuple):
    added: dict[str, set[str]]
    removed: dict[str, set[str]]
    modified: dict[str, list[ModifiedOperation]]


def path_operations(path_item: Any) -> dict[str, Mapping]:
    """Return {method: operation} for the HTTP operations of a path item."""
    if not isinstance(path_item, Mapping):
        return {}
    return {
        method: operation
        for method, operation in path_item.items()
        if isinstance(method, str) and method.lower() in HTTP_METHODS and isinstance(operation, Mapping)
    }


def iter_operations(doc: Mapping) -> Iterator[tuple[str, str, Mapping]]:
    """Yield (path, method, operation) for every operation in a document."""
    paths = doc.get("paths")
    if not isinstance(paths, Mapping):
        return
    for path, path_item in paths.items():
        for method, operation in path_operations(path_item).items():
            yield path, method, operation


def changed_fields(previous: Mapping, current: Mapping) -> list[str]:
    """List the fields that differ between two versions of an operation.

    Tracked fields come first in their fixed order. Other top-level keys are
    only listed (sorted) when none of the tracked fields changed.
    """
    fields = [
        name
        for name in TRACKED_FIELDS
        if not same_value(previous.get(name, MISSING), current.get(name, MISSING))
    ]
    if fields:
        return fields

    others = (set(previous) | set(current)) - set(TRACKED_FIELDS)
    return sorted(
        name
        for name in others
        if not same_value(previous.get(name, MISSING), current.get(name, MISSING))
    )


def diff_operations(previous: Mapping, current: Mapping) -> OperationDiff:
    """Classify operations as added, removed or modified."""
    prev_paths = previous.get("paths")
    if not isinstance(prev_paths, Mapping):
        prev_paths = {}
    curr_paths = current.get("paths")
    if not isinstance(curr_paths, Mapping):
        curr_paths = {}

    added: dict[str, set[str]] = {}
    removed: dict[str, set[str]] = {}
    modified: dict[str, list[ModifiedOperation]] = {}

    for path, method, operation in iter_operations(current):
        prev_ops = path_operations(prev_paths.get(path))
        if method not in prev_ops:
            added.setdefault(path, set()).add(method.upper())
        elif not same_value(prev_ops[method], operation):
            fields = changed_fields(prev_ops[method], operation)
            modified.setdefault(path, []).append(
                ModifiedOperation(method=method.upper(), changed_fields=fields)
            )

    for path, method, _ in iter_operations(previous):
        if method not in path_operations(curr_paths.get(path)):
            removed.setdefault(path, set()).add(method.upper())

    logger.debug(
        "Operations: %d path(s) added, %d removed, %d modified",
        len(added), len(removed), len(modified),
    )
    return OperationDiff(added=added, removed=removed, modified=modified)
