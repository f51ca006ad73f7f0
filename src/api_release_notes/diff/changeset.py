"""Change-set assembly: the single entry point of the diff engine."""

import logging
from collections.abc import Mapping

from .base import ChangeSet, ComponentImpact, DiffOptions
from .components import diff_components, find_impact
from .operations import diff_operations, path_operations
from .refs import locate_usage
from .renames import detect_renames

logger = logging.getLogger(__name__)


def _attach_usage(current: Mapping, impact: dict[str, ComponentImpact], exact: bool) -> None:
    paths = current.get("paths") or {}
    for path, entry in impact.items():
        operations = {method.upper(): op for method, op in path_operations(paths.get(path)).items()}
        entry.usage = {
            method: {
                component: locate_usage(operations.get(method), component, exact=exact)
                for component in sorted(entry.components)
            }
            for method in sorted(entry.methods)
        }


def compute_change_set(
    previous: Mapping,
    current: Mapping,
    options: DiffOptions | None = None,
) -> ChangeSet:
    """Compare two API descriptions and return everything that changed.

    Neither document is modified. Calling this twice with the same inputs gives
    equal results.
    """
    options = options or DiffOptions()

    changed_components = diff_components(previous, current)
    impact = find_impact(current, changed_components)
    _attach_usage(current, impact, options.exact_usage_match)

    operations = diff_operations(previous, current)
    added, removed = operations.added, operations.removed

    renamed = {}
    if options.detect_renames:
        renamed, added, removed = detect_renames(added, removed, options.rename_threshold)

    change_set = ChangeSet(
        added=added,
        removed=removed,
        modified=operations.modified,
        changed_components=changed_components,
        component_impact=impact,
        renamed=renamed,
    )
    logger.info(
        "Diff complete: %d added, %d removed, %d modified, %d renamed, %d impacted by components",
        len(added), len(removed), len(operations.modified), len(renamed), len(impact),
    )
    return change_set
