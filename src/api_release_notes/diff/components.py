"""Component diffing and impact propagation.

A component counts as changed when it is new in the current document or its
definition differs from the previous one. Every operation that references a
changed component is impacted, even if its own definition is untouched.
"""

import logging
from collections.abc import Mapping

from .base import ComponentImpact
from .operations import iter_operations
from .refs import scan_refs
from .values import same_value

logger = logging.getLogger(__name__)


def _section(doc: Mapping, name: str) -> Mapping:
    section = doc.get(name)
    return section if isinstance(section, Mapping) else {}


def diff_components(previous: Mapping, current: Mapping) -> set[str]:
    """Return the names of components added or changed in ``current``.

    Components that only exist in ``previous`` are not reported.
    """
    prev_comps = _section(previous, "components")
    curr_comps = _section(current, "components")

    changed: set[str] = set()
    for category, components in curr_comps.items():
        if not isinstance(components, Mapping):
            continue
        prev_category = prev_comps.get(category)
        if not isinstance(prev_category, Mapping):
            prev_category = {}

        for name, definition in components.items():
            if name not in prev_category or not same_value(prev_category[name], definition):
                logger.debug("Component %s/%s changed", category, name)
                changed.add(str(name))

    return changed


def find_impact(current: Mapping, changed: set[str]) -> dict[str, ComponentImpact]:
    """Map each path to the methods and changed components its operations reference."""
    if not changed:
        return {}

    impact: dict[str, ComponentImpact] = {}
    for path, method, operation in iter_operations(current):
        hits = scan_refs(operation) & changed
        if not hits:
            continue
        entry = impact.setdefault(path, ComponentImpact())
        entry.methods.add(method.upper())
        entry.components.update(hits)

    logger.debug("%d path(s) impacted by %d changed component(s)", len(impact), len(changed))
    return impact
