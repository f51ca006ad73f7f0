"""Reference scanning for internal ``$ref`` pointers.

Finds which components an arbitrary part of a document points at, and where in
an operation a given component is used.
"""

from collections.abc import Mapping
from typing import Any

from .base import USAGE_LOCATIONS
from .values import is_sequence

COMPONENTS_PREFIX = "#/components/"


def pointer_target(node: Any) -> str | None:
    """Return the component name a node points at, if it holds an internal pointer."""
    if not isinstance(node, Mapping):
        return None
    ref = node.get("$ref")
    if isinstance(ref, str) and ref.startswith(COMPONENTS_PREFIX):
        return ref.rsplit("/", 1)[-1]
    return None


def scan_refs(node: Any) -> set[str]:
    """Collect the names of all components referenced anywhere under ``node``."""
    refs: set[str] = set()
    _scan(node, refs, set())
    return refs


def _scan(node: Any, refs: set[str], active: set[int]) -> None:
    if isinstance(node, Mapping):
        children = node.values()
    elif is_sequence(node):
        children = node
    else:
        return

    # Skip containers already on the stack, aliased YAML anchors can form cycles
    if id(node) in active:
        return
    active.add(id(node))

    target = pointer_target(node)
    if target is not None:
        refs.add(target)

    for child in children:
        _scan(child, refs, active)

    active.discard(id(node))


def _ref_matches(node: Any, component: str, exact: bool) -> bool:
    if not isinstance(node, Mapping):
        return False
    ref = node.get("$ref")
    if not isinstance(ref, str):
        return False
    if exact:
        return pointer_target(node) == component
    return component in ref


def _schemas_in_content(holder: Any) -> list:
    if not isinstance(holder, Mapping):
        return []
    content = holder.get("content")
    if not isinstance(content, Mapping):
        return []
    return [media.get("schema") for media in content.values() if isinstance(media, Mapping)]


def locate_usage(operation: Any, component: str, exact: bool = False) -> list[str]:
    """Report which parts of an operation mention a component.

    Looks at parameter pointers (direct or under ``schema``), request body
    schemas and response schemas. By default a pointer matches when it
    contains the component name anywhere; ``exact`` compares the final
    pointer segment instead.

    Returns: a subset of ['parameters', 'requestBody', 'responses'], in that order.
    """
    if not isinstance(operation, Mapping):
        return []

    found = {location: False for location in USAGE_LOCATIONS}

    parameters = operation.get("parameters")
    if is_sequence(parameters):
        found["parameters"] = any(
            _ref_matches(p, component, exact)
            or (isinstance(p, Mapping) and _ref_matches(p.get("schema"), component, exact))
            for p in parameters
        )

    found["requestBody"] = any(
        _ref_matches(schema, component, exact)
        for schema in _schemas_in_content(operation.get("requestBody"))
    )

    responses = operation.get("responses")
    if isinstance(responses, Mapping):
        found["responses"] = any(
            _ref_matches(schema, component, exact)
            for response in responses.values()
            for schema in _schemas_in_content(response)
        )

    return [location for location in USAGE_LOCATIONS if found[location]]
