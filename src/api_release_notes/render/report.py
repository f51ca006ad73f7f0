"""JSON report renderer for ChangeSets.

Sets become sorted lists so the output is stable between runs.
"""

import json

from api_release_notes.diff.base import ChangeSet


def render_report(change_set: ChangeSet) -> dict:
    """Convert a ChangeSet into plain, deterministically ordered JSON data."""
    return {
        "added": {path: sorted(methods) for path, methods in sorted(change_set.added.items())},
        "removed": {path: sorted(methods) for path, methods in sorted(change_set.removed.items())},
        "modified": {
            path: [
                {"method": op.method, "changed_fields": list(op.changed_fields)}
                for op in sorted(ops, key=lambda o: o.method)
            ]
            for path, ops in sorted(change_set.modified.items())
        },
        "changed_components": sorted(change_set.changed_components),
        "component_impact": {
            path: {
                "methods": sorted(impact.methods),
                "components": sorted(impact.components),
                "usage": {
                    method: {component: sorted(locations) for component, locations in sorted(by_comp.items())}
                    for method, by_comp in sorted(impact.usage.items())
                },
            }
            for path, impact in sorted(change_set.component_impact.items())
        },
        "renamed": {
            old_path: {"new_path": rename.new_path, "methods": sorted(rename.methods)}
            for old_path, rename in sorted(change_set.renamed.items())
        },
    }


def render_json(change_set: ChangeSet, indent: int = 2) -> str:
    """Render a ChangeSet as a JSON document."""
    return json.dumps(render_report(change_set), indent=indent, ensure_ascii=False) + "\n"
