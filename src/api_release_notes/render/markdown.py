"""Markdown release notes renderer.

Turns a ChangeSet into the change log format:

    # API Changes

    ## Added
    - [GET] [POST] `/items`
"""

from api_release_notes.diff.base import ChangeSet, ComponentImpact, ModifiedOperation

DEFAULT_TITLE = "API Changes"


def _method_tags(methods) -> str:
    return " ".join(f"[{m}]" for m in sorted(methods))


def _path_list_section(heading: str, entries: dict[str, set[str]]) -> str:
    section = f"## {heading}\n"
    for path in sorted(entries):
        section += f"- {_method_tags(entries[path])} `{path}`\n"
    return section


def _direct_lines(path: str, operations: list[ModifiedOperation]) -> str:
    lines = ""
    for op in sorted(operations, key=lambda o: o.method):
        lines += f"- [{op.method}] `{path}`\n"
        for field in sorted(op.changed_fields):
            lines += f"  - {field}\n"
    return lines


def _impact_lines(path: str, impact: ComponentImpact) -> str:
    lines = ""
    for method in sorted(impact.methods):
        lines += f"- [{method}] `{path}`\n"
        usage = impact.usage.get(method, {})
        for component in sorted(impact.components):
            locations = sorted(usage.get(component, []))
            if locations:
                lines += f"  - `{component}` modified in {', '.join(locations)}\n"
            else:
                lines += f"  - `{component}` modified\n"
    return lines


def _modified_section(change_set: ChangeSet) -> str:
    section = "## Modified\n"
    paths = set(change_set.modified) | set(change_set.component_impact)
    for path in sorted(paths):
        if path in change_set.modified:
            # Direct edits hide the component detail for the same path
            section += _direct_lines(path, change_set.modified[path])
        else:
            section += _impact_lines(path, change_set.component_impact[path])
    return section


def _renamed_section(change_set: ChangeSet) -> str:
    section = "## Renamed\n"
    for old_path in sorted(change_set.renamed):
        rename = change_set.renamed[old_path]
        section += f"- {_method_tags(rename.methods)} `{old_path}` → `{rename.new_path}`\n"
    return section


def render_markdown(change_set: ChangeSet, title: str = DEFAULT_TITLE) -> str:
    """Render a ChangeSet as Markdown release notes."""
    sections = []
    if change_set.added:
        sections.append(_path_list_section("Added", change_set.added))
    if change_set.modified or change_set.component_impact:
        sections.append(_modified_section(change_set))
    if change_set.removed:
        sections.append(_path_list_section("Removed", change_set.removed))
    if change_set.renamed:
        sections.append(_renamed_section(change_set))

    sections.sort(key=lambda s: s.split("\n", 1)[0])

    return f"# {title}\n\n" + "\n".join(sections)
