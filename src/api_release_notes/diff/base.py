"""Data models for API change sets.

The diff functions return these models; renderers consume them without
needing the source documents.
"""

from pydantic import BaseModel, Field

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

# Fields compared one by one when an operation changed, in report order.
TRACKED_FIELDS = ("summary", "description", "operationId", "parameters", "requestBody", "responses")

USAGE_LOCATIONS = ("parameters", "requestBody", "responses")

DEFAULT_RENAME_THRESHOLD = 0.7


class DiffOptions(BaseModel):
    """Switches for the diff engine."""

    detect_renames: bool = True
    rename_threshold: float = Field(default=DEFAULT_RENAME_THRESHOLD, ge=0.0, le=1.0)
    exact_usage_match: bool = False  # match pointers by final segment instead of substring


class ModifiedOperation(BaseModel):
    """An operation whose own definition changed."""

    method: str  # GET / POST / ...
    changed_fields: list[str]


class ComponentImpact(BaseModel):
    """Operations under one path that reference a changed component."""

    methods: set[str] = set()
    components: set[str] = set()
    usage: dict[str, dict[str, list[str]]] = {}  # {method: {component: [location, ...]}}


class Rename(BaseModel):
    """A removed path paired with the added path that replaces it."""

    new_path: str
    methods: set[str]


class ChangeSet(BaseModel):
    """Everything that changed between two API descriptions."""

    added: dict[str, set[str]] = {}
    removed: dict[str, set[str]] = {}
    modified: dict[str, list[ModifiedOperation]] = {}
    changed_components: set[str] = set()
    component_impact: dict[str, ComponentImpact] = {}
    renamed: dict[str, Rename] = {}

    @property
    def is_empty(self) -> bool:
        return not (
            self.added
            or self.removed
            or self.modified
            or self.changed_components
            or self.component_impact
            or self.renamed
        )
