"""Heuristic rename detection.

A removed path and an added path with the same methods and a similar shape are
reported as one renamed path instead of an unrelated add and remove. The
heuristic is best effort: the first qualifying added path wins.
"""

import logging
from typing import NamedTuple

from .base import DEFAULT_RENAME_THRESHOLD, Rename

logger = logging.getLogger(__name__)


class RenameResult(NamedTuple):
    renamed: dict[str, Rename]
    added: dict[str, set[str]]
    removed: dict[str, set[str]]


def path_segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def path_similarity(path1: str, path2: str) -> float:
    """Share of positionally equal segments between two paths.

    Paths whose segment counts differ by more than one score 0.
    """
    segments1 = path_segments(path1)
    segments2 = path_segments(path2)

    if abs(len(segments1) - len(segments2)) > 1:
        return 0.0

    max_length = max(len(segments1), len(segments2))
    if max_length == 0:
        return 0.0

    matches = sum(1 for a, b in zip(segments1, segments2) if a == b)
    return matches / max_length


def detect_renames(
    added: dict[str, set[str]],
    removed: dict[str, set[str]],
    threshold: float = DEFAULT_RENAME_THRESHOLD,
) -> RenameResult:
    """Pair removed paths with added paths that look like their new name."""
    renamed: dict[str, Rename] = {}
    remaining_added = dict(added)
    remaining_removed = dict(removed)

    for removed_path, removed_methods in removed.items():
        for added_path, added_methods in remaining_added.items():
            if set(added_methods) != set(removed_methods):
                continue
            if path_similarity(removed_path, added_path) < threshold:
                continue

            logger.debug("Detected rename: %s -> %s", removed_path, added_path)
            renamed[removed_path] = Rename(new_path=added_path, methods=set(added_methods))
            del remaining_added[added_path]
            del remaining_removed[removed_path]
            break

    return RenameResult(renamed=renamed, added=remaining_added, removed=remaining_removed)
