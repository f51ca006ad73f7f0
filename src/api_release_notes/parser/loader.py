"""OpenAPI document loader.

Reads JSON or YAML API descriptions into plain dict trees for the diff engine.
"""

import json
import logging
from pathlib import Path

import yaml

from .errors import DocumentLoadError, InvalidDocumentError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(file_path: Path) -> str:
    """Detect whether a document is JSON or YAML.

    Returns: 'json' or 'yaml'.
    """
    suffix = file_path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    text = file_path.read_text(encoding="utf-8")
    try:
        json.loads(text)
        return "json"
    except (json.JSONDecodeError, ValueError):
        return "yaml"


def load_document(file_path: Path) -> dict:
    """Load an API description file into a dict."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(file_path, f"cannot read file: {e}") from e

    fmt = detect_format(file_path)
    logger.debug("Loading %s as %s", file_path, fmt)

    if not text.strip():
        return {}

    try:
        if fmt == "json":
            doc = json.loads(text)
        else:
            doc = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(file_path, f"invalid {fmt.upper()}: {e}") from e

    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise InvalidDocumentError(file_path, f"expected a mapping at the root, got {type(doc).__name__}")

    return doc
