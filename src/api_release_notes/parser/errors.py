"""Errors raised while loading API description documents."""

from pathlib import Path


class DocumentError(Exception):
    """Base exception for document loading errors."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentLoadError(DocumentError):
    """Raised when a document cannot be read or parsed."""


class InvalidDocumentError(DocumentError):
    """Raised when a parsed document is not a mapping at its root."""
