"""Dialect detection and document loading."""

import json
from pathlib import Path

import yaml

from .base import Dialect


def detect_dialect(doc) -> Dialect | None:
    """Return the document's dialect, or None when it is not a valid document.

    A document is OpenAPI 3.x when ``openapi`` is a string starting with "3."
    and Swagger 2.0 when ``swagger`` equals "2.0". Either way ``paths`` must
    be a mapping.
    """
    if not isinstance(doc, dict):
        return None
    if not isinstance(doc.get("paths"), dict):
        return None

    version = doc.get("openapi")
    if isinstance(version, str) and version.startswith("3."):
        return Dialect.OPENAPI3
    if doc.get("swagger") == "2.0":
        return Dialect.SWAGGER2
    return None


def is_valid_document(doc) -> bool:
    """Advisory predicate callers check before converting a document."""
    return detect_dialect(doc) is not None


def load_document(file_path: Path):
    """Load a JSON document from disk, falling back to YAML.

    Raises yaml.YAMLError when the text is neither JSON nor YAML.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)
