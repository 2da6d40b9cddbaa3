"""Schema-driven example synthesis.

Builds a representative value for a JSON Schema fragment, resolving internal
``$ref`` pointers against the whole document. Cyclic references collapse to
``{}`` at the point where the cycle closes.
"""

from enum import Enum

from swagger_bolt.log import get_logger

logger = get_logger(__name__)

DATE_TIME_EXAMPLE = "2023-01-01T00:00:00Z"
UUID_EXAMPLE = "123e4567-e89b-12d3-a456-426614174000"
STRING_EXAMPLE = "string"

# Levels of array/object/$ref nesting expanded before collapsing to {}.
MAX_DEPTH = 64


class SchemaKind(str, Enum):
    """Every shape a schema fragment can take during synthesis."""

    REF = "ref"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    UNTYPED = "untyped"
    INVALID = "invalid"


_TYPED_KINDS = {
    "string": SchemaKind.STRING,
    "integer": SchemaKind.INTEGER,
    "number": SchemaKind.NUMBER,
    "boolean": SchemaKind.BOOLEAN,
    "array": SchemaKind.ARRAY,
    "object": SchemaKind.OBJECT,
}


def classify_schema(schema) -> SchemaKind:
    """Map a raw fragment onto a SchemaKind; ``$ref`` wins over ``type``."""
    if not isinstance(schema, dict):
        return SchemaKind.INVALID
    if "$ref" in schema:
        return SchemaKind.REF
    schema_type = schema.get("type")
    if isinstance(schema_type, str):
        return _TYPED_KINDS.get(schema_type, SchemaKind.UNTYPED)
    return SchemaKind.UNTYPED


def resolve_ref(ref, doc):
    """Follow an internal ``#/a/b/c`` pointer through the document.

    Returns None for external refs or when any segment is missing.
    """
    if not isinstance(ref, str) or not ref.startswith("#/"):
        return None

    current = doc
    for segment in ref[2:].split("/"):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return None
    return current


def generate_example_from_schema(schema, doc, visited: set[str] | None = None):
    """Synthesize an example value for ``schema``.

    ``visited`` holds the refs currently being expanded on this branch. A ref
    is added before descending and removed on the way back, so sibling
    branches may expand the same ref again. Nesting deeper than
    ``MAX_DEPTH`` (inline or through refs) collapses to ``{}``. Neither
    ``schema`` nor ``doc`` is mutated.
    """
    if visited is None:
        visited = set()
    return _generate(schema, doc, visited, 0)


def _generate(schema, doc, visited: set[str], depth: int):
    if depth > MAX_DEPTH:
        logger.debug("Schema nesting exceeds %d levels; using {}", MAX_DEPTH)
        return {}

    kind = classify_schema(schema)

    if kind is SchemaKind.REF:
        return _example_from_ref(schema["$ref"], doc, visited, depth)
    if kind is SchemaKind.STRING:
        return _string_example(schema.get("format"))
    if kind in (SchemaKind.INTEGER, SchemaKind.NUMBER):
        return 0
    if kind is SchemaKind.BOOLEAN:
        return False
    if kind is SchemaKind.ARRAY:
        if schema.get("items") is not None:
            return [_generate(schema["items"], doc, visited, depth + 1)]
        return []
    if kind is SchemaKind.OBJECT:
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            return {}
        return {
            name: _generate(prop_schema, doc, visited, depth + 1)
            for name, prop_schema in properties.items()
        }
    # UNTYPED / INVALID
    return {}


def _example_from_ref(ref, doc, visited: set[str], depth: int):
    resolved = resolve_ref(ref, doc)
    if resolved is None:
        logger.debug("Unresolvable $ref %s; using {}", ref)
        return {}
    if ref in visited:
        logger.debug("Cycle on %s; using {}", ref)
        return {}

    visited.add(ref)
    try:
        return _generate(resolved, doc, visited, depth + 1)
    finally:
        visited.discard(ref)


def _string_example(fmt) -> str:
    if fmt == "date-time":
        return DATE_TIME_EXAMPLE
    if fmt == "uuid":
        return UUID_EXAMPLE
    return STRING_EXAMPLE
