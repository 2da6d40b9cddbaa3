"""Plain-text descriptor rendering.

Each operation becomes a four-line block followed by its tab-indented
example response:

    API: List pets
    Endpoint: https://api.example.com/v1/pets
    Method: GET
    Response:
        { ... }
"""

import json

from swagger_bolt.parser.base import EndpointOperation
from swagger_bolt.parser.normalize import normalize_document
from swagger_bolt.synth.example import operation_example

BLOCK_SEPARATOR = "\n\n"


def operation_title(operation: dict, method: str, path: str) -> str:
    """Trimmed summary, else operationId, else "METHOD path"."""
    summary = operation.get("summary")
    if isinstance(summary, str) and summary.strip():
        return summary.strip()
    if operation.get("operationId"):
        return str(operation["operationId"])
    return f"{method} {path}"


def format_example(value) -> str:
    """Pretty-print as 2-space JSON with every line prefixed by a tab.

    Integral floats are written without a fraction (``1.0`` -> ``1``).
    """
    text = json.dumps(_integral_floats_as_int(value), indent=2, ensure_ascii=False, default=str)
    return "\n".join(f"\t{line}" for line in text.split("\n"))


def render_descriptor(endpoint: EndpointOperation, base_url: str, doc: dict) -> str:
    title = operation_title(endpoint.operation, endpoint.method, endpoint.path)
    url = f"{base_url}{endpoint.path}" if base_url else endpoint.path
    _, result = operation_example(endpoint.operation, doc)

    return (
        f"API: {title}\n"
        f"Endpoint: {url}\n"
        f"Method: {endpoint.method}\n"
        f"Response:\n"
        f"{format_example(result.value)}"
    )


def convert_document(doc) -> str:
    """Convert a parsed OpenAPI/Swagger document into descriptor text.

    Raises InvalidDocumentError when the document is neither dialect.
    """
    normalized = normalize_document(doc)
    blocks = [
        render_descriptor(endpoint, normalized.base_url, doc)
        for endpoint in normalized.operations
    ]
    return BLOCK_SEPARATOR.join(blocks)


def _integral_floats_as_int(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_int(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_int(item) for item in value]
    return value
