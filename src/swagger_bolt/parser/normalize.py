"""OpenAPI 3.x / Swagger 2.0 document normalizer.

Turns either dialect into a NormalizedDocument: a base URL plus the ordered
list of operations. Nothing downstream branches on the dialect again.
"""

from swagger_bolt.errors import InvalidDocumentError
from swagger_bolt.log import get_logger

from .base import EndpointOperation, NormalizedDocument
from .detect import detect_dialect

logger = get_logger(__name__)

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "options", "head")


def derive_base_url(doc: dict) -> str:
    """Return the effective base URL, without a trailing slash.

    Only the first server (OpenAPI 3.x) or the first scheme (Swagger 2.0)
    is ever consulted.
    """
    servers = doc.get("servers")
    if isinstance(servers, list) and servers:
        first = servers[0]
        url = (first.get("url") or "") if isinstance(first, dict) else ""
        return _strip_trailing_slash(str(url))

    host = doc.get("host")
    if host:
        schemes = doc.get("schemes")
        scheme = schemes[0] if isinstance(schemes, list) and schemes and schemes[0] else "https"
        base_path = _strip_trailing_slash(str(doc.get("basePath") or ""))
        return f"{scheme}://{host}{base_path}"

    return ""


def enumerate_operations(doc: dict) -> list[EndpointOperation]:
    """List operations in declaration order, paths-major then methods-minor."""
    operations = []
    paths = doc.get("paths") or {}

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            logger.debug("Skipping path %s: path item is not a mapping", path)
            continue
        for method, operation in path_item.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                logger.debug("Skipping non-operation key %r under %s", method, path)
                continue
            if not isinstance(operation, dict):
                operation = {}
            operations.append(
                EndpointOperation(method=method.upper(), path=str(path), operation=operation)
            )

    return operations


def normalize_document(doc) -> NormalizedDocument:
    """Decide the dialect once and build the dialect-free view.

    Raises InvalidDocumentError when the document is neither dialect.
    """
    dialect = detect_dialect(doc)
    if dialect is None:
        raise InvalidDocumentError()

    return NormalizedDocument(
        dialect=dialect,
        base_url=derive_base_url(doc),
        operations=enumerate_operations(doc),
    )


def _strip_trailing_slash(value: str) -> str:
    return value[:-1] if value.endswith("/") else value
