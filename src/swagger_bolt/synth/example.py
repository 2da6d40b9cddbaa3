"""Example response selection for a single operation.

Strategies are tried in a fixed order and the first that applies wins:

1. ``example`` on the media type
2. the first ``examples`` entry carrying a ``value``
3. ``example`` on the media type's schema (or the Swagger 2.0 inline schema)
4. synthesis from that schema
5. ``{}`` when there is nothing to work from
"""

from swagger_bolt.log import get_logger
from swagger_bolt.parser.base import ExampleResult, ExampleStrategy

from .schema import generate_example_from_schema, resolve_ref

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"
JSON_SUFFIX = "+json"
PREFERRED_STATUSES = ("200", "201")

_MISSING = object()


def choose_success_response(operation: dict) -> str | None:
    """Pick the representative 2xx status: 200, then 201, then the first 2xx."""
    responses = operation.get("responses")
    if not isinstance(responses, dict):
        return None

    keys = [str(key) for key in responses]
    for preferred in PREFERRED_STATUSES:
        if preferred in keys:
            return preferred
    for key in keys:
        if key.startswith("2"):
            return key
    return None


def get_response(operation: dict, status: str):
    """Look up a response by its stringified status key."""
    responses = operation.get("responses") or {}
    for key, response in responses.items():
        if str(key) == status:
            return response
    return None


def find_json_media_type(content: dict) -> str | None:
    """Return the ``application/json`` key when it holds a media type object,
    else the first ``+json`` key."""
    if isinstance(content.get(JSON_MEDIA_TYPE), dict):
        return JSON_MEDIA_TYPE
    for media_type in content:
        if isinstance(media_type, str) and media_type.endswith(JSON_SUFFIX):
            return media_type
    return None


def plan_example(response, doc: dict, status: str = "") -> tuple[ExampleResult, object]:
    """Decide which strategy produces the example, without synthesizing it.

    Returns the result (its ``value`` is only filled in for literal examples)
    and the schema to synthesize from when the strategy is
    ``generatedFromSchema``.
    """
    no_content = ExampleResult(
        value={},
        strategy=ExampleStrategy.EMPTY_FOR_NO_CONTENT,
        issues=[f"No JSON content on {status}; using {{}}"],
    )
    if not isinstance(response, dict):
        return no_content, None

    content = response.get("content")
    if isinstance(content, dict):
        media_type = find_json_media_type(content)
        if media_type is None:
            return no_content, None
        media = content[media_type]
        if not isinstance(media, dict):
            media = {}

        if "example" in media:
            return _literal(media["example"], ExampleStrategy.FROM_CONTENT_EXAMPLE, media_type), None
        first = _first_examples_value(media.get("examples"))
        if first is not _MISSING:
            return _literal(first, ExampleStrategy.FROM_CONTENT_EXAMPLE, media_type), None
        schema = media.get("schema")
    elif response.get("schema") is not None:
        # Swagger 2.0 inline schema
        media_type = JSON_MEDIA_TYPE
        schema = response["schema"]
    else:
        return no_content, None

    if schema is None:
        return ExampleResult(value={}, strategy=ExampleStrategy.EMPTY_FOR_NO_CONTENT, media_type=media_type), None
    if isinstance(schema, dict) and "example" in schema:
        return _literal(schema["example"], ExampleStrategy.FROM_SCHEMA_EXAMPLE, media_type), None

    issues = []
    if isinstance(schema, dict) and resolve_ref(schema.get("$ref"), doc) is not None:
        issues.append(f"Resolved $ref {schema['$ref']}")
    result = ExampleResult(
        strategy=ExampleStrategy.GENERATED_FROM_SCHEMA,
        media_type=media_type,
        issues=issues,
    )
    return result, schema


def example_value(response, doc: dict, status: str = "") -> ExampleResult:
    """Produce the example value for a response, with its provenance."""
    result, schema = plan_example(response, doc, status)
    if result.strategy is ExampleStrategy.GENERATED_FROM_SCHEMA:
        value = generate_example_from_schema(schema, doc, set())
        result = result.model_copy(update={"value": value})
    return result


def operation_example(operation: dict, doc: dict) -> tuple[str, ExampleResult]:
    """Example for an operation's success response; ``("", {})`` when it has none."""
    status = choose_success_response(operation)
    if status is None:
        logger.debug("No 2xx response; using {}")
        return "", ExampleResult(value={}, strategy=ExampleStrategy.EMPTY_FOR_NO_CONTENT)
    return status, example_value(get_response(operation, status), doc, status)


def _literal(value, strategy: ExampleStrategy, media_type: str) -> ExampleResult:
    return ExampleResult(value=value, strategy=strategy, media_type=media_type)


def _first_examples_value(examples):
    if not isinstance(examples, dict):
        return _MISSING
    for example in examples.values():
        if isinstance(example, dict) and "value" in example:
            return example["value"]
    return _MISSING
