"""Data models shared by the normalizer, the synthesizer and the renderers.

Every model is a read-only view derived from one input document for the
duration of a single conversion call.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Dialect(str, Enum):
    """Document shape, decided once by the normalizer."""

    OPENAPI3 = "openapi3"
    SWAGGER2 = "swagger2"


class ExampleStrategy(str, Enum):
    """How an example response value was produced."""

    FROM_CONTENT_EXAMPLE = "fromContentExample"
    FROM_SCHEMA_EXAMPLE = "fromSchemaExample"
    GENERATED_FROM_SCHEMA = "generatedFromSchema"
    EMPTY_FOR_NO_CONTENT = "emptyForNoContent"


class EndpointOperation(BaseModel):
    """A single (method, path, operation) triple."""

    method: str  # GET / POST / PUT / PATCH / DELETE / OPTIONS / HEAD
    path: str  # /pets/{petId}
    operation: dict


class NormalizedDocument(BaseModel):
    """Dialect-free view of a document: base URL plus ordered operations."""

    dialect: Dialect
    base_url: str
    operations: list[EndpointOperation]


class ExampleResult(BaseModel):
    """Outcome of example synthesis for one response."""

    value: Any = None
    strategy: ExampleStrategy
    media_type: str = ""
    issues: list[str] = []


class DiagnosticOperation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    method: str
    path: str
    title: str
    chosen_status: str
    media_type: str
    example_strategy: ExampleStrategy
    issues: list[str] = []


class DiagnosticReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    servers: list[str] = []
    operations: list[DiagnosticOperation] = []
    global_issues: list[str] = []

    def to_json(self) -> str:
        """Serialise with camelCase keys and 2-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)
