"""Structured diagnostics: which status, media type and strategy each
operation's example would come from, without synthesizing the example."""

from swagger_bolt.parser.base import (
    DiagnosticOperation,
    DiagnosticReport,
    EndpointOperation,
    ExampleStrategy,
)
from swagger_bolt.parser.normalize import normalize_document
from swagger_bolt.synth.example import choose_success_response, get_response, plan_example

from .descriptor import operation_title


def diagnose_operation(endpoint: EndpointOperation, doc: dict) -> DiagnosticOperation:
    operation = endpoint.operation
    status = choose_success_response(operation)

    if status is None:
        strategy, media_type, issues = ExampleStrategy.EMPTY_FOR_NO_CONTENT, "", []
    else:
        plan, _ = plan_example(get_response(operation, status), doc, status)
        strategy, media_type, issues = plan.strategy, plan.media_type, plan.issues

    return DiagnosticOperation(
        method=endpoint.method,
        path=endpoint.path,
        title=operation_title(operation, endpoint.method, endpoint.path),
        chosen_status=status or "",
        media_type=media_type,
        example_strategy=strategy,
        issues=list(issues),
    )


def diagnose_document(doc) -> DiagnosticReport:
    """Build the diagnostic report for a parsed document.

    Raises InvalidDocumentError when the document is neither dialect.
    """
    normalized = normalize_document(doc)
    return DiagnosticReport(
        servers=[normalized.base_url] if normalized.base_url else [],
        operations=[diagnose_operation(endpoint, doc) for endpoint in normalized.operations],
        global_issues=[],
    )
