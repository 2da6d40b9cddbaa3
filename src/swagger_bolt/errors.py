"""Errors raised by the conversion entry points."""

INVALID_DOCUMENT_MESSAGE = "Body must contain a valid OpenAPI/Swagger JSON document."


class InvalidDocumentError(ValueError):
    """The input is not a recognised OpenAPI 3.x / Swagger 2.0 document.

    The message is always the fixed user-facing text, whatever part of the
    document shape was wrong.
    """

    def __init__(self, message: str = INVALID_DOCUMENT_MESSAGE):
        super().__init__(message)
