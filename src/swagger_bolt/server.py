"""HTTP transport for the converter.

POST a JSON OpenAPI/Swagger document, get descriptor text (or a diagnostic
report) back. Every failure answers 400 with the same fixed message; the
cause is only logged.
"""

import json

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from swagger_bolt.config import Settings
from swagger_bolt.errors import INVALID_DOCUMENT_MESSAGE, InvalidDocumentError
from swagger_bolt.log import get_logger
from swagger_bolt.render.descriptor import convert_document
from swagger_bolt.render.diagnostic import diagnose_document

logger = get_logger(__name__)

SERVICE_NAME = "swagger-bolt"


class PayloadTooLargeError(ValueError):
    pass


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title=SERVICE_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def read_document(request: Request):
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > settings.max_body_bytes:
            raise PayloadTooLargeError(f"declared body of {declared} bytes")

        body = await request.body()
        if len(body) > settings.max_body_bytes:
            raise PayloadTooLargeError(f"body of {len(body)} bytes")

        doc = json.loads(body) if body.strip() else None
        if not doc:
            raise InvalidDocumentError()
        return doc

    @app.post("/api/swagger-bolt")
    async def swagger_bolt(request: Request):
        try:
            doc = await read_document(request)
            text = await run_in_threadpool(convert_document, doc)
        except Exception as exc:
            logger.warning("Rejected document: %s", exc)
            return _bad_request()
        return PlainTextResponse(text)

    @app.post("/api/swagger-bolt/diagnostics")
    async def swagger_bolt_diagnostics(request: Request):
        try:
            doc = await read_document(request)
            report = await run_in_threadpool(diagnose_document, doc)
        except Exception as exc:
            logger.warning("Rejected document: %s", exc)
            return _bad_request()
        return JSONResponse(report.model_dump(mode="json", by_alias=True))

    @app.get("/health")
    def health():
        return {"status": "OK", "service": SERVICE_NAME}

    return app


def _bad_request() -> PlainTextResponse:
    return PlainTextResponse(INVALID_DOCUMENT_MESSAGE, status_code=400)
