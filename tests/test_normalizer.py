from pathlib import Path

import pytest

from swagger_bolt.errors import INVALID_DOCUMENT_MESSAGE, InvalidDocumentError
from swagger_bolt.parser.base import Dialect
from swagger_bolt.parser.detect import load_document
from swagger_bolt.parser.normalize import derive_base_url, enumerate_operations, normalize_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestDeriveBaseUrl:
    def test_servers_trailing_slash_stripped(self):
        doc = {"openapi": "3.0.0", "servers": [{"url": "https://x.test/v1/"}], "paths": {}}
        assert derive_base_url(doc) == "https://x.test/v1"

    def test_only_one_trailing_slash_stripped(self):
        doc = {"servers": [{"url": "https://x.test//"}]}
        assert derive_base_url(doc) == "https://x.test/"

    def test_first_server_only(self):
        doc = {"servers": [{"url": "https://a.test"}, {"url": "https://b.test"}]}
        assert derive_base_url(doc) == "https://a.test"

    def test_relative_server_url(self):
        assert derive_base_url({"servers": [{"url": "/api/"}]}) == "/api"

    def test_swagger_host_defaults_to_https(self):
        doc = {"swagger": "2.0", "host": "x.test", "basePath": "/v1/", "paths": {}}
        assert derive_base_url(doc) == "https://x.test/v1"

    def test_swagger_first_scheme(self):
        doc = {"host": "x.test", "schemes": ["http", "https"]}
        assert derive_base_url(doc) == "http://x.test"

    def test_empty_servers_falls_back_to_host(self):
        doc = {"servers": [], "host": "x.test", "basePath": "/v2"}
        assert derive_base_url(doc) == "https://x.test/v2"

    def test_nothing_to_derive(self):
        assert derive_base_url({"openapi": "3.0.0", "paths": {}}) == ""


class TestEnumerateOperations:
    def test_declaration_order(self):
        doc = load_document(FIXTURES / "petstore.json")
        ops = [(op.method, op.path) for op in enumerate_operations(doc)]
        assert ops == [
            ("GET", "/pets"),
            ("POST", "/pets"),
            ("GET", "/pets/{petId}"),
            ("DELETE", "/pets/{petId}"),
            ("HEAD", "/health"),
        ]

    def test_non_verb_keys_skipped(self):
        doc = {
            "paths": {
                "/a": {
                    "$ref": "#/x",
                    "parameters": [],
                    "summary": "path level",
                    "trace": {"responses": {}},
                    "Options": {"responses": {}},
                }
            }
        }
        ops = enumerate_operations(doc)
        assert [(op.method, op.path) for op in ops] == [("OPTIONS", "/a")]

    def test_operation_body_kept(self):
        doc = {"paths": {"/a": {"put": {"operationId": "upd", "responses": {}}}}}
        [op] = enumerate_operations(doc)
        assert op.operation["operationId"] == "upd"

    def test_empty_paths(self):
        assert enumerate_operations({"paths": {}}) == []


class TestNormalizeDocument:
    def test_openapi(self):
        normalized = normalize_document(load_document(FIXTURES / "petstore.json"))
        assert normalized.dialect is Dialect.OPENAPI3
        assert normalized.base_url == "https://api.example.com/v1"
        assert len(normalized.operations) == 5

    def test_swagger(self):
        normalized = normalize_document(load_document(FIXTURES / "swagger2.json"))
        assert normalized.dialect is Dialect.SWAGGER2
        assert normalized.base_url == "http://legacy.example.com/api"
        assert len(normalized.operations) == 3

    def test_invalid_document_raises(self):
        with pytest.raises(InvalidDocumentError) as exc_info:
            normalize_document({"info": {}, "paths": {}})
        assert str(exc_info.value) == INVALID_DOCUMENT_MESSAGE
