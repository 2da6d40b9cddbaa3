from pathlib import Path

import pytest
import yaml

from swagger_bolt.parser.base import Dialect
from swagger_bolt.parser.detect import detect_dialect, is_valid_document, load_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectDialect:
    def test_openapi_3(self):
        assert detect_dialect({"openapi": "3.0.3", "paths": {}}) is Dialect.OPENAPI3

    def test_openapi_31(self):
        assert detect_dialect({"openapi": "3.1.0", "paths": {}}) is Dialect.OPENAPI3

    def test_swagger_2(self):
        assert detect_dialect({"swagger": "2.0", "paths": {}}) is Dialect.SWAGGER2

    def test_wrong_openapi_version(self):
        assert detect_dialect({"openapi": "2.0", "paths": {}}) is None

    def test_numeric_version_rejected(self):
        assert detect_dialect({"openapi": 3.0, "paths": {}}) is None
        assert detect_dialect({"swagger": 2.0, "paths": {}}) is None


class TestIsValidDocument:
    @pytest.mark.parametrize(
        "doc",
        [
            {},
            {"paths": {}},
            {"info": {"title": "x"}, "paths": {"/a": {}}},
            {"openapi": "3.0.0"},
            {"openapi": "3.0.0", "paths": None},
            {"openapi": "3.0.0", "paths": []},
            {"swagger": "2.0", "paths": "nope"},
            {"swagger": "1.2", "paths": {}},
            [],
            "openapi",
            None,
        ],
    )
    def test_invalid(self, doc):
        assert is_valid_document(doc) is False

    def test_valid_fixtures(self):
        assert is_valid_document(load_document(FIXTURES / "petstore.json"))
        assert is_valid_document(load_document(FIXTURES / "swagger2.json"))

    def test_missing_discriminators_fixture(self):
        assert not is_valid_document(load_document(FIXTURES / "not_openapi.json"))


class TestLoadDocument:
    def test_load_json(self):
        doc = load_document(FIXTURES / "petstore.json")
        assert doc["openapi"] == "3.0.3"

    def test_load_yaml(self):
        doc = load_document(FIXTURES / "petstore.yaml")
        assert doc["openapi"] == "3.1.0"
        assert "/pets" in doc["paths"]

    def test_unparseable(self, tmp_path):
        f = tmp_path / "broken.json"
        f.write_text('{"openapi": [unclosed', encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_document(f)
