import json
import logging

import pytest
import yaml

from rpc_api_docs.catalogue.base import Endpoint
from rpc_api_docs.openapi.assembler import OpenApiGenerator, render_document
from rpc_api_docs.openapi.inference import infer_schema
from rpc_api_docs.openapi.placeholders import PLACEHOLDER_TAGS, TagType
from rpc_api_docs.openapi.values import MappingValue, ScalarValue, SequenceValue, from_json


def _infer(text: str) -> dict | None:
    schema = infer_schema(from_json(json.loads(text)))
    return None if schema is None else schema.to_dict()


class TestFromJson:
    def test_tree(self):
        value = from_json({"Keys": ["<string>"], "Count": 1})
        assert isinstance(value, MappingValue)
        assert value.entries[0][0] == "Keys"
        assert isinstance(value.entries[0][1], SequenceValue)
        assert value.entries[1][1] == ScalarValue(1)

    def test_scalar_tag(self):
        assert from_json("<bool>").tag == "<bool>"
        assert from_json(3).tag is None


class TestPlaceholders:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("<bool>", "boolean"),
            ("<int>", "integer"),
            ("<uint64>", "integer"),
            ("<duration-ns>", "integer"),
            ("<timestamp>", "integer"),
            ("<float32>", "number"),
            ("<float64>", "number"),
            ("<string>", "string"),
            ("<peer-id>", "string"),
            ("peer-id", "string"),
            ("<cid-string>", "string"),
            ("<multiaddr-string>", "string"),
            ("<array>", "array"),
            ("<object>", "object"),
        ],
    )
    def test_tag_types(self, tag, expected):
        assert infer_schema(ScalarValue(tag)).to_dict() == {"type": expected}

    def test_every_known_tag_is_deterministic(self):
        for tag in PLACEHOLDER_TAGS:
            first = infer_schema(ScalarValue(tag))
            assert first is not None
            assert first == infer_schema(ScalarValue(tag))

    def test_unknown_tag(self, caplog):
        assert TagType.from_tag("<complex128>") is TagType.UNKNOWN
        with caplog.at_level(logging.WARNING):
            assert infer_schema(ScalarValue("<complex128>")) is None
        assert caplog.records[0].diagnostic == "UnrecognizedResponseTag"

    def test_literal_is_unclassifiable(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert infer_schema(ScalarValue(42)) is None
        assert caplog.records[0].diagnostic == "UnclassifiableResponseShape"


class TestSequences:
    def test_items_from_first_element(self):
        assert _infer('["<int>"]') == {"type": "array", "items": {"type": "integer"}}

    def test_only_first_element_counts(self):
        assert _infer('["<int>", "<string>"]') == {"type": "array", "items": {"type": "integer"}}

    def test_empty_sequence_is_unconstrained(self):
        assert _infer("[]") == {"type": "array", "items": {}}

    def test_unknown_item_is_unconstrained(self):
        assert _infer('["<nope>"]') == {"type": "array", "items": {}}

    def test_nested_sequences(self):
        assert _infer('[["<bool>"]]') == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "boolean"}},
        }


class TestMappings:
    def test_wildcard_map(self):
        assert _infer('{"<string>": "<bool>"}') == {
            "type": "object",
            "additionalProperties": {"type": "boolean"},
        }

    def test_wildcard_map_of_objects(self):
        assert _infer('{"<string>": {"Type": "<int>"}}') == {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {"Type": {"type": "integer"}},
            },
        }

    def test_wildcard_with_unknown_value(self):
        assert _infer('{"<string>": "<what>"}') == {"type": "object", "additionalProperties": {}}

    def test_wildcard_key_among_others_is_a_property(self):
        assert _infer('{"<string>": "<int>", "Name": "<string>"}') == {
            "type": "object",
            "properties": {"<string>": {"type": "integer"}, "Name": {"type": "string"}},
        }

    def test_fixed_fields(self):
        result = _infer('{"ID": "<peer-id>", "Addresses": ["<multiaddr-string>"], "Size": "<uint64>"}')
        assert result == {
            "type": "object",
            "properties": {
                "ID": {"type": "string"},
                "Addresses": {"type": "array", "items": {"type": "string"}},
                "Size": {"type": "integer"},
            },
        }

    def test_unknown_property_degrades_locally(self):
        assert _infer('{"Name": "<string>", "Extra": "<mystery>"}') == {
            "type": "object",
            "properties": {"Name": {"type": "string"}, "Extra": {}},
        }

    def test_empty_mapping(self):
        assert _infer("{}") == {"type": "object", "properties": {}}

    def test_property_order_is_preserved(self):
        result = _infer('{"b": "<int>", "a": "<int>", "c": "<int>"}')
        assert list(result["properties"]) == ["b", "a", "c"]


class TestReinference:
    """Emitted examples fed back through generation yield the same schema."""

    def _emitted(self, response: str, fmt: str) -> dict:
        ep = Endpoint(name="/api/v0/x", response=response)
        doc = OpenApiGenerator().generate([ep])
        data = render_document(doc, fmt)
        loaded = json.loads(data) if fmt == "json" else yaml.safe_load(data)
        return loaded["paths"]["/api/v0/x"]["post"]["responses"]["200"]["content"]["application/json"]

    @pytest.mark.parametrize("fmt", ["yaml", "json"])
    @pytest.mark.parametrize(
        "response",
        [
            '{"Keys": {"<string>": {"Type": "<string>"}}}',
            '{"Peers": [{"Addr": "<multiaddr-string>", "Latency": "<duration-ns>"}]}',
            '{"Objects": {"<string>": [{"Hash": "<cid-string>", "Size": "<uint64>"}]}, "Ok": "<bool>"}',
        ],
    )
    def test_emitted_example_reinfers_same_schema(self, response, fmt):
        first = self._emitted(response, fmt)
        second = self._emitted(json.dumps(first["example"]), fmt)

        assert "schema" in first
        assert second["schema"] == first["schema"]
        assert second["example"] == first["example"]
