"""Infer response schemas from example responses.

Example responses use placeholder tags (see ``placeholders``) in place of
values. Inference walks the example tree and mirrors its shape:

- a tag becomes a primitive schema,
- a sequence becomes an array whose items follow the first element,
- ``{"<string>": X}`` becomes a map with ``additionalProperties`` of X,
- any other mapping becomes an object with one property per key.

A shape that cannot be classified yields None and the caller substitutes
an unconstrained schema at that position.
"""

import logging

from rpc_api_docs.errors import Diagnostic, report
from rpc_api_docs.openapi.models import Schema, SchemaType
from rpc_api_docs.openapi.placeholders import WILDCARD_KEY, TagType
from rpc_api_docs.openapi.values import ExampleValue, MappingValue, ScalarValue, SequenceValue

logger = logging.getLogger(__name__)

# Accepts any value.
UNCONSTRAINED = Schema()


def infer_schema(value: ExampleValue) -> Schema | None:
    """Return the schema described by ``value``, or None if it has no known shape."""
    if isinstance(value, ScalarValue):
        return _infer_scalar(value)
    if isinstance(value, SequenceValue):
        return _infer_sequence(value)
    return _infer_mapping(value)


def _infer_scalar(value: ScalarValue) -> Schema | None:
    if value.tag is None:
        report(
            logger,
            Diagnostic.UNCLASSIFIABLE_RESPONSE_SHAPE,
            "Response example holds a literal instead of a type tag: %r",
            value.value,
        )
        return None

    tag_type = TagType.from_tag(value.tag)
    if tag_type is TagType.UNKNOWN:
        report(logger, Diagnostic.UNRECOGNIZED_RESPONSE_TAG, "Unsupported type for response: %s", value.tag)
        return None
    return Schema(type=tag_type.schema_type)


def _infer_sequence(value: SequenceValue) -> Schema:
    item = infer_schema(value.first) if value.first is not None else None
    if item is None:
        report(logger, Diagnostic.UNCLASSIFIABLE_RESPONSE_SHAPE, "Couldn't determine item type of array")
        item = UNCONSTRAINED
    return Schema(type=SchemaType.ARRAY, items=item)


def _infer_mapping(value: MappingValue) -> Schema:
    if len(value) == 1 and value.entries[0][0] == WILDCARD_KEY:
        item = infer_schema(value.entries[0][1])
        if item is None:
            report(logger, Diagnostic.UNCLASSIFIABLE_RESPONSE_SHAPE, "Couldn't determine item type of object")
            item = UNCONSTRAINED
        return Schema(type=SchemaType.OBJECT, additional_properties=item)

    properties = {}
    for key, child in value.entries:
        schema = infer_schema(child)
        properties[key] = UNCONSTRAINED if schema is None else schema
    return Schema(type=SchemaType.OBJECT, properties=properties)
