"""Placeholder tags used in example responses.

An example response such as ``{"ID": "<peer-id>", "Size": "<uint64>"}``
names the type of each slot instead of giving a value. The set of tags is
closed; anything else is ``TagType.UNKNOWN``.
"""

from enum import Enum

from rpc_api_docs.openapi.models import SchemaType


class TagType(Enum):
    BOOLEAN = SchemaType.BOOLEAN
    INTEGER = SchemaType.INTEGER
    NUMBER = SchemaType.NUMBER
    STRING = SchemaType.STRING
    ARRAY = SchemaType.ARRAY
    OBJECT = SchemaType.OBJECT
    UNKNOWN = None

    @classmethod
    def from_tag(cls, tag: str) -> "TagType":
        return PLACEHOLDER_TAGS.get(tag, cls.UNKNOWN)

    @property
    def schema_type(self) -> SchemaType | None:
        return self.value


# Tag used as the sole key of a mapping to mean "any string key".
WILDCARD_KEY = "<string>"

PLACEHOLDER_TAGS: dict[str, TagType] = {
    "<bool>": TagType.BOOLEAN,
    "<int>": TagType.INTEGER,
    "<uint>": TagType.INTEGER,
    "<int32>": TagType.INTEGER,
    "<uint32>": TagType.INTEGER,
    "<int64>": TagType.INTEGER,
    "<uint64>": TagType.INTEGER,
    "<duration-ns>": TagType.INTEGER,
    "<timestamp>": TagType.INTEGER,
    "<float32>": TagType.NUMBER,
    "<float64>": TagType.NUMBER,
    "<string>": TagType.STRING,
    "<peer-id>": TagType.STRING,
    "peer-id": TagType.STRING,
    "<cid-string>": TagType.STRING,
    "<multiaddr-string>": TagType.STRING,
    "<array>": TagType.ARRAY,
    "<object>": TagType.OBJECT,
}
