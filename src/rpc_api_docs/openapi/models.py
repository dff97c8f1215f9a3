"""OpenAPI 3.0 document tree.

Only the subset of the OpenAPI object model that the generator emits.
Field aliases carry the wire names; ``to_dict()`` produces the plain
structure handed to the YAML/JSON serialiser.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpc_api_docs.errors import DuplicateOperationError


class SchemaType(str, Enum):
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Schema(_Node):
    """A schema node. An empty schema accepts any value."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: SchemaType | None = None
    format: str | None = None
    items: "Schema | None" = None
    properties: "dict[str, Schema] | None" = None
    additional_properties: "Schema | None" = Field(default=None, alias="additionalProperties")
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")
    default: Any = None

    @model_validator(mode="after")
    def _single_shape(self):
        shapes = [self.items, self.properties, self.additional_properties]
        if sum(s is not None for s in shapes) > 1:
            raise ValueError("items, properties and additionalProperties are mutually exclusive")
        return self


class Parameter(_Node):
    """A query parameter of an operation."""

    name: str
    location: str = Field(default="query", alias="in")
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    explode: bool | None = None
    schema_: Schema = Field(alias="schema")
    x_experimental: bool | None = Field(default=None, alias="x-experimental")


class MediaType(_Node):
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None


class RequestBody(_Node):
    description: str | None = None
    content: dict[str, MediaType] = {}
    required: bool | None = None


class Response(_Node):
    description: str
    content: dict[str, MediaType] = {}


class ExternalDocs(_Node):
    url: str


class Info(_Node):
    title: str
    version: str
    description: str | None = None


class Operation(_Node):
    operation_id: str = Field(alias="operationId")
    description: str | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = {}


class Document(_Node):
    """The complete API description. Operations are keyed by path, then verb."""

    openapi: str = "3.0.0"
    info: Info
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    paths: dict[str, dict[str, Operation]] = {}

    def add_operation(self, method: str, path: str, operation: Operation) -> None:
        """Register ``operation`` under ``method`` at ``path``.

        Raises DuplicateOperationError if the verb is already taken.
        """
        verbs = self.paths.setdefault(path, {})
        verb = method.lower()
        if verb in verbs:
            raise DuplicateOperationError(method, path)
        verbs[verb] = operation

    def operations(self) -> list[tuple[str, str, Operation]]:
        """All operations as (verb, path, operation), in registration order."""
        return [
            (verb, path, op)
            for path, verbs in self.paths.items()
            for verb, op in verbs.items()
        ]
