"""OpenAPI document generator.

Builds one POST operation per endpoint and collects them into a Document,
grouped by status in a fixed order so the output is reproducible.
"""

import json
import logging

import yaml

from rpc_api_docs.catalogue.base import Argument, Endpoint, Status, in_status
from rpc_api_docs.config import DocumentSettings
from rpc_api_docs.errors import Diagnostic, report
from rpc_api_docs.markdown import BODY_HEADING, MarkdownFormatter
from rpc_api_docs.openapi.inference import infer_schema
from rpc_api_docs.openapi.models import (
    Document,
    ExternalDocs,
    Info,
    MediaType,
    Operation,
    Parameter,
    RequestBody,
    Response,
    Schema,
    SchemaType,
)
from rpc_api_docs.openapi.parameters import parameter_for_argument, parameter_for_multi_argument
from rpc_api_docs.openapi.values import from_json

logger = logging.getLogger(__name__)

STATUS_ORDER = (Status.ACTIVE, Status.EXPERIMENTAL, Status.DEPRECATED, Status.REMOVED)

MIME_JSON = "application/json"
MIME_TEXT = "text/plain"
MIME_MULTIPART = "multipart/form-data"
SUCCESS_DESCRIPTION = "Successful response"


class OpenApiGenerator:
    """Generates an OpenAPI document from an endpoint catalogue."""

    def __init__(
        self,
        settings: DocumentSettings | None = None,
        markdown: MarkdownFormatter | None = None,
    ):
        self.settings = settings or DocumentSettings()
        self.md = markdown or MarkdownFormatter()

    @property
    def statuses(self) -> tuple[Status, ...]:
        if self.settings.include_removed:
            return STATUS_ORDER
        return tuple(s for s in STATUS_ORDER if s != Status.REMOVED)

    def generate(self, endpoints: list[Endpoint]) -> Document:
        """Build the document for every endpoint, ordered by status."""
        document = self.generate_metadata()
        for endpoint in self.ordered(endpoints):
            self.generate_endpoint(document, endpoint)
        return document

    def ordered(self, endpoints: list[Endpoint]) -> list[Endpoint]:
        """Endpoints in document order: grouped by status, catalogue order within a group."""
        result = []
        for status in self.statuses:
            result.extend(in_status(endpoints, status))
        return result

    def generate_metadata(self) -> Document:
        s = self.settings
        return Document(
            openapi=s.openapi_version,
            info=Info(title=s.title, version=s.version, description=s.description),
            external_docs=ExternalDocs(url=s.docs_url),
        )

    def generate_endpoint(self, document: Document, endpoint: Endpoint) -> None:
        """Add the operation for ``endpoint`` to ``document``.

        Raises DuplicateOperationError if the endpoint path is already present.
        """
        document.add_operation("post", endpoint.name, self.build_operation(endpoint))

    def build_operation(self, endpoint: Endpoint) -> Operation:
        body_args = [a for a in endpoint.arguments if a.is_file]
        other_args = [a for a in endpoint.arguments if not a.is_file]

        parameters = self._parameters(other_args, endpoint.options)
        return Operation(
            operation_id=endpoint.name.removeprefix(self.settings.path_prefix),
            description=endpoint.description,
            external_docs=ExternalDocs(url=f"{self.settings.docs_url}#{_anchor(endpoint.name)}"),
            parameters=parameters or None,
            request_body=self._request_body(body_args) if body_args else None,
            responses=self._responses(endpoint),
        )

    def _parameters(self, args: list[Argument], options: list[Argument]) -> list[Parameter]:
        params = []
        if len(args) > 1:
            params.append(parameter_for_multi_argument(args))
        else:
            # A lone positional argument is always addressed as "arg".
            for arg in args:
                params.append(parameter_for_argument(arg, alias_to_arg=True))
        for opt in options:
            p = parameter_for_argument(opt)
            if p is not None:
                params.append(p)
        return params

    def _request_body(self, body_args: list[Argument]) -> RequestBody:
        description = self.md.generate_body_block(body_args).strip()
        description = description.removeprefix(BODY_HEADING)

        files = Schema(
            type=SchemaType.ARRAY,
            items=Schema(type=SchemaType.STRING, format="binary"),
        )
        schema = Schema(type=SchemaType.OBJECT, properties={body_args[0].name: files})
        return RequestBody(
            description=description,
            content={MIME_MULTIPART: MediaType(schema=schema)},
            required=True if any(a.required for a in body_args) else None,
        )

    def _responses(self, endpoint: Endpoint) -> dict[str, Response]:
        raw = endpoint.response
        if raw == self.settings.plain_text_response:
            return {"200": Response(description=SUCCESS_DESCRIPTION, content={MIME_TEXT: MediaType()})}
        if not raw:
            return {}

        try:
            example = json.loads(raw)
            schema = infer_schema(from_json(example))
        except (json.JSONDecodeError, RecursionError) as e:
            report(
                logger,
                Diagnostic.MALFORMED_RESPONSE_JSON,
                "Couldn't parse JSON for response of %s: %s; JSON: %.200s",
                endpoint.name,
                e,
                raw,
            )
            return {}

        body = MediaType(example=example, schema=schema)
        return {"200": Response(description=SUCCESS_DESCRIPTION, content={MIME_JSON: body})}


def _anchor(name: str) -> str:
    """Documentation anchor for an endpoint: /api/v0/key/gen -> api-v0-key-gen."""
    return name.removeprefix("/").replace("/", "-")


def render_document(document: Document, fmt: str = "yaml") -> str:
    """Serialise the document as YAML (default) or JSON."""
    data = document.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"unsupported output format: {fmt}")
