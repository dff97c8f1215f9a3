"""Errors and non-fatal diagnostics raised while building API documents."""

import logging
from enum import Enum


class DocsError(Exception):
    """Base class for fatal documentation generation errors."""


class CatalogueError(DocsError):
    """The endpoint catalogue could not be read or validated."""


class DuplicateOperationError(DocsError):
    """The same HTTP verb and path were registered twice."""

    def __init__(self, method: str, path: str):
        super().__init__(f"operation {method.upper()} {path} is already registered")
        self.method = method
        self.path = path


class Diagnostic(str, Enum):
    """Non-fatal conditions. Generation degrades and carries on."""

    UNSUPPORTED_ARGUMENT_TYPE = "UnsupportedArgumentType"
    UNPARSEABLE_DEFAULT = "UnparseableDefault"
    UNRECOGNIZED_RESPONSE_TAG = "UnrecognizedResponseTag"
    UNCLASSIFIABLE_RESPONSE_SHAPE = "UnclassifiableResponseShape"
    MALFORMED_RESPONSE_JSON = "MalformedResponseJSON"


def report(logger: logging.Logger, diagnostic: Diagnostic, msg: str, *args) -> None:
    """Log a diagnostic at WARNING, tagged with its name for filtering."""
    logger.warning(msg, *args, extra={"diagnostic": diagnostic.value})
