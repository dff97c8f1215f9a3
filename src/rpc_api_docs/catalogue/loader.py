"""Endpoint catalogue loader.

Reads a YAML (or JSON) file of the form::

    info:
      title: IPFS RPC API
      version: 0.13.0
    endpoints:
      - name: /api/v0/version
        description: Show version information.
        status: Active
        arguments: []
        options:
          - {name: number, type: bool, description: Only show the version number.}
        response: '{"Version": "<string>"}'
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from rpc_api_docs.catalogue.base import Endpoint
from rpc_api_docs.config import DocumentSettings
from rpc_api_docs.errors import CatalogueError

logger = logging.getLogger(__name__)


def load_catalogue(
    file_path: Path, settings: DocumentSettings | None = None
) -> tuple[list[Endpoint], DocumentSettings]:
    """Load endpoints and document settings from a catalogue file.

    Settings from the file's ``info`` block are layered over ``settings``
    (or the built-in defaults).
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogueError(f"cannot read catalogue {file_path}: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogueError(f"catalogue {file_path} is not valid YAML: {e}") from e

    return parse_catalogue(doc, settings, source=str(file_path))


def parse_catalogue(
    doc, settings: DocumentSettings | None = None, source: str = "<catalogue>"
) -> tuple[list[Endpoint], DocumentSettings]:
    """Validate an already-parsed catalogue document."""
    if isinstance(doc, list):
        doc = {"endpoints": doc}
    if not isinstance(doc, dict):
        raise CatalogueError(f"{source}: expected a mapping with an 'endpoints' list")

    info = doc.get("info") or {}
    if not isinstance(info, dict):
        raise CatalogueError(f"{source}: 'info' must be a mapping")

    base = settings or DocumentSettings()
    try:
        merged = DocumentSettings.model_validate({**base.model_dump(), **info})
        endpoints = [Endpoint.model_validate(item) for item in doc.get("endpoints") or []]
    except ValidationError as e:
        raise CatalogueError(f"{source}: {e}") from e

    logger.debug("Loaded %d endpoints from %s", len(endpoints), source)
    return endpoints, merged
