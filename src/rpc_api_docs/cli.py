"""CLI entry point for rpc-api-docs."""

import logging
import sys
from pathlib import Path

import click

from rpc_api_docs.catalogue.base import Endpoint
from rpc_api_docs.catalogue.loader import load_catalogue
from rpc_api_docs.config import DocumentSettings
from rpc_api_docs.errors import DocsError
from rpc_api_docs.openapi.assembler import OpenApiGenerator, render_document


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(catalogue_path: Path, **overrides) -> tuple[list[Endpoint], DocumentSettings]:
    try:
        endpoints, settings = load_catalogue(catalogue_path)
    except DocsError as e:
        raise click.ClickException(str(e)) from e
    return endpoints, settings.merged(**overrides)


@click.group()
def main():
    """RPC API Docs — generate an OpenAPI description from an RPC command catalogue."""
    pass


@main.command()
@click.argument("catalogue_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the document here instead of stdout.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
@click.option("--title", default=None, help="Override info.title.")
@click.option("--api-version", default=None, help="Override info.version.")
@click.option("--include-removed", is_flag=True, help="Also document removed endpoints.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def openapi(catalogue_path: Path, output: Path | None, fmt: str, title: str | None,
            api_version: str | None, include_removed: bool, verbose: bool):
    """Generate an OpenAPI 3.0 document from a command catalogue."""
    _configure_logging(verbose)
    endpoints, settings = _load(
        catalogue_path, title=title, version=api_version, include_removed=include_removed or None
    )

    try:
        document = OpenApiGenerator(settings).generate(endpoints)
    except DocsError as e:
        raise click.ClickException(str(e)) from e
    text = render_document(document, fmt)

    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Documented {len(document.operations())} endpoints in {output}", err=True)


@main.command()
@click.argument("catalogue_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--include-removed", is_flag=True, help="Also list removed endpoints.")
def endpoints(catalogue_path: Path, include_removed: bool):
    """List endpoints in the order they appear in the generated document."""
    _configure_logging(False)
    catalogue, settings = _load(catalogue_path, include_removed=include_removed or None)
    for endpoint in OpenApiGenerator(settings).ordered(catalogue):
        click.echo(f"{endpoint.status.value:<13} {endpoint.name}")
