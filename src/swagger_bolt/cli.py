"""CLI entry point for swagger-bolt."""

from pathlib import Path

import click
import yaml

from swagger_bolt.config import Settings
from swagger_bolt.errors import InvalidDocumentError
from swagger_bolt.log import configure_logging, get_logger
from swagger_bolt.parser.detect import load_document
from swagger_bolt.render.descriptor import convert_document
from swagger_bolt.render.diagnostic import diagnose_document

logger = get_logger(__name__)


def _load(doc_path: Path):
    """Parse the document file, turning parse failures into CLI errors."""
    try:
        return load_document(doc_path)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not parse {doc_path}: not valid JSON or YAML.") from e


def _emit(text: str, output: Path | None):
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Saved to {output}", err=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool):
    """Swagger Bolt: turn OpenAPI/Swagger JSON into plain-text API descriptors."""
    ctx.obj = {"log_flags": verbose or quiet}
    configure_logging(verbose=verbose, quiet=quiet)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write descriptors to this file instead of stdout.")
def convert(doc_path: Path, output: Path | None):
    """Convert an OpenAPI/Swagger document into descriptor text."""
    doc = _load(doc_path)
    try:
        text = convert_document(doc)
    except InvalidDocumentError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Converted %s", doc_path)
    _emit(text, output)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the report to this file instead of stdout.")
def diagnose(doc_path: Path, output: Path | None):
    """Report which response and strategy each operation's example comes from."""
    doc = _load(doc_path)
    try:
        report = diagnose_document(doc)
    except InvalidDocumentError as e:
        raise click.ClickException(str(e)) from e

    _emit(report.to_json(), output)


@main.command()
@click.option("--host", default=None, help="Bind address (default: SWAGGER_BOLT_HOST or 127.0.0.1).")
@click.option("--port", default=None, type=int, help="Port (default: PORT or 3001).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None):
    """Run the HTTP converter service."""
    import uvicorn

    from swagger_bolt.server import create_app

    settings = Settings.from_env()
    updates = {k: v for k, v in {"host": host, "port": port}.items() if v is not None}
    settings = settings.model_copy(update=updates)
    if not ctx.obj["log_flags"]:
        configure_logging(level=settings.log_level)

    click.echo(f"Serving on http://{settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
