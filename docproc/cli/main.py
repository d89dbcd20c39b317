"""
Main CLI application.

Entry point for the docproc command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import docproc
from docproc.cli.context import ExitCode, configure_logging
from docproc.cli.output import OutputFormat, get_output_adapter
from docproc.config import ConfigError, Settings, load_settings

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="docproc",
    help="Document flat-file parser and validator",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docproc {docproc.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Document flat-file parser and validator."""
    pass


def _load_settings(config: Path | None) -> Settings:
    try:
        return load_settings(config)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(ExitCode.CONFIG) from None


def _size_limit(settings: Settings, max_bytes: int | None) -> int | None:
    """Command-line limit if given, else the configured one; 0 means unlimited."""
    if max_bytes is None:
        return settings.effective_max_bytes
    return max_bytes if max_bytes > 0 else None


# =============================================================================
# Parse Command
# =============================================================================


@app.command()
def parse(
    file: Annotated[Path, typer.Argument(help="Document file to parse", exists=True)],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    threshold: Annotated[
        int | None,
        typer.Option("--threshold", "-x", help="Count documents with more than X positions"),
    ] = None,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). Defaults to DOCPROC_MAX_BYTES or 10MiB.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML settings file"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to file"),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-error output"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parse a document file and print its summary."""
    from docproc.core.parser import ParseError, process_file
    from docproc.core.summary import summarize

    settings = _load_settings(config)
    configure_logging(settings.log_level, verbose=verbose)

    try:
        output_format = OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    adapter = get_output_adapter(output_format, color=color)

    try:
        result = process_file(
            file,
            chunk_size=settings.chunk_size,
            max_bytes=_size_limit(settings, max_bytes),
        )
    except ParseError as e:
        logger.debug("Parse failure: %r", e)
        typer.echo(adapter.render_error(e), err=output_format == OutputFormat.TERMINAL)
        raise typer.Exit(ExitCode.PARSE) from None
    except OSError as e:
        typer.echo(f"Error reading file: {e}", err=True)
        raise typer.Exit(ExitCode.ERROR) from None

    summary = summarize(result, threshold=settings.threshold if threshold is None else threshold)
    rendered = adapter.render_summary(summary)

    # Write to file or stdout
    if output:
        output.write_text(rendered, encoding="utf-8")
        if not quiet:
            typer.echo(f"Output written to {output}")
    elif not quiet:
        adapter.write(rendered)

    raise typer.Exit(ExitCode.SUCCESS)


# =============================================================================
# Format Command
# =============================================================================


@app.command("format")
def format_file(
    file: Annotated[Path, typer.Argument(help="Document file to rewrite", exists=True)],
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write canonical output to file"),
    ] = None,
    max_bytes: Annotated[
        int | None,
        typer.Option("--max-bytes", help="Maximum input size in bytes (0 = unlimited)"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML settings file"),
    ] = None,
) -> None:
    """Rewrite a document file in canonical form."""
    from docproc.core.parser import ParseError, process_file
    from docproc.core.writer import serialize, write_documents

    settings = _load_settings(config)
    configure_logging(settings.log_level)

    try:
        result = process_file(
            file,
            chunk_size=settings.chunk_size,
            max_bytes=_size_limit(settings, max_bytes),
        )
    except ParseError as e:
        typer.echo(f"Error parsing file: {e.failure}", err=True)
        raise typer.Exit(ExitCode.PARSE) from None

    if output:
        written = write_documents(result.documents, output)
        typer.echo(f"Wrote {written} bytes to {output}")
    else:
        typer.echo(serialize(result.documents), nl=False)


# =============================================================================
# Utility Commands
# =============================================================================


@app.command()
def explain(
    code: Annotated[str, typer.Argument(help="Error code to explain, e.g., DOC-DATE-001")],
) -> None:
    """Explain a parser error code."""
    from docproc.core.parser import get_error_description

    description = get_error_description(code.upper())
    if description is None:
        typer.echo(f"Unknown error code: {code}", err=True)
        raise typer.Exit(ExitCode.USAGE)

    typer.secho(code.upper(), bold=True)
    typer.echo(f"  {description}")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Bind port")] = 8000,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML settings file"),
    ] = None,
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from docproc.api import create_app

    settings = _load_settings(config)
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=host, port=port)


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
