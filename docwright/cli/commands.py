"""
docwright.cli.commands
======================

Non-interactive commands; every input comes from arguments or stdin.

    $ docwright parse save_document 'content: "Hello", fileName: "x.md"'
    $ docwright invoke requirement_analysis "A calendar app for teams"
    $ echo "# Notes" | docwright save notes.md --category output
    $ docwright tools
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import typer
from rich.markup import escape
from rich.table  import Table

from docwright.ai.adapter                   import default_tools, wrap_tools
from docwright.core.exceptions              import DocumentWriteError, ValidationError
from docwright.core.models.enums            import SaveOutcome
from docwright.core.models.save_request     import SaveRequest
from docwright.core.parsing.cascade         import parse
from docwright.core.parsing.defaults        import SaveDefaults
from docwright.core.parsing.extractors      import build_default_registry
from docwright.core.services.document_store import DocumentStore

from .utils import console, err_console, load_settings, read_payload

_OUTCOME_STYLE = {
    SaveOutcome.CREATED:     "green",
    SaveOutcome.OVERWRITTEN: "cyan",
    SaveOutcome.DECLINED:    "yellow",
}

OutputDir = typer.Option(None, "--output-dir", "-o", help="Root folder for documents")


# ------------------------------------------------------------------ parse
def parse_cmd(
    tool: str = typer.Argument(..., help="Tool the payload is meant for"),
    payload: str = typer.Argument(..., help="Raw payload, or - for stdin"),
):
    """Print the parameter mapping the cascade derives from PAYLOAD."""
    settings = load_settings()
    registry = build_default_registry(SaveDefaults(fallback_category=settings.fallback_category))
    try:
        params = parse(tool, read_payload(payload), registry=registry)
    except ValidationError as exc:
        err_console.print(f"[red]{escape(exc.reason)}[/red]")
        if exc.remediation:
            err_console.print(exc.remediation, markup=False)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(dict(params), indent=2, ensure_ascii=False, default=str))


# ------------------------------------------------------------------ invoke
def invoke_cmd(
    tool: str = typer.Argument(..., help="Tool to run"),
    payload: str = typer.Argument(..., help="Raw payload, or - for stdin"),
    output_dir: Optional[str] = OutputDir,
):
    """Run TOOL on a raw PAYLOAD the way a reasoning loop would."""
    settings = load_settings(output_dir)
    store = settings.document_store()
    registry = build_default_registry(SaveDefaults(fallback_category=settings.fallback_category))
    wrapped = wrap_tools(default_tools(store), registry=registry)

    if tool not in wrapped:
        err_console.print(f"[red]Unknown tool {tool!r}[/red] – choose from: {', '.join(wrapped)}")
        raise typer.Exit(code=2)
    typer.echo(wrapped[tool].invoke(read_payload(payload)))


# ------------------------------------------------------------------ save
def save_cmd(
    file_name: str = typer.Argument(..., help="File name inside the category folder"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Target category"),
    content: Optional[str] = typer.Option(None, "--content", help="Document body (default: stdin)"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing file"),
    output_dir: Optional[str] = OutputDir,
):
    """Save a document; an existing file is only replaced with --overwrite."""
    settings = load_settings(output_dir)
    store: DocumentStore = settings.document_store()
    body = content if content is not None else sys.stdin.read()

    request = SaveRequest(
        file_name=file_name,
        content=body,
        category=category or settings.fallback_category,
        overwrite=overwrite,
    )
    try:
        result = store.save(request)
    except ValidationError as exc:
        err_console.print(f"[red]Invalid request:[/red] {escape(exc.reason)}")
        raise typer.Exit(code=1)
    except DocumentWriteError as exc:
        err_console.print(f"[red]Write failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(
        f"{result.outcome.name}: {result.message()}",
        style=_OUTCOME_STYLE[result.outcome],
        markup=False,
        soft_wrap=True,
    )


# ------------------------------------------------------------------ tools
def tools_cmd():
    """List the tools and the fields each one expects."""
    settings = load_settings()
    table = Table(title="docwright tools")
    table.add_column("name", style="bold yellow")
    table.add_column("description")
    table.add_column("fields", style="green")
    for tool in default_tools(settings.document_store()):
        table.add_row(tool.name, tool.description, ", ".join(tool.schema))
    console.print(table)
