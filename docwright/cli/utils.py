from __future__ import annotations
import sys

import typer
from rich.console import Console
from rich.markup  import escape

from docwright.core.config.settings import Settings
from docwright.core.exceptions      import ConfigError
from docwright.core.utils.logging   import configure

console     = Console()
err_console = Console(stderr=True)


def load_settings(output_dir: str | None = None) -> Settings:
    try:
        settings = Settings.load(output_dir=output_dir)
    except ConfigError as exc:
        err_console.print(f"[red]Bad configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    configure(settings.log_level)
    return settings


def read_payload(payload: str) -> str:
    """'-' means: read the payload from stdin."""
    return sys.stdin.read() if payload == "-" else payload
