from __future__ import annotations
import typer

from .commands import parse_cmd, invoke_cmd, save_cmd, tools_cmd

app = typer.Typer(help="docwright – turn raw tool-call strings into parameters and documents")
app.command("parse")(parse_cmd)
app.command("invoke")(invoke_cmd)
app.command("save")(save_cmd)
app.command("tools")(tools_cmd)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
