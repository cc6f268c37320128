"""CLI interface."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from c4dsl.models.workspace import load_workspace
from c4dsl.utils.config import settings
from c4dsl.utils.file_utils import write_text_file

app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
):
    """Export C4 models to Structurizr DSL."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def export(
    input: Path = typer.Option(..., "--input", "-i", help="Workspace document (JSON)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)."),
):
    """Export a JSON workspace document to Structurizr DSL."""
    try:
        workspace = load_workspace(input)
        dsl = workspace.to_dsl()
    except (ValueError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(dsl)
        return
    write_text_file(output, dsl + "\n")
    logger.info("Wrote Structurizr DSL to %s", output)


if __name__ == "__main__":
    app()
