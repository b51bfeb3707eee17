#!/usr/bin/env python3
"""Templar CLI - scaffold projects from templates and pull template updates."""
from typing import Optional

import typer
from rich.console import Console

from templar import __version__
from templar.cli_scaffold_commands import register_scaffold_commands
from templar.cli_support import setup_logging
from templar.cli_sync_commands import register_sync_commands
from templar.core.registry import TemplateRegistry

app = typer.Typer(
    name="templar",
    help="""Templar - Scaffold projects from remote templates

Quick start:
  templar create my-app           # Clone a template into ./my-app
  templar pull                    # Pull template updates into the 'template' branch
  templar delete my-app           # Remove a project directory
""",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
registry = TemplateRegistry()


def _version_callback(value: bool):
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True,
        help="Output the current version",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show every git command"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
):
    """Templar - Scaffold projects from remote templates."""
    if verbose or log_file:
        setup_logging(verbose=verbose, log_file=log_file)


# Attach modular subcommands
register_scaffold_commands(app, console, registry)
register_sync_commands(app, console, registry)

if __name__ == "__main__":
    app()
