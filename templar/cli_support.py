"""Shared utilities for Templar CLI modules."""
from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from templar.core.config import get_config
from templar.core.registry import TemplateRegistry
from templar.models.template import TemplateRef
from templar.services.git_executor import GitExecutor


def is_mock() -> bool:
    """Return True when git commands should only be logged."""
    return get_config().mock


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Apply the global --verbose and --log-file options.

    Args:
        verbose: Echo every git command on the console
        log_file: Path to log file (optional)
    """
    from templar.core.logger import setup_logging as _setup_logging
    _setup_logging(verbose=verbose, log_file=log_file)


def get_git_executor() -> GitExecutor:
    """Return a GitExecutor for the current directory, honouring TEMPLAR_MOCK."""
    return GitExecutor(mock=is_mock())


def confirm_action(message: str, yes_flag: bool = False) -> bool:
    """Prompt user for confirmation unless --yes.

    Args:
        message: Confirmation message to display
        yes_flag: Skip prompt if True (from --yes flag)

    Returns:
        True if confirmed, False otherwise
    """
    if yes_flag:
        return True
    return typer.confirm(message)


def remove_path(path: Path) -> None:
    """Remove a file, a symlink or a directory tree.

    A symlink is removed itself; its target is left alone.
    """
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> NoReturn:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def select_template(
    console: Console,
    registry: TemplateRegistry,
    prompt: str = "Template name",
) -> TemplateRef:
    """Ask the user to pick one of the registered templates.

    Returns:
        The selected template
    """
    templates = registry.list_templates()
    names = [template.name for template in templates]

    for index, template in enumerate(templates, start=1):
        console.print(f"  [cyan]{index}.[/cyan] {template.name} [dim]{template.url}[/dim]")

    choice = Prompt.ask(prompt, choices=names, default=names[0], console=console)
    return registry.find_template(choice)


def render_template_table(templates) -> Table:
    """Build a table listing templates."""
    table = Table(title="Available Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Repository")
    for template in templates:
        table.add_row(template.name, template.url)
    return table


def timestamp_now() -> str:
    """Local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting.

    Args:
        console: Rich console for output
        message: Success message
        prefix: Prefix symbol (default: ✓)
    """
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting.

    Args:
        console: Rich console for output
        message: Error message
        prefix: Prefix symbol (default: ✗)
    """
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting.

    Args:
        console: Rich console for output
        message: Warning message
        prefix: Prefix symbol (default: ⚠)
    """
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting.

    Args:
        console: Rich console for output
        message: Info message
        prefix: Prefix symbol (default: ℹ)
    """
    console.print(f"[cyan]{prefix}[/cyan] {message}")
