"""Project scaffolding CLI commands - create, delete, templates."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from templar.cli_support import (
    confirm_action,
    handle_cli_error,
    is_mock,
    print_info,
    print_success,
    remove_path,
    render_template_table,
    select_template,
    timestamp_now,
)
from templar.core.config import get_config
from templar.core.progress import Spinner, highlight
from templar.core.registry import RegistryError, TemplateRegistry
from templar.services.git_manager import CloneError, GitManager

# Module-level instances (will be set by register function)
console: Console = Console()
registry: TemplateRegistry = TemplateRegistry()


def create(
    project_name: Optional[str] = typer.Argument(None, help="Project directory name"),
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Template name"),
):
    """Create & init project from a template."""
    config = get_config()

    try:
        selected = registry.find_template(template)
        if not project_name:
            project_name = typer.prompt("Project name", default=config.default_project_name)
        if selected is None:
            selected = select_template(console, registry)
    except RegistryError as e:
        handle_cli_error(e, console)

    dest = Path.cwd() / project_name

    if dest.exists() or dest.is_symlink():
        if not confirm_action(
            f'Target directory "{project_name}" is not empty. Remove existing files and continue?'
        ):
            raise typer.Exit(1)
        remove_path(dest)

    spinner = Spinner(f"Downloading Template: {selected.url}...", console=console)
    spinner.start()
    try:
        GitManager(mock=is_mock()).pull_or_clone(selected.url, dest)
    except CloneError as e:
        spinner.fail(highlight("Download template fail", "bold red"))
        spinner.error(e.result.error)
        return
    finally:
        spinner.stop()

    spinner.succeed(highlight("Download template success"))
    console.print("\nDone. Now run:\n")
    console.print(highlight(f"   cd {project_name}"))
    console.print(highlight(f"   {config.install_command}"))
    console.print(highlight(f"   {config.dev_command}"))
    console.print()
    console.print(f"⏰ {timestamp_now()}")


def delete(
    project_name: Optional[str] = typer.Argument(None, help="Project directory to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Clear the target directory."""
    if not project_name:
        project_name = typer.prompt("Project directory")

    dest = Path.cwd() / project_name
    name = highlight(project_name)

    if not (dest.exists() or dest.is_symlink()):
        print_info(console, f'The "{name}" directory does not exist')
        return

    if not confirm_action(f'Are you sure you want to delete the "{project_name}" directory?', yes):
        raise typer.Exit(1)

    remove_path(dest)
    print_success(console, f'The "{name}" directory has been deleted successfully')


def templates():
    """List the built-in templates."""
    try:
        console.print(render_template_table(registry.list_templates()))
    except RegistryError as e:
        handle_cli_error(e, console)


def register_scaffold_commands(
    app: typer.Typer,
    shared_console: Console,
    shared_registry: Optional[TemplateRegistry] = None,
):
    """Register scaffolding commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
        shared_registry: Template registry from main CLI (optional)
    """
    global console, registry
    console = shared_console
    if shared_registry is not None:
        registry = shared_registry

    app.command()(create)
    app.command()(delete)
    app.command()(templates)
