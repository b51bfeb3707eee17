"""Template synchronization CLI command - pull."""
from typing import Optional

import typer
from rich.console import Console

from templar.cli_support import get_git_executor, handle_cli_error, select_template
from templar.core.config import get_config
from templar.core.orchestrator import TemplateSync
from templar.core.progress import highlight
from templar.core.registry import RegistryError, TemplateRegistry
from templar.models.sync import SyncParams

# Module-level instances (will be set by register function)
console: Console = Console()
registry: TemplateRegistry = TemplateRegistry()


def pull(
    current_branch: Optional[str] = typer.Option(
        None, "--currentBranch", "-c", help="Current project branch"
    ),
    template_branch: Optional[str] = typer.Option(
        None, "--templateBranch", "-t", help="Template project branch"
    ),
):
    """Pull remote template specified branch (for example: main) to current project
    specified branch (for example: template).
    """
    config = get_config()

    try:
        selected = select_template(console, registry)
    except RegistryError as e:
        handle_cli_error(e, console)

    if not current_branch:
        current_branch = typer.prompt(
            "Current project's branch", default=config.default_current_branch
        )
    if not template_branch:
        template_branch = typer.prompt(
            "Template project's branch", default=config.default_template_branch
        )

    console.print(f"[bold magenta]❄[/bold magenta] Current project's branch: {highlight(current_branch)}")
    console.print(f"[bold magenta]❄[/bold magenta] Template project's branch: {highlight(template_branch)}")

    params = SyncParams(
        template_url=selected.url,
        template_branch=template_branch,
        current_branch=current_branch,
        remote=config.remote,
    )
    # Failures are reported by the workflow itself; exit status stays 0
    TemplateSync(params, executor=get_git_executor(), console=console).run()


def register_sync_commands(
    app: typer.Typer,
    shared_console: Console,
    shared_registry: Optional[TemplateRegistry] = None,
):
    """Register template sync commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
        shared_registry: Template registry from main CLI (optional)
    """
    global console, registry
    console = shared_console
    if shared_registry is not None:
        registry = shared_registry

    app.command()(pull)
