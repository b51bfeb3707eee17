"""Spinner-style progress reporting on a Rich console."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from templar.cli_support import print_error, print_info, print_success, print_warning


def highlight(name: str, style: str = "bold green") -> str:
    """Highlight a branch, URL or project name inside a message."""
    return f"[{style}]{escape(str(name))}[/{style}]"


class Spinner:
    """Start/succeed/fail/warn/stop lifecycle around ``Console.status``.

    Terminal messages (succeed, fail, warn, info) stop the animation and
    print a prefixed line. ``start`` brings it back for the next step. It
    has no effect on control flow.
    """

    def __init__(self, text: str, console: Optional[Console] = None, spinner: str = "dots"):
        self.text = text
        self.console = console or Console()
        self.spinner = spinner
        self._status: Optional[Status] = None

    @property
    def is_spinning(self) -> bool:
        return self._status is not None

    def start(self, text: Optional[str] = None) -> "Spinner":
        if text:
            self.text = text
        if self._status is None:
            self._status = self.console.status(f"[cyan]{escape(self.text)}[/cyan]", spinner=self.spinner)
            self._status.start()
        else:
            self._status.update(f"[cyan]{escape(self.text)}[/cyan]")
        return self

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, message: str) -> None:
        self.stop()
        print_success(self.console, message)

    def fail(self, message: str) -> None:
        self.stop()
        print_error(self.console, message)

    def warn(self, message: str) -> None:
        self.stop()
        print_warning(self.console, message)

    def info(self, message: str) -> None:
        self.stop()
        print_info(self.console, message)

    def echo(self, message: str = "") -> None:
        self.console.print(message)

    def error(self, error: Optional[BaseException]) -> None:
        """Dump a raw error below the last status line."""
        self.stop()
        self.console.print()
        self.console.print(f"[red]{escape(str(error))}[/red]")
        stderr = getattr(error, 'stderr', None)
        if stderr and stderr.strip():
            self.console.print(escape(stderr.strip()), style="dim")
