"""External command models."""
import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class GitCommand:
    """A git invocation expressed as an argument vector.

    Arguments are passed to the process as-is, so no shell quoting is
    involved. ``str()`` renders a copy/paste friendly form for display.
    """
    args: Tuple[str, ...]

    @classmethod
    def of(cls, *args: str) -> "GitCommand":
        return cls(tuple(str(arg) for arg in args))

    @property
    def argv(self) -> List[str]:
        return ['git', *self.args]

    def __str__(self) -> str:
        return ' '.join(shlex.quote(part) for part in self.argv)


@dataclass
class CommandResult:
    """Outcome of a single git invocation.

    Exactly one of ``output`` (on success) or ``error`` (on failure) is
    meaningful. ``error`` is the raw exception raised while running the
    command, e.g. :class:`subprocess.CalledProcessError`.
    """
    command: GitCommand
    ok: bool
    output: str = ""
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, command: GitCommand, output: str = "") -> "CommandResult":
        return cls(command=command, ok=True, output=output.strip())

    @classmethod
    def failure(cls, command: GitCommand, error: BaseException) -> "CommandResult":
        return cls(command=command, ok=False, error=error)
