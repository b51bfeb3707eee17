"""Run single git commands and capture their outcome."""
import subprocess
from pathlib import Path
from typing import Optional, Union

from templar.core.logger import get_git_logger
from templar.models.command import CommandResult, GitCommand

logger = get_git_logger()


class GitExecutor:
    """Runs git commands one at a time and never raises on failure.

    Each call spawns exactly one ``git`` process in ``cwd`` (the current
    working directory when not given) and waits for it to finish. There is
    no timeout and no retry.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None, mock: bool = False):
        self.cwd = Path(cwd) if cwd is not None else None
        self.mock = mock

    def run(self, command: GitCommand) -> CommandResult:
        """Run ``command`` and return its trimmed stdout or the raised error."""
        if self.mock:
            logger.info(f"MOCK: Would run {command}")
            return CommandResult.success(command)

        logger.debug(f"Running {command}" + (f" in {self.cwd}" if self.cwd else ""))
        try:
            result = subprocess.run(
                command.argv,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True
            )
        except subprocess.CalledProcessError as e:
            logger.debug(f"{command} exited with {e.returncode}")
            if e.stderr:
                logger.debug(f"Error output: {e.stderr.strip()}")
            return CommandResult.failure(command, e)
        except OSError as e:
            # git missing from PATH, cwd gone, ...
            logger.debug(f"Failed to spawn {command}: {e}")
            return CommandResult.failure(command, e)

        return CommandResult.success(command, result.stdout or "")

    def git(self, *args: str) -> CommandResult:
        """Shorthand for ``run(GitCommand.of(*args))``."""
        return self.run(GitCommand.of(*args))
