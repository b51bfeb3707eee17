"""Template repository download."""
from pathlib import Path
from typing import Union

from templar.core.logger import get_logger
from templar.models.command import CommandResult
from templar.services.git_executor import GitExecutor

logger = get_logger(__name__)


class CloneError(Exception):
    """Raised when a template repository cannot be cloned or updated."""

    def __init__(self, result: CommandResult):
        self.result = result
        error = result.error
        detail = getattr(error, 'stderr', None) or str(error)
        super().__init__(f"{result.command} failed: {detail.strip()}")


class GitManager:
    """Clones template repositories into project directories."""

    def __init__(self, mock: bool = False):
        self.mock = mock

    def pull_or_clone(self, url: str, dest: Union[str, Path]) -> Path:
        """Make ``dest`` match the remote repository at ``url``.

        An existing directory is updated with ``git pull``; otherwise a
        shallow clone is created.

        Args:
            url: Git repository URL
            dest: Destination directory

        Returns:
            The destination path

        Raises:
            CloneError: If git fails
        """
        dest = Path(dest)

        if dest.is_dir():
            logger.debug(f"Updating {dest} from {url}")
            result = GitExecutor(cwd=dest, mock=self.mock).git('pull')
        else:
            logger.debug(f"Cloning {url} to {dest}")
            result = GitExecutor(mock=self.mock).git('clone', '--depth', '1', url, str(dest))

        if not result.ok:
            raise CloneError(result)

        return dest
