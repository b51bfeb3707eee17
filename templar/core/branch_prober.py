"""Branch existence checks."""
from templar.core.logger import get_logger
from templar.models.command import CommandResult
from templar.services.git_executor import GitExecutor

logger = get_logger(__name__)


class BranchProber:
    """Answers whether a branch exists locally or on a remote.

    ``git branch --list`` treats its argument as a glob, so the listing is
    compared line by line against the exact branch name instead of
    trusting any non-empty output.
    """

    def __init__(self, executor: GitExecutor):
        self.executor = executor

    def exists_locally(self, branch: str) -> bool:
        result = self.executor.git('branch', '--list', branch)
        return self._listed(result, branch)

    def exists_remotely(self, branch: str, remote: str = "origin") -> bool:
        # Remote-tracking branches are listed as <remote>/<branch>
        ref = f"{remote}/{branch}"
        result = self.executor.git('branch', '-r', '--list', ref)
        return self._listed(result, ref)

    @staticmethod
    def _listed(result: CommandResult, name: str) -> bool:
        if not result.ok:
            logger.debug(f"{result.command} failed, treating '{name}' as missing: {result.error}")
            return False

        for line in result.output.splitlines():
            # Current / other-worktree branches are prefixed with '*' or '+'
            candidate = line.strip().lstrip('*+').strip()
            if candidate == name:
                return True
        return False
