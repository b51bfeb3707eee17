"""Sync branch cleanup before it is recreated."""
from typing import Optional

from templar.core.branch_prober import BranchProber
from templar.core.progress import Spinner, highlight
from templar.core.template_puller import TemplatePuller
from templar.models.sync import SyncParams, SyncReport, SyncState
from templar.services.git_executor import GitExecutor


class BranchReconciler:
    """Deletes a stale sync branch locally and on the remote, then hands
    over to the :class:`TemplatePuller`.

    Cleanup is best effort: a failed deletion is reported and the run
    continues. The puller is invoked exactly once per reconcile.
    """

    def __init__(
        self,
        executor: GitExecutor,
        prober: Optional[BranchProber] = None,
        puller: Optional[TemplatePuller] = None,
    ):
        self.executor = executor
        self.prober = prober or BranchProber(executor)
        self.puller = puller or TemplatePuller(executor)

    def reconcile(self, params: SyncParams, spinner: Spinner, report: SyncReport) -> SyncReport:
        branch = params.sync_branch

        if self.prober.exists_locally(branch):
            spinner.warn(f"local branch {highlight(branch)} already exists")
            self._delete_local(branch, spinner, report)

            # Queried regardless of whether the local deletion worked
            if self.prober.exists_remotely(branch, params.remote):
                self._delete_remote(branch, params.remote, spinner, report)
            else:
                spinner.warn(f"remote branch {highlight(branch)} does not exist")
        else:
            spinner.warn(f"local branch {highlight(branch)} does not exist")

        report.state = SyncState.RECONCILED
        return self.puller.create_and_pull(params, spinner, report)

    def _delete_local(self, branch: str, spinner: Spinner, report: SyncReport) -> None:
        spinner.start(f"Deleting local branch {branch}...")
        result = report.record('delete-local', self.executor.git('branch', '-D', branch))
        if result.ok:
            spinner.succeed(f"Successfully deleted local branch: {highlight(branch)}")
        else:
            spinner.fail(f"Failed to delete local branch: {highlight(branch, 'bold red')}")
            spinner.error(result.error)

    def _delete_remote(self, branch: str, remote: str, spinner: Spinner, report: SyncReport) -> None:
        spinner.start(f"Deleting remote branch {remote}/{branch}...")
        result = report.record('delete-remote', self.executor.git('push', remote, '-D', branch))
        if result.ok:
            spinner.succeed(f"Successfully deleted remote branch: {highlight(branch)}")
        else:
            spinner.fail(f"Failed to delete remote branch: {highlight(branch, 'bold red')}")
            spinner.error(result.error)
