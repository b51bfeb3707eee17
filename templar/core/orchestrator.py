"""Template synchronization workflow for ``templar pull``."""
from typing import Callable, Optional

from rich.console import Console

from templar.core.logger import get_logger
from templar.core.progress import Spinner, highlight
from templar.core.reconciler import BranchReconciler
from templar.models.sync import SyncParams, SyncReport, SyncState
from templar.services.git_executor import GitExecutor

logger = get_logger(__name__)

SpinnerFactory = Callable[[str], Spinner]


class TemplateSync:
    """Pulls a template branch into the project's sync branch.

    The run moves through ``START -> FETCHED -> ON_TARGET_BRANCH ->
    RECONCILED -> DONE``. A failed fetch or checkout ends the run in
    ``FAILED`` before the sync branch is touched. Past that point every
    step reports its own failure and the run continues best effort (see
    :class:`BranchReconciler` and :class:`TemplatePuller`).

    Git failures are reported on the console and recorded in the returned
    :class:`SyncReport`; they are never raised.
    """

    def __init__(
        self,
        params: SyncParams,
        executor: Optional[GitExecutor] = None,
        reconciler: Optional[BranchReconciler] = None,
        console: Optional[Console] = None,
        spinner_factory: Optional[SpinnerFactory] = None,
    ):
        self.params = params
        self.executor = executor or GitExecutor()
        self.reconciler = reconciler or BranchReconciler(self.executor)
        self.console = console or Console()
        self.spinner_factory = spinner_factory or (lambda text: Spinner(text, console=self.console))

    def run(self) -> SyncReport:
        report = SyncReport()
        logger.debug(f"Syncing {self.params}")

        fetch_spinner = self.spinner_factory("Fetching remote template...")
        fetch_spinner.start()
        fetched = report.record('fetch', self.executor.git('fetch'))
        if not fetched.ok:
            fetch_spinner.fail(highlight("Fetch template fail", "bold red"))
            fetch_spinner.error(fetched.error)
            return self._finish(report, SyncState.FAILED)

        fetch_spinner.succeed(highlight("Fetch template success"))
        report.state = SyncState.FETCHED

        spinner = self.spinner_factory("Let it be...")
        spinner.start()
        try:
            current = self.params.current_branch
            checked_out = report.record('checkout', self.executor.git('checkout', current))
            if not checked_out.ok:
                spinner.fail(f"Failed to switch to branch: {highlight(current)}")
                spinner.error(checked_out.error)
                return self._finish(report, SyncState.FAILED)

            spinner.succeed(f"Successfully switched to branch: {highlight(current)}")
            report.state = SyncState.ON_TARGET_BRANCH

            self.reconciler.reconcile(self.params, spinner, report)
        finally:
            spinner.stop()

        return self._finish(report, SyncState.DONE)

    def _finish(self, report: SyncReport, state: SyncState) -> SyncReport:
        report.state = state
        if report.failed_stages:
            logger.debug(f"Sync finished as {state.value}; failed: {', '.join(report.failed_stages)}")
        else:
            logger.debug(f"Sync finished as {state.value}")
        return report
