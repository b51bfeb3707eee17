"""Create the sync branch and pull the template into it."""
from templar.core.logger import get_logger
from templar.core.progress import Spinner, highlight
from templar.models.command import GitCommand
from templar.models.sync import SyncParams, SyncReport
from templar.services.git_executor import GitExecutor

logger = get_logger(__name__)


class TemplatePuller:
    """Materializes the sync branch from the selected template.

    Steps run strictly one after another:

    1. ``git checkout -b <sync_branch>`` - a failure is reported but the
       pull is still attempted.
    2. ``git pull <template_url> <template_branch>`` - a failure is
       reported and ends the run; nothing is merged.
    3. ``git merge <template_url>/<template_branch>`` - a failure prints
       the manual merge command so conflicts can be resolved by hand.
    """

    def __init__(self, executor: GitExecutor):
        self.executor = executor

    def create_and_pull(self, params: SyncParams, spinner: Spinner, report: SyncReport) -> SyncReport:
        branch = highlight(params.sync_branch)
        url = highlight(params.template_url)
        template_branch = highlight(params.template_branch)

        created = report.record('create', self.executor.git('checkout', '-b', params.sync_branch))
        if created.ok:
            spinner.succeed(f"Successfully created branch: {branch}")
        else:
            logger.debug(f"Could not create {params.sync_branch}: {created.error}")
            spinner.fail(f"Failed to create branch: {branch}")

        spinner.start(f"Pulling remote template {params.template_url} {params.template_branch}...")
        pulled = report.record(
            'pull', self.executor.git('pull', params.template_url, params.template_branch)
        )
        if not pulled.ok:
            spinner.fail(f"Failed to pull remote template: {url} branch: {template_branch}")
            spinner.error(pulled.error)
            return report

        spinner.succeed(f"Successfully pulled remote template: {url} branch: {template_branch}")

        merge = GitCommand.of('merge', params.merge_ref)
        spinner.start(f"Merging {params.merge_ref} into {params.sync_branch}...")
        merged = report.record('merge', self.executor.run(merge))
        if merged.ok:
            spinner.succeed(f"Successfully merged remote template into branch: {branch}")
        else:
            spinner.fail(
                f"Failed to merge remote template into branch: {highlight(params.sync_branch, 'bold red')}"
            )
            spinner.echo(highlight(str(merge), 'bold'))
            spinner.echo(
                f"There might be conflicts. Please resolve them manually and commit to the {branch} branch."
            )

        return report
