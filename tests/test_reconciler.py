"""Tests for the sync branch reconciler."""
from unittest.mock import Mock

import pytest

from templar.core.reconciler import BranchReconciler
from templar.models.sync import SyncParams, SyncReport, SyncState

LOCAL_LIST = ('branch', '--list', 'template')
REMOTE_LIST = ('branch', '-r', '--list', 'origin/template')
DELETE_LOCAL = ('branch', '-D', 'template')
DELETE_REMOTE = ('push', 'origin', '-D', 'template')


@pytest.fixture
def params():
    return SyncParams(
        template_url="https://example/repo.git",
        template_branch="main",
        current_branch="develop",
    )


def reconcile(executor, params, spinner):
    puller = Mock()
    reconciler = BranchReconciler(executor, puller=puller)
    report = SyncReport()
    reconciler.reconcile(params, spinner, report)
    return puller, report


class TestBranchReconciler:
    """Test cleanup ordering and the unconditional hand-over."""

    def test_nothing_to_delete_still_creates(self, make_executor, params, spinner):
        executor = make_executor()

        puller, report = reconcile(executor, params, spinner)

        puller.create_and_pull.assert_called_once_with(params, spinner, report)
        assert executor.calls == [LOCAL_LIST]
        assert report.stages == []
        assert report.state == SyncState.RECONCILED
        assert "does not exist" in spinner.messages("warn")[0]

    def test_local_branch_is_deleted_then_remote_queried(self, make_executor, params, spinner):
        executor = make_executor({LOCAL_LIST: "template"})

        puller, report = reconcile(executor, params, spinner)

        assert executor.calls == [LOCAL_LIST, DELETE_LOCAL, REMOTE_LIST]
        assert report.stage_names == ['delete-local']
        assert "already exists" in spinner.messages("warn")[0]
        assert "Successfully deleted local branch" in spinner.messages("succeed")[0]
        assert "remote branch" in spinner.messages("warn")[1]
        puller.create_and_pull.assert_called_once()

    def test_failed_local_delete_still_queries_remote(self, make_executor, params, spinner):
        executor = make_executor(
            {LOCAL_LIST: "template", REMOTE_LIST: "origin/template"},
            failures=[DELETE_LOCAL],
        )

        puller, report = reconcile(executor, params, spinner)

        assert executor.calls == [LOCAL_LIST, DELETE_LOCAL, REMOTE_LIST, DELETE_REMOTE]
        assert report.failed_stages == ['delete-local']
        assert "Failed to delete local branch" in spinner.messages("fail")[0]
        assert len(spinner.messages("error")) == 1
        puller.create_and_pull.assert_called_once()

    def test_remote_branch_is_deleted(self, make_executor, params, spinner):
        executor = make_executor({LOCAL_LIST: "template", REMOTE_LIST: "origin/template"})

        puller, report = reconcile(executor, params, spinner)

        assert executor.calls[-1] == DELETE_REMOTE
        assert report.stage_names == ['delete-local', 'delete-remote']
        assert "Successfully deleted remote branch" in spinner.messages("succeed")[1]
        puller.create_and_pull.assert_called_once()

    def test_failed_remote_delete_still_creates(self, make_executor, params, spinner):
        executor = make_executor(
            {LOCAL_LIST: "template", REMOTE_LIST: "origin/template"},
            failures=[DELETE_REMOTE],
        )

        puller, report = reconcile(executor, params, spinner)

        assert report.failed_stages == ['delete-remote']
        assert "Failed to delete remote branch" in spinner.messages("fail")[0]
        puller.create_and_pull.assert_called_once()

    def test_remote_not_queried_without_local_branch(self, make_executor, params, spinner):
        executor = make_executor({REMOTE_LIST: "origin/template"})

        reconcile(executor, params, spinner)

        assert REMOTE_LIST not in executor.calls
        assert DELETE_REMOTE not in executor.calls

    def test_uses_configured_remote(self, make_executor, spinner):
        params = SyncParams(
            template_url="https://example/repo.git",
            template_branch="main",
            current_branch="develop",
            remote="upstream",
        )
        executor = make_executor({
            LOCAL_LIST: "template",
            ('branch', '-r', '--list', 'upstream/template'): "upstream/template",
        })

        reconcile(executor, params, spinner)

        assert executor.calls[-1] == ('push', 'upstream', '-D', 'template')

    def test_spinner_restarts_before_each_deletion(self, make_executor, params, spinner):
        executor = make_executor({LOCAL_LIST: "template", REMOTE_LIST: "origin/template"})

        reconcile(executor, params, spinner)

        kinds = spinner.kinds()
        assert kinds == ['warn', 'start', 'succeed', 'start', 'succeed']
        assert spinner.messages("start") == [
            "Deleting local branch template...",
            "Deleting remote branch origin/template...",
        ]
