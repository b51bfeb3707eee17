"""Tests for synchronization models."""
import pytest

from templar.models.command import CommandResult, GitCommand
from templar.models.sync import SyncParams, SyncReport


class TestSyncParams:
    """Test SyncParams construction."""

    def test_sync_branch_defaults_to_template(self):
        params = SyncParams(template_url="https://example/repo.git", template_branch="main",
                            current_branch="develop")

        assert params.sync_branch == "template"
        assert params.remote == "origin"
        assert params.merge_ref == "https://example/repo.git/main"

    def test_params_are_immutable(self):
        params = SyncParams(template_url="u", template_branch="main", current_branch="develop")

        with pytest.raises(AttributeError):
            params.sync_branch = "other"

    @pytest.mark.parametrize("field", ["template_url", "template_branch", "current_branch"])
    def test_empty_values_rejected(self, field):
        values = {"template_url": "u", "template_branch": "main", "current_branch": "develop"}
        values[field] = ""

        with pytest.raises(ValueError, match=field):
            SyncParams(**values)


class TestSyncReport:
    """Test SyncReport bookkeeping."""

    def test_record_returns_result(self):
        report = SyncReport()
        result = CommandResult.success(GitCommand.of('fetch'))

        assert report.record('fetch', result) is result
        assert report.stage('fetch').command == "git fetch"
        assert report.stage('merge') is None

    def test_failed_stages(self):
        report = SyncReport()
        report.record('fetch', CommandResult.success(GitCommand.of('fetch')))
        report.record('checkout', CommandResult.failure(GitCommand.of('checkout', 'x'), OSError()))

        assert report.stage_names == ['fetch', 'checkout']
        assert report.failed_stages == ['checkout']
