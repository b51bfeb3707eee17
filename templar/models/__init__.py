"""Data models for Templar."""
from templar.models.command import CommandResult, GitCommand
from templar.models.sync import StageOutcome, SyncParams, SyncReport, SyncState
from templar.models.template import TemplateRef

__all__ = [
    'CommandResult',
    'GitCommand',
    'StageOutcome',
    'SyncParams',
    'SyncReport',
    'SyncState',
    'TemplateRef',
]
