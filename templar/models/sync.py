"""Template synchronization models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from templar.models.command import CommandResult


class SyncState(Enum):
    """Progress of a ``pull`` workflow."""
    START = "start"
    FETCHED = "fetched"
    ON_TARGET_BRANCH = "on_target_branch"
    RECONCILED = "reconciled"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncParams:
    """Inputs of one ``pull`` invocation.

    Attributes:
        template_url: Remote URL of the selected template
        template_branch: Branch of the template repository to pull from
        current_branch: Branch of the project checked out before syncing
        sync_branch: Branch that receives the template content
        remote: Remote of the project that may hold a copy of ``sync_branch``
    """
    template_url: str
    template_branch: str
    current_branch: str
    sync_branch: str = "template"
    remote: str = "origin"

    def __post_init__(self):
        for name in ('template_url', 'template_branch', 'current_branch', 'sync_branch', 'remote'):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

    @property
    def merge_ref(self) -> str:
        """Remote tracking reference merged after the pull."""
        return f"{self.template_url}/{self.template_branch}"


@dataclass
class StageOutcome:
    """Result of one mutating git step."""
    name: str
    command: str
    ok: bool


@dataclass
class SyncReport:
    """Everything that happened during one synchronization run."""
    state: SyncState = SyncState.START
    stages: List[StageOutcome] = field(default_factory=list)

    def record(self, name: str, result: CommandResult) -> CommandResult:
        self.stages.append(StageOutcome(name=name, command=str(result.command), ok=result.ok))
        return result

    def stage(self, name: str) -> Optional[StageOutcome]:
        for outcome in self.stages:
            if outcome.name == name:
                return outcome
        return None

    @property
    def stage_names(self) -> List[str]:
        return [outcome.name for outcome in self.stages]

    @property
    def failed_stages(self) -> List[str]:
        return [outcome.name for outcome in self.stages if not outcome.ok]
