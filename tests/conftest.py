"""Shared test fixtures for Templar tests."""
import subprocess

import pytest

from templar.core.config import set_config
from templar.models.command import CommandResult, GitCommand
from templar.services.git_executor import GitExecutor


class FakeExecutor(GitExecutor):
    """GitExecutor that answers from a script instead of spawning git.

    ``responses`` maps argument tuples to stdout; ``failures`` lists
    argument tuples that fail with a CalledProcessError.
    """

    def __init__(self, responses=None, failures=()):
        super().__init__()
        self.responses = dict(responses or {})
        self.failures = set(failures)
        self.calls = []

    def run(self, command: GitCommand) -> CommandResult:
        self.calls.append(command.args)
        if command.args in self.failures:
            error = subprocess.CalledProcessError(1, command.argv, output="", stderr="fatal: boom")
            return CommandResult.failure(command, error)
        return CommandResult.success(command, self.responses.get(command.args, ""))


class RecordingSpinner:
    """Spinner stand-in that records every lifecycle event."""

    def __init__(self, text=""):
        self.text = text
        self.events = []

    def start(self, text=None):
        self.events.append(("start", text or self.text))
        return self

    def stop(self):
        self.events.append(("stop", None))

    def succeed(self, message):
        self.events.append(("succeed", message))

    def fail(self, message):
        self.events.append(("fail", message))

    def warn(self, message):
        self.events.append(("warn", message))

    def info(self, message):
        self.events.append(("info", message))

    def echo(self, message=""):
        self.events.append(("echo", message))

    def error(self, error):
        self.events.append(("error", error))

    def kinds(self):
        return [kind for kind, _ in self.events]

    def messages(self, kind):
        return [message for event, message in self.events if event == kind]


@pytest.fixture
def spinner():
    return RecordingSpinner()


@pytest.fixture
def make_executor():
    def factory(responses=None, failures=()):
        return FakeExecutor(responses=responses, failures=failures)
    return factory


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in (
        "TEMPLAR_DEFAULT_PROJECT",
        "TEMPLAR_DEFAULT_CURRENT_BRANCH",
        "TEMPLAR_DEFAULT_TEMPLATE_BRANCH",
        "TEMPLAR_REMOTE",
        "TEMPLAR_INSTALL_COMMAND",
        "TEMPLAR_DEV_COMMAND",
        "TEMPLAR_MOCK",
    ):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


class SpinnerFactory:
    """Creates RecordingSpinners and keeps them in creation order."""

    def __init__(self):
        self.spinners = []

    def __call__(self, text):
        spinner = RecordingSpinner(text)
        self.spinners.append(spinner)
        return spinner

    def events(self):
        return [event for spinner in self.spinners for event in spinner.events]


@pytest.fixture
def spinner_factory():
    return SpinnerFactory()
