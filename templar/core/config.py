"""Templar runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class TemplarConfig:
    """Runtime configuration for Templar commands.

    Attributes:
        default_project_name: Name offered when ``create`` is run without one
        default_current_branch: Project branch offered by ``pull``
        default_template_branch: Template branch offered by ``pull``
        remote: Project remote that may hold a stale sync branch
        install_command: Hint printed after a project is created
        dev_command: Hint printed after a project is created
        mock: Log git commands instead of running them
    """

    default_project_name: str = "vue-project"
    default_current_branch: str = "template"
    default_template_branch: str = "main"
    remote: str = "origin"

    # Next-step hints
    install_command: str = "pnpm i"
    dev_command: str = "pnpm dev"

    mock: bool = False

    @classmethod
    def from_env(cls) -> "TemplarConfig":
        """Create config from environment variables.

        Environment variables:
            TEMPLAR_DEFAULT_PROJECT: Default project name for ``create``
            TEMPLAR_DEFAULT_CURRENT_BRANCH: Default project branch for ``pull``
            TEMPLAR_DEFAULT_TEMPLATE_BRANCH: Default template branch for ``pull``
            TEMPLAR_REMOTE: Project remote name
            TEMPLAR_INSTALL_COMMAND: Install hint
            TEMPLAR_DEV_COMMAND: Dev server hint
            TEMPLAR_MOCK: "1" to log git commands instead of running them

        Returns:
            TemplarConfig instance with values from environment or defaults
        """
        return cls(
            default_project_name=os.getenv("TEMPLAR_DEFAULT_PROJECT", cls.default_project_name),
            default_current_branch=os.getenv(
                "TEMPLAR_DEFAULT_CURRENT_BRANCH", cls.default_current_branch
            ),
            default_template_branch=os.getenv(
                "TEMPLAR_DEFAULT_TEMPLATE_BRANCH", cls.default_template_branch
            ),
            remote=os.getenv("TEMPLAR_REMOTE", cls.remote),
            install_command=os.getenv("TEMPLAR_INSTALL_COMMAND", cls.install_command),
            dev_command=os.getenv("TEMPLAR_DEV_COMMAND", cls.dev_command),
            mock=os.getenv("TEMPLAR_MOCK") == "1",
        )


# Global config instance (can be overridden)
_config: Optional[TemplarConfig] = None


def get_config() -> TemplarConfig:
    """Get the global Templar configuration.

    Returns:
        TemplarConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = TemplarConfig.from_env()
    return _config


def set_config(config: Optional[TemplarConfig]):
    """Set the global Templar configuration.

    Args:
        config: TemplarConfig instance to use globally, or None to reload from environment
    """
    global _config
    _config = config
