"""Shell command abstractions for deployment operations.

Cluster operations live in src.infra.k8s; this package covers the local
tools the deploy pipeline shells out to:

- git: Git repository operations

Usage:
    from src.cli.deployment.shell_commands import ShellCommands

    commands = ShellCommands(project_root=Path("."))
    if commands.git.is_repository():
        print(commands.git.head_sha())
"""

from pathlib import Path

from .git import GitCommands
from .runner import CommandRunner
from .types import CommandResult, GitStatus


class ShellCommands:
    """Unified interface for shell command operations.

    Attributes:
        git: Git repository commands
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the shell commands executor.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
        """
        self._project_root = Path(project_root)
        self._runner = CommandRunner(self._project_root)

        self.git = GitCommands(self._runner)

    @property
    def project_root(self) -> Path:
        """Get the project root path."""
        return self._project_root


__all__ = [
    "ShellCommands",
    "CommandResult",
    "GitStatus",
    "GitCommands",
    "CommandRunner",
]
