"""Git command abstractions.

This module provides commands for Git repository operations,
primarily used for stamping manifests with the deployed commit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import GitStatus

if TYPE_CHECKING:
    from .runner import CommandRunner


class GitCommands:
    """Git-related shell commands.

    Provides operations for:
    - Repository detection
    - Commit SHA retrieval
    - Working tree cleanliness checks
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Git commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    def is_repository(self) -> bool:
        """Check whether the project root is inside a git work tree.

        Returns False when git itself is not installed.
        """
        result = self._runner.run(["git", "rev-parse", "--is-inside-work-tree"])
        return result.success and result.stdout.strip() == "true"

    def head_sha(self) -> str | None:
        """Get the full SHA of HEAD, or None when HEAD has no commit."""
        result = self._runner.run(["git", "rev-parse", "--verify", "--quiet", "HEAD"])
        sha = result.stdout.strip()
        return sha if result.success and sha else None

    def get_status(self) -> GitStatus:
        """Get the current git repository status.

        Returns:
            GitStatus with repository state information

        Example:
            >>> status = git.get_status()
            >>> if status.is_clean:
            ...     print(f"Clean repo at {status.sha}")
        """
        if not self.is_repository():
            return GitStatus(is_git_repo=False, is_clean=False, sha=None)

        status_result = self._runner.run(["git", "status", "--porcelain"])
        is_clean = status_result.success and not status_result.stdout.strip()

        return GitStatus(is_git_repo=True, is_clean=is_clean, sha=self.head_sha())
