"""Data types for shell command results.

Note: CommandResult is re-exported from src.infra.k8s.controller so that
git and kubectl results share one type.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.infra.k8s.controller import CommandResult

__all__ = [
    "CommandResult",
    "GitStatus",
]


@dataclass
class GitStatus:
    """Git repository status information.

    Attributes:
        is_git_repo: Whether the directory is inside a git work tree
        is_clean: Whether the working tree has no uncommitted changes
        sha: Full commit SHA of HEAD, or None if there are no commits
    """

    is_git_repo: bool
    is_clean: bool
    sha: str | None
