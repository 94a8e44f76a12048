"""Commit identifier used to stamp deployments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from src.hippo.errors import NoCommitsError, NoRepositoryError

if TYPE_CHECKING:
    from .shell_commands import GitCommands


class RevisionResolver:
    """Resolves the immutable identifier of the commit being deployed.

    The identifier is the full commit SHA, never a branch name, so that
    re-deploying an unchanged revision renders an identical manifest apart
    from the timestamp.
    """

    def __init__(self, git: GitCommands) -> None:
        self.git = git

    def current_revision(self) -> str:
        """Return the SHA of HEAD.

        Raises:
            NoRepositoryError: If git is missing or this is not a repository
            NoCommitsError: If the repository has no commits yet
        """
        status = self.git.get_status()
        if not status.is_git_repo:
            raise NoRepositoryError(
                "Unable to find git",
                details="Please run `git init` and create a commit.",
            )
        if status.sha is None:
            raise NoCommitsError(
                "Unable to find latest commit",
                details="Please ensure that this branch contains at least one commit.",
            )
        if not status.is_clean:
            logger.warning(
                f"Working tree has uncommitted changes; deploying as {status.sha}"
            )
        return status.sha
