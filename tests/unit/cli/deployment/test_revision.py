"""Tests for commit identifier resolution."""

from unittest.mock import MagicMock

import pytest

from src.cli.deployment.revision import RevisionResolver
from src.cli.deployment.shell_commands import GitStatus
from src.hippo.errors import NoCommitsError, NoRepositoryError


@pytest.fixture
def mock_git() -> MagicMock:
    return MagicMock()


def test_returns_head_sha(mock_git: MagicMock) -> None:
    mock_git.get_status.return_value = GitStatus(is_git_repo=True, is_clean=True, sha="abc123")

    assert RevisionResolver(mock_git).current_revision() == "abc123"


def test_same_state_same_identifier(mock_git: MagicMock) -> None:
    mock_git.get_status.return_value = GitStatus(is_git_repo=True, is_clean=True, sha="abc123")
    resolver = RevisionResolver(mock_git)

    assert resolver.current_revision() == resolver.current_revision()


def test_dirty_tree_still_resolves(mock_git: MagicMock, log_messages: list[str]) -> None:
    mock_git.get_status.return_value = GitStatus(is_git_repo=True, is_clean=False, sha="abc123")

    assert RevisionResolver(mock_git).current_revision() == "abc123"
    assert any("uncommitted" in message for message in log_messages)


def test_not_a_repository(mock_git: MagicMock) -> None:
    mock_git.get_status.return_value = GitStatus(is_git_repo=False, is_clean=False, sha=None)

    with pytest.raises(NoRepositoryError) as exc_info:
        RevisionResolver(mock_git).current_revision()

    assert "git init" in (exc_info.value.details or "")


def test_no_commits(mock_git: MagicMock) -> None:
    mock_git.get_status.return_value = GitStatus(is_git_repo=True, is_clean=False, sha=None)

    with pytest.raises(NoCommitsError):
        RevisionResolver(mock_git).current_revision()
