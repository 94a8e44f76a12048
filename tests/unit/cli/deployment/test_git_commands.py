"""Tests for git shell commands and the command runner."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.cli.deployment.shell_commands import CommandRunner, GitCommands
from src.cli.deployment.shell_commands.types import CommandResult


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(success=True, stdout=stdout, returncode=0)


def _fail(stderr: str = "fatal") -> CommandResult:
    return CommandResult(success=False, stderr=stderr, returncode=128)


class TestGitCommands:
    """GitCommands against a mocked runner."""

    @pytest.fixture
    def mock_runner(self) -> MagicMock:
        """Create a mock command runner."""
        return MagicMock()

    @pytest.fixture
    def git(self, mock_runner: MagicMock) -> GitCommands:
        return GitCommands(mock_runner)

    def _respond(self, mock_runner: MagicMock, responses: dict[str, CommandResult]) -> None:
        def run(cmd: list[str], **_: object) -> CommandResult:
            return responses[" ".join(cmd[1:3])]

        mock_runner.run.side_effect = run

    def test_clean_repository(self, git: GitCommands, mock_runner: MagicMock) -> None:
        self._respond(
            mock_runner,
            {
                "rev-parse --is-inside-work-tree": _ok("true\n"),
                "status --porcelain": _ok(""),
                "rev-parse --verify": _ok("0123456789abcdef0123456789abcdef01234567\n"),
            },
        )

        status = git.get_status()

        assert status.is_git_repo
        assert status.is_clean
        assert status.sha == "0123456789abcdef0123456789abcdef01234567"

    def test_dirty_repository(self, git: GitCommands, mock_runner: MagicMock) -> None:
        self._respond(
            mock_runner,
            {
                "rev-parse --is-inside-work-tree": _ok("true\n"),
                "status --porcelain": _ok(" M deploy.yaml\n"),
                "rev-parse --verify": _ok("abc\n"),
            },
        )

        assert not git.get_status().is_clean

    def test_repository_without_commits(
        self, git: GitCommands, mock_runner: MagicMock
    ) -> None:
        self._respond(
            mock_runner,
            {
                "rev-parse --is-inside-work-tree": _ok("true\n"),
                "status --porcelain": _ok("?? hippo.yaml\n"),
                "rev-parse --verify": _fail(""),
            },
        )

        status = git.get_status()

        assert status.is_git_repo
        assert status.sha is None

    def test_not_a_repository(self, git: GitCommands, mock_runner: MagicMock) -> None:
        mock_runner.run.return_value = _fail("fatal: not a git repository")

        status = git.get_status()

        assert not status.is_git_repo
        assert status.sha is None
        mock_runner.run.assert_called_once()


class TestCommandRunner:
    """CommandRunner subprocess handling."""

    def test_runs_in_project_root(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(["git"], 0, stdout="true\n", stderr="")
        with patch("subprocess.run", return_value=completed) as run:
            result = CommandRunner(tmp_path).run(["git", "status"])

        assert result.success
        assert result.stdout == "true\n"
        assert run.call_args.kwargs["cwd"] == tmp_path

    def test_missing_executable(self, tmp_path: Path) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError):
            result = CommandRunner(tmp_path).run(["git", "status"])

        assert not result.success
        assert result.returncode == 127
        assert result.stderr == "git: command not found"
