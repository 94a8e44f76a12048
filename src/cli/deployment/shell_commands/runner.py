"""Command runner for executing shell commands.

This module provides the base command execution functionality used by
all specialized command modules.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from .types import CommandResult

COMMAND_NOT_FOUND_RETURNCODE = 127


class CommandRunner:
    """Low-level command executor with consistent result handling.

    A missing executable is reported as a failed result rather than an
    exception, so callers handle "tool not installed" the same way as
    "tool refused".
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the command runner.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
        """
        self.project_root = project_root

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = True,
    ) -> CommandResult:
        """Execute a shell command and return structured result.

        Args:
            cmd: Command and arguments as a sequence
            cwd: Working directory (defaults to project_root)
            capture_output: Whether to capture stdout/stderr

        Returns:
            CommandResult with success status, output, and return code
        """
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd or self.project_root,
                capture_output=capture_output,
                text=True,
            )
        except FileNotFoundError:
            return CommandResult(
                success=False,
                stderr=f"{cmd[0]}: command not found",
                returncode=COMMAND_NOT_FOUND_RETURNCODE,
            )
        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )
