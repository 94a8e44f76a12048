"""Kubectl-based implementation of KubernetesController.

Uses subprocess calls to kubectl for all operations.
"""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Mapping

from .controller import CommandResult, KubernetesController, KubeTarget

KUBECTL_NOT_FOUND_RETURNCODE = 127


class KubectlController(KubernetesController):
    """Kubernetes controller using kubectl subprocess calls.

    All methods are async but internally use asyncio.to_thread()
    to run blocking subprocess calls without blocking the event loop.
    """

    def __init__(self, kubectl: str = "kubectl") -> None:
        """Initialize the controller.

        Args:
            kubectl: kubectl executable name or path
        """
        self.kubectl = kubectl

    async def _run_kubectl(
        self,
        args: list[str],
        *,
        input_data: str | None = None,
    ) -> CommandResult:
        """Run a kubectl command asynchronously.

        Args:
            args: Command arguments (without 'kubectl' prefix)
            input_data: Optional input to send to stdin

        Returns:
            CommandResult with execution results
        """
        cmd = [self.kubectl, *args]

        def _run() -> CommandResult:
            try:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    input=input_data,
                )
            except FileNotFoundError:
                return CommandResult(
                    success=False,
                    stderr=f"{self.kubectl}: command not found",
                    returncode=KUBECTL_NOT_FOUND_RETURNCODE,
                )
            return CommandResult(
                success=result.returncode == 0,
                stdout=result.stdout or "",
                stderr=result.stderr or "",
                returncode=result.returncode,
            )

        return await asyncio.to_thread(_run)

    # =========================================================================
    # Resource Operations
    # =========================================================================

    async def apply_manifest_text(
        self, target: KubeTarget, manifest: str
    ) -> CommandResult:
        """Apply manifest text piped through stdin."""
        return await self._run_kubectl(
            [*target.to_args(), "apply", "-f", "-"], input_data=manifest
        )

    # =========================================================================
    # Secret Operations
    # =========================================================================

    async def create_secret(
        self,
        target: KubeTarget,
        name: str,
        data: Mapping[str, str],
    ) -> CommandResult:
        """Create a generic secret from literal key/value pairs."""
        args = [*target.to_args(), "create", "secret", "generic", name]
        args.extend(f"--from-literal={key}={value}" for key, value in data.items())
        return await self._run_kubectl(args)

    async def delete_secret(self, target: KubeTarget, name: str) -> CommandResult:
        """Delete a secret; a missing secret is not an error."""
        return await self._run_kubectl(
            [*target.to_args(), "delete", "secret", name, "--ignore-not-found"]
        )
