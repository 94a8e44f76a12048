"""Synchronous cluster gateway used by the deploy pipeline.

Wraps the async KubernetesController, addresses the cluster through the
connection strings stored in hippo.yaml and turns failed commands into
``ApplyError`` carrying kubectl's own diagnostic.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from src.hippo.errors import ApplyError

from .controller import CommandResult, KubernetesController, KubeTarget
from .utils import run_sync


def _diagnostic(result: CommandResult) -> str:
    return (result.stderr or result.stdout).strip() or f"exit code {result.returncode}"


class ClusterGateway:
    """Apply manifests and manage secrets on a named cluster context.

    Every call is synchronous, best-effort and never retried.
    """

    def __init__(self, controller: KubernetesController) -> None:
        """Initialize the gateway.

        Args:
            controller: Backend performing the cluster operations
        """
        self._controller = controller

    @staticmethod
    def _target(connection: str) -> KubeTarget:
        try:
            return KubeTarget.parse(connection)
        except ValueError as e:
            raise ApplyError(
                f"Invalid connection string: '{connection}'", details=str(e)
            ) from e

    def apply(self, connection: str, manifest: str) -> None:
        """Submit a manifest to the cluster addressed by ``connection``.

        Raises:
            ApplyError: If kubectl rejects or cannot process the manifest
        """
        target = self._target(connection)
        result = run_sync(self._controller.apply_manifest_text(target, manifest))
        if not result.success:
            raise ApplyError("kubectl apply failed", details=_diagnostic(result))
        if result.stdout.strip():
            logger.info(result.stdout.strip())

    def create_secret(
        self, connection: str, name: str, data: Mapping[str, str]
    ) -> None:
        """Create a generic secret in the connection's namespace.

        Raises:
            ApplyError: If the secret cannot be created (e.g. it already exists)
        """
        target = self._target(connection)
        result = run_sync(self._controller.create_secret(target, name, data))
        if not result.success:
            raise ApplyError(
                f"Failed to create secret '{name}'", details=_diagnostic(result)
            )

    def delete_secret(self, connection: str, name: str) -> CommandResult:
        """Delete a secret; succeeds when the secret did not exist.

        Never raises for cluster-side failures. The caller decides whether a
        failed result matters.
        """
        target = self._target(connection)
        return run_sync(self._controller.delete_secret(target, name))
