"""Secret management for Kubernetes deployments.

Secrets are written with delete-then-create rather than a native upsert.
The two calls are not atomic: two processes writing the same secret name
at once can leave it missing or holding the other writer's data. hippo
assumes a single operator per namespace.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from src.infra.k8s import ClusterGateway
    from src.utils.console_like import ConsoleLike


@dataclass(frozen=True)
class SecretRecord:
    """A namespaced key/value secret."""

    name: str
    data: Mapping[str, str] = field(default_factory=dict)


class SecretManager:
    """Writes secrets to the namespace of a cluster connection."""

    def __init__(self, gateway: ClusterGateway, console: ConsoleLike) -> None:
        """Initialize the secret manager.

        Args:
            gateway: Cluster gateway performing the kubectl calls
            console: Console for operator output
        """
        self.gateway = gateway
        self.console = console

    def provision(self, connection: str, secret: SecretRecord) -> None:
        """Replace ``secret`` on the cluster.

        Any existing secret of the same name is deleted first and the result
        of that delete is ignored. Exactly one create follows.

        Raises:
            ApplyError: If the create call fails
        """
        self.console.info(f"Creating secret `{secret.name}`")
        result = self.gateway.delete_secret(connection, secret.name)
        if not result.success:
            logger.debug(
                f"Ignoring failed delete of secret {secret.name}: {result.stderr.strip()}"
            )

        self.gateway.create_secret(connection, secret.name, secret.data)
        self.console.ok(f"Secret `{secret.name}` created with {len(secret.data)} key(s)")

    def remove(self, connection: str, name: str) -> bool:
        """Delete a secret. Returns whether kubectl reported success."""
        result = self.gateway.delete_secret(connection, name)
        if result.success:
            self.console.ok(f"Secret `{name}` deleted")
        else:
            self.console.warn(f"Could not delete secret `{name}`: {result.stderr.strip()}")
        return result.success
