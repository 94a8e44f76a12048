"""Abstract Kubernetes controller interface.

Defines the contract for the cluster operations hippo needs, so that the
kubectl subprocess backend can be swapped or faked in tests.
"""

from __future__ import annotations

import shlex
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

# =============================================================================
# Data Types
# =============================================================================


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


@dataclass(frozen=True)
class KubeTarget:
    """Cluster and namespace addressed by a connection string.

    Connection strings are the kubectl flags stored in hippo.yaml, e.g.
    ``--context dev --namespace default``. Flags other than context and
    namespace are preserved in ``extra_args``.
    """

    context: str | None = None
    namespace: str | None = None
    extra_args: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, connection: str) -> KubeTarget:
        """Parse a connection string into its parts.

        Accepts both ``--flag value`` and ``--flag=value`` forms and the
        ``-n`` short flag for namespace.

        Raises:
            ValueError: If a flag is missing its value or quoting is broken
        """
        tokens = shlex.split(connection)
        context: str | None = None
        namespace: str | None = None
        extra: list[str] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            name, sep, inline_value = token.partition("=")
            if name in ("--context", "--namespace", "-n"):
                if sep:
                    value = inline_value
                else:
                    if i + 1 >= len(tokens):
                        raise ValueError(f"Missing value for {name} in '{connection}'")
                    i += 1
                    value = tokens[i]
                if name == "--context":
                    context = value
                else:
                    namespace = value
            else:
                extra.append(token)
            i += 1

        return cls(context=context, namespace=namespace, extra_args=tuple(extra))

    def to_args(self) -> list[str]:
        """Render the target as kubectl global flags."""
        args: list[str] = []
        if self.context:
            args.extend(["--context", self.context])
        if self.namespace:
            args.extend(["--namespace", self.namespace])
        args.extend(self.extra_args)
        return args


# =============================================================================
# Abstract Controller
# =============================================================================


class KubernetesController(ABC):
    """Abstract base class for Kubernetes operations.

    All methods are async so that blocking backends can run off the event
    loop. Use `run_sync()` to call from synchronous code.

    Example:
        from src.infra.k8s import KubeTarget, KubectlController, run_sync

        controller = KubectlController()
        target = KubeTarget.parse("--context dev --namespace default")
        result = run_sync(controller.apply_manifest_text(target, manifest))
    """

    # =========================================================================
    # Resource Operations
    # =========================================================================

    @abstractmethod
    async def apply_manifest_text(
        self, target: KubeTarget, manifest: str
    ) -> CommandResult:
        """Apply manifest text to the target cluster.

        Args:
            target: Cluster and namespace to apply against
            manifest: Rendered YAML document(s)

        Returns:
            CommandResult with apply status
        """
        ...

    # =========================================================================
    # Secret Operations
    # =========================================================================

    @abstractmethod
    async def create_secret(
        self,
        target: KubeTarget,
        name: str,
        data: Mapping[str, str],
    ) -> CommandResult:
        """Create a generic (Opaque) secret from literal values.

        Args:
            target: Cluster and namespace to create the secret in
            name: Secret name
            data: Key to plain-text value

        Returns:
            CommandResult with creation status
        """
        ...

    @abstractmethod
    async def delete_secret(self, target: KubeTarget, name: str) -> CommandResult:
        """Delete a secret, succeeding when it does not exist.

        Args:
            target: Cluster and namespace holding the secret
            name: Secret name

        Returns:
            CommandResult with deletion status
        """
        ...
