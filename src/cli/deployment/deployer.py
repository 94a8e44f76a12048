"""Kubernetes environment deployer.

This module provides the KubeDeployer class which turns
``hippo deploy <environment>`` into one ``kubectl apply``. The deploy runs
as an ordered pipeline:

1. Check that deployment_files/deploy.yaml exists
2. Load hippo.yaml
3. Resolve the environment to a kubectl connection string
4. Resolve the commit SHA of HEAD
5. Render the manifest (``${COMMIT}``, ``${TIMESTAMP}``)
6. Apply the rendered manifest

The first failing stage ends the deploy. Nothing is rolled back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from pathlib import Path

from loguru import logger

from src.hippo.config import ProjectConfiguration, load_config, resolve_environment
from src.hippo.errors import ManifestNotFoundError
from src.hippo.manifest import ManifestTemplate, deployment_substitutions, placeholder
from src.infra.constants import DeploymentConstants, DeploymentPaths
from src.infra.k8s import ClusterGateway, get_cluster_gateway
from src.utils.console_like import ConsoleLike, coalesce_console

from .pipeline import DeployStage, PipelineResult, Stage, run_pipeline
from .revision import RevisionResolver
from .shell_commands import ShellCommands


@dataclass(frozen=True)
class DeploymentContext:
    """Values gathered while deploying to one environment.

    Each stage fills in one more field; the context is never persisted.
    """

    environment_name: str
    manifest_path: Path
    strict: bool = False
    config: ProjectConfiguration | None = None
    cluster_connection: str | None = None
    commit: str | None = None
    rendered_manifest: str | None = None


type DeployResult = PipelineResult[DeploymentContext]


def _require[T](value: T | None, field: str) -> T:
    """Return a context field filled in by an earlier stage."""
    if value is None:
        raise RuntimeError(f"Deploy stage ran before '{field}' was set")
    return value


class KubeDeployer:
    """Deploys the project manifest to a configured environment.

    Attributes:
        constants: Deployment configuration constants
        paths: Deployment path resolver
        commands: Shell command executor (git)
        gateway: Cluster gateway (kubectl)
        revisions: Commit identifier resolver
    """

    def __init__(
        self,
        project_root: Path,
        *,
        console: ConsoleLike | None = None,
        commands: ShellCommands | None = None,
        gateway: ClusterGateway | None = None,
        constants: DeploymentConstants | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the deployer.

        Args:
            project_root: Path to the project root directory
            console: Console for operator output
            commands: Shell command executor (built from project_root if omitted)
            gateway: Cluster gateway (kubectl-backed if omitted)
            constants: Deployment constants (defaults if omitted)
            clock: Source of the render timestamp (UTC now if omitted)
        """
        self.project_root = Path(project_root)
        self.console = coalesce_console(console)
        self.constants = constants or DeploymentConstants()
        self.paths = DeploymentPaths(self.project_root, self.constants)
        self.commands = commands or ShellCommands(self.project_root)
        self.gateway = gateway or get_cluster_gateway()
        self.revisions = RevisionResolver(self.commands.git)
        self._clock = clock or (lambda: datetime.now(UTC))

    # =========================================================================
    # Pipeline
    # =========================================================================

    def stages(self) -> list[Stage[DeploymentContext]]:
        """The deploy stages in execution order."""
        return [
            Stage(DeployStage.MANIFEST_CHECKED, self._check_manifest),
            Stage(DeployStage.CONFIG_LOADED, self._load_config),
            Stage(DeployStage.ENVIRONMENT_RESOLVED, self._resolve_environment),
            Stage(DeployStage.REVISION_RESOLVED, self._resolve_revision),
            Stage(DeployStage.TEMPLATE_RENDERED, self._render_manifest),
            Stage(DeployStage.APPLIED, self._apply_manifest),
        ]

    def deploy(self, environment_name: str, *, strict: bool = False) -> DeployResult:
        """Render and apply the manifest for ``environment_name``.

        Args:
            environment_name: Key of kubernetesContexts in hippo.yaml
            strict: Fail on placeholders that have no value

        Returns:
            PipelineSucceeded with the final context, or PipelineFailed
            naming the stage that failed and its error
        """
        initial = DeploymentContext(
            environment_name=environment_name,
            manifest_path=self.paths.manifest_file,
            strict=strict,
        )
        logger.info(f"Deploying environment '{environment_name}' from {self.project_root}")
        return run_pipeline(self.stages(), initial)

    # =========================================================================
    # Stages
    # =========================================================================

    def _check_manifest(self, ctx: DeploymentContext) -> DeploymentContext:
        if not ctx.manifest_path.exists():
            raise ManifestNotFoundError(
                "Deployment files do not exist",
                details=(
                    f"Run `{self.constants.SETUP_KUBERNETES_COMMAND}` to create them: "
                    f"{ctx.manifest_path}"
                ),
            )
        return ctx

    def _load_config(self, ctx: DeploymentContext) -> DeploymentContext:
        config = load_config(self.paths.config_file, env_file=self.paths.env_file)
        return replace(ctx, config=config)

    def _resolve_environment(self, ctx: DeploymentContext) -> DeploymentContext:
        config = _require(ctx.config, "config")
        connection = resolve_environment(config, ctx.environment_name)
        self.console.info(f"Target: {ctx.environment_name} ({connection})")
        return replace(ctx, cluster_connection=connection)

    def _resolve_revision(self, ctx: DeploymentContext) -> DeploymentContext:
        commit = self.revisions.current_revision()
        return replace(ctx, commit=commit)

    def _render_manifest(self, ctx: DeploymentContext) -> DeploymentContext:
        commit = _require(ctx.commit, "commit")
        template = ManifestTemplate.load(ctx.manifest_path)
        logger.info(
            f"Setting {ctx.manifest_path.name} "
            f"{placeholder(self.constants.COMMIT_PLACEHOLDER)} to: {commit}"
        )
        rendered = template.render(
            deployment_substitutions(commit, self._clock(), self.constants),
            strict=ctx.strict,
        )
        return replace(ctx, rendered_manifest=rendered)

    def _apply_manifest(self, ctx: DeploymentContext) -> DeploymentContext:
        connection = _require(ctx.cluster_connection, "cluster_connection")
        manifest = _require(ctx.rendered_manifest, "rendered_manifest")
        self.console.info(f"Applying {ctx.manifest_path.name}")
        self.gateway.apply(connection, manifest)
        self.console.ok(f"Deployed {ctx.commit} to {ctx.environment_name}")
        return ctx
