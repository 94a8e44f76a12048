"""Deploy command.

Renders deployment_files/deploy.yaml for the current commit and applies it
to the cluster configured for the given environment.
"""

from typing import Annotated

import typer

from src.cli.context import get_cli_context
from src.cli.deployment import KubeDeployer, PipelineFailed
from src.cli.shared.console import with_error_handling


@with_error_handling
def deploy(
    ctx: typer.Context,
    environment: Annotated[
        str,
        typer.Argument(help="Environment name from kubernetesContexts in hippo.yaml"),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail when the manifest has placeholders without a value",
        ),
    ] = False,
) -> None:
    """🚀 Deploy the project manifest to a Kubernetes environment."""
    cli = get_cli_context(ctx)
    cli.console.print_header(f"Deploying to {environment}")

    deployer = KubeDeployer(
        cli.project_root,
        console=cli.console,
        commands=cli.commands,
        gateway=cli.gateway,
        constants=cli.constants,
    )
    with cli.console.status(f"[bold cyan]Deploying to {environment}..."):
        result = deployer.deploy(environment, strict=strict)

    if isinstance(result, PipelineFailed):
        stage = result.stage.value.replace("_", " ")
        cli.console.handle_error(
            f"Deploy failed at stage '{stage}': {result.error.message}",
            result.error.details,
        )
