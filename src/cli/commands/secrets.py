"""Kubernetes secret commands.

Secrets are written to the namespace of an environment's kubernetes context
using delete-then-create.
"""

from typing import Annotated

import typer

from src.cli.context import get_cli_context
from src.cli.deployment import SecretManager, SecretRecord
from src.cli.shared.console import with_error_handling
from src.hippo.config import load_config, resolve_environment

secrets_app = typer.Typer(
    help="🔐 Manage Kubernetes secrets for an environment",
    no_args_is_help=True,
)


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE arguments, rejecting malformed ones."""
    data: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(
                f"Expected KEY=VALUE, got '{pair}'", param_hint="DATA"
            )
        data[key] = value
    return data


def _resolve_connection(ctx: typer.Context, environment: str) -> str:
    cli = get_cli_context(ctx)
    config = load_config(cli.paths.config_file, env_file=cli.paths.env_file)
    return resolve_environment(config, environment)


@secrets_app.command("set")
@with_error_handling
def set_secret(
    ctx: typer.Context,
    environment: Annotated[str, typer.Argument(help="Environment name")],
    name: Annotated[str, typer.Argument(help="Secret name")],
    data: Annotated[list[str], typer.Argument(help="KEY=VALUE pairs")],
) -> None:
    """Create or replace a secret (delete, then create)."""
    cli = get_cli_context(ctx)
    record = SecretRecord(name=name, data=_parse_pairs(data))
    connection = _resolve_connection(ctx, environment)

    SecretManager(cli.gateway, cli.console).provision(connection, record)


@secrets_app.command("delete")
@with_error_handling
def delete_secret(
    ctx: typer.Context,
    environment: Annotated[str, typer.Argument(help="Environment name")],
    name: Annotated[str, typer.Argument(help="Secret name")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation prompt")
    ] = False,
) -> None:
    """Delete a secret. Missing secrets are not an error."""
    cli = get_cli_context(ctx)
    connection = _resolve_connection(ctx, environment)

    if not cli.console.confirm_action(
        f"Delete secret {name}",
        details=f"Target: {environment} ({connection})",
        force=force,
    ):
        raise typer.Exit(0)

    if not SecretManager(cli.gateway, cli.console).remove(connection, name):
        raise typer.Exit(1)
