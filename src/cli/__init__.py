"""Main CLI application module.

This module provides the main entry point for the hippo CLI.

Commands:
- deploy: Deploy the project manifest to a Kubernetes environment
- secrets: Kubernetes secret management
"""

import sys
from typing import Annotated

import typer
from loguru import logger

from .commands import deploy, secrets_app
from .context import build_cli_context

# Create the main CLI application
app = typer.Typer(
    help="🦛 hippo - Kubernetes deployment for scaffolded projects",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def setup(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Configure logging and build the shared CLI context."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    ctx.obj = build_cli_context()


app.command("deploy")(deploy)
app.add_typer(secrets_app, name="secrets")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
