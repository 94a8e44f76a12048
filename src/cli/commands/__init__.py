"""CLI command modules.

Commands:
- deploy: Render and apply the project manifest
- secrets: Secret management for an environment
"""

from .deploy import deploy
from .secrets import secrets_app

__all__ = [
    "deploy",
    "secrets_app",
]
