"""Deployment constants and configuration.

This module centralizes all magic strings, paths, and configuration values
used throughout the deployment process.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DeploymentConstants:
    """Constants for hippo deployments.

    This class provides a centralized location for all deployment-related
    constants, making them easy to find, update, and test.
    """

    # Project files
    CONFIG_FILE_NAME: str = "hippo.yaml"
    ENV_FILE_NAME: str = ".env"
    DEPLOYMENT_DIR: str = "deployment_files"
    MANIFEST_FILE_NAME: str = "deploy.yaml"

    # Manifest placeholders
    COMMIT_PLACEHOLDER: str = "COMMIT"
    TIMESTAMP_PLACEHOLDER: str = "TIMESTAMP"

    # Commands the operator is pointed at when a precondition is missing
    SETUP_KUBERNETES_COMMAND: str = "hippo setup kubernetes"


DEFAULT_CONSTANTS = DeploymentConstants()


class DeploymentPaths:
    """Path resolver for deployment-related directories and files.

    Attributes:
        project_root: Root directory of the project being deployed
    """

    def __init__(
        self, project_root: Path, constants: DeploymentConstants | None = None
    ) -> None:
        self.project_root = Path(project_root)
        self.constants = constants or DEFAULT_CONSTANTS

    @property
    def config_file(self) -> Path:
        return self.project_root / self.constants.CONFIG_FILE_NAME

    @property
    def env_file(self) -> Path:
        return self.project_root / self.constants.ENV_FILE_NAME

    @property
    def deployment_dir(self) -> Path:
        return self.project_root / self.constants.DEPLOYMENT_DIR

    @property
    def manifest_file(self) -> Path:
        """Manifest template applied by ``hippo deploy``."""
        return self.deployment_dir / self.constants.MANIFEST_FILE_NAME
