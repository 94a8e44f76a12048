"""Project configuration (hippo.yaml)."""

from .config_data import DockerRegistryConfig, ProjectConfiguration, VersionControlConfig
from .config_loader import load_config, resolve_environment

__all__ = [
    "DockerRegistryConfig",
    "ProjectConfiguration",
    "VersionControlConfig",
    "load_config",
    "resolve_environment",
]
