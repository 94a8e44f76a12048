"""Loading hippo.yaml and resolving environments against it."""

from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from src.hippo.config.config_data import ProjectConfiguration
from src.hippo.config.config_utils import substitute_env_vars_in_values
from src.hippo.errors import (
    ConfigNotFoundError,
    InvalidConfigurationError,
    InvalidEnvironmentError,
)
from src.infra.constants import DEFAULT_CONSTANTS
from src.infra.k8s.controller import KubeTarget

CONFIG_PATH = Path(DEFAULT_CONSTANTS.CONFIG_FILE_NAME)

_SETUP_HINT = f"Run `{DEFAULT_CONSTANTS.SETUP_KUBERNETES_COMMAND}` to configure"


def load_config(
    file_path: Path = CONFIG_PATH, *, env_file: Path | None = None
) -> ProjectConfiguration:
    """
    Load hippo.yaml with environment variable substitution.

    Args:
        file_path: Path to the YAML file (default: hippo.yaml)
        env_file: Optional .env file loaded before substitution. Variables
                  already present in the environment are not overridden.

    Returns:
        The validated ProjectConfiguration

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        InvalidConfigurationError: If the YAML is unparsable, is not a mapping,
            fails validation or references a missing required variable
    """
    if not file_path.exists():
        raise ConfigNotFoundError(
            f"Configuration file not found: {file_path}",
            details=f"{_SETUP_HINT} a new project.",
        )

    if env_file is not None and env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug(f"Loaded environment from {env_file}")

    logger.info(f"Loading configuration from {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigurationError(
            f"Unable to read configuration file: {file_path}", details=str(e)
        ) from e

    try:
        loaded: Any = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            f"Error parsing YAML in {file_path}", details=str(e)
        ) from e

    if not isinstance(loaded, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration structure in {file_path}",
            details=f"Expected a mapping at the top level. {_SETUP_HINT}.",
        )

    # Only string values are substituted; comments and keys stay as written
    try:
        loaded = substitute_env_vars_in_values(loaded)
    except ValueError as e:
        raise InvalidConfigurationError(
            "Configuration references a missing environment variable",
            details=f"{e}\n\nExport the variable or add it to .env.",
        ) from e

    try:
        config = ProjectConfiguration.model_validate(loaded)
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid configuration in {file_path}", details=str(e)
        ) from e

    logger.debug(
        f"Project '{config.project_name}' has contexts: "
        f"{sorted(config.kubernetes_contexts)}"
    )
    return config


def resolve_environment(config: ProjectConfiguration, name: str) -> str:
    """Return the kubectl connection string for an environment.

    Args:
        config: Loaded project configuration
        name: Environment name, e.g. ``dev``

    Returns:
        Connection string such as ``--context dev --namespace default``

    Raises:
        InvalidEnvironmentError: If the name is unknown or maps to an empty value
    """
    connection = config.kubernetes_contexts.get(name, "")
    if not connection.strip():
        known = ", ".join(sorted(config.kubernetes_contexts)) or "none"
        raise InvalidEnvironmentError(
            f"'{name}' is not a valid kubernetes context",
            details=(
                f"Please ensure the context name exists in "
                f"{DEFAULT_CONSTANTS.CONFIG_FILE_NAME} (configured: {known}).\n"
                f"{_SETUP_HINT}."
            ),
        )

    try:
        KubeTarget.parse(connection)
    except ValueError as e:
        raise InvalidEnvironmentError(
            f"Kubernetes context for '{name}' is malformed",
            details=f"{e}\n\nExpected the form `--context <name> --namespace <namespace>`.",
        ) from e
    return connection
