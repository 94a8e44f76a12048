"""Environment variable substitution for hippo.yaml."""

import os
import re
from typing import Any

from loguru import logger

_PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message

    Raises:
        ValueError: If a required variable is not set
    """

    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            value = os.getenv(var_name)
            if value is None:
                logger.debug(f"Using default value for {var_name}")
                return default
            return value

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    return _PLACEHOLDER_PATTERN.sub(replacer, text)


def substitute_env_vars_in_values(data: Any) -> Any:
    """Apply substitute_env_vars to every string value of parsed YAML.

    Mapping keys are left as written.
    """
    if isinstance(data, str):
        return substitute_env_vars(data)
    if isinstance(data, dict):
        return {key: substitute_env_vars_in_values(value) for key, value in data.items()}
    if isinstance(data, list):
        return [substitute_env_vars_in_values(item) for item in data]
    return data
