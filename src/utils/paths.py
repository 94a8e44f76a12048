from pathlib import Path

from src.infra.constants import DEFAULT_CONSTANTS


def get_project_root(start: Path | None = None) -> Path:
    """Get the project root directory.

    Walks up from the working directory to find the project root,
    identified by the presence of hippo.yaml.

    Args:
        start: Directory to start from (defaults to the working directory)

    Returns:
        Path to the project root directory
    """
    current = (start or Path.cwd()).resolve()

    for parent in [current, *current.parents]:
        if (parent / DEFAULT_CONSTANTS.CONFIG_FILE_NAME).exists():
            return parent

    # No hippo.yaml anywhere above: the working directory is the project
    return current
