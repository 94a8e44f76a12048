"""Error taxonomy for the deploy pipeline.

Every failure the pipeline can report is a ``DeploymentError``. The
``details`` attribute carries either a remediation hint (for missing
preconditions) or the underlying tool diagnostic (for external failures).
"""

from __future__ import annotations


class DeploymentError(Exception):
    """Raised when a deployment operation fails."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(DeploymentError):
    """A required file is missing or cannot be understood."""


class ConfigNotFoundError(NotFoundError):
    """hippo.yaml does not exist."""


class InvalidConfigurationError(NotFoundError):
    """hippo.yaml exists but is malformed."""


class ManifestNotFoundError(NotFoundError):
    """The manifest template does not exist."""


class ReadError(DeploymentError):
    """Generic file-system failure while reading a file."""


class InvalidEnvironmentError(DeploymentError):
    """The environment name has no usable kubernetes context."""


class NoRepositoryError(DeploymentError):
    """git is unavailable or the project is not a repository."""


class NoCommitsError(DeploymentError):
    """The repository has no commit reachable from HEAD."""


class ApplyError(DeploymentError):
    """The cluster rejected or could not process a request."""


class UnresolvedPlaceholderError(DeploymentError):
    """Strict rendering found placeholders without a value."""

    def __init__(self, placeholders: list[str]):
        self.placeholders = placeholders
        tokens = ", ".join(f"${{{name}}}" for name in placeholders)
        super().__init__(
            "Manifest contains unresolved placeholders",
            details=(
                f"No value was supplied for: {tokens}\n\n"
                "Remove the placeholders from deployment_files/deploy.yaml "
                "or deploy without --strict to pass them through unchanged."
            ),
        )
