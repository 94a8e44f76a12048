"""Manifest template loading and placeholder substitution.

Templates are plain text with ``${NAME}`` tokens. Rendering replaces every
occurrence of each supplied token and leaves everything else untouched.
Tokens without a value are passed through verbatim unless rendering is
strict.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from loguru import logger

from src.hippo.errors import ManifestNotFoundError, ReadError, UnresolvedPlaceholderError
from src.infra.constants import DEFAULT_CONSTANTS, DeploymentConstants

PLACEHOLDER_PATTERN = re.compile(r"\$\{([^${}]+)\}")


def placeholder(name: str) -> str:
    """Return the literal token for a placeholder name."""
    return f"${{{name}}}"


def format_timestamp(moment: datetime) -> str:
    """Format a timezone-aware moment as RFC 3339 UTC with second precision.

    Naive datetimes are rejected; an ambiguous local time would be stamped
    as if it were UTC.
    """
    if moment.tzinfo is None:
        raise ValueError("Timestamp must be timezone-aware")
    return moment.astimezone(UTC).isoformat(timespec="seconds")


def deployment_substitutions(
    commit: str,
    now: datetime | None = None,
    constants: DeploymentConstants | None = None,
) -> dict[str, str]:
    """Build the substitutions every deploy applies.

    Args:
        commit: Commit identifier stamped into ``${COMMIT}``
        now: Render time (defaults to the current UTC time)
        constants: Source of the placeholder names (defaults if omitted)

    Returns:
        Mapping of placeholder name to value
    """
    constants = constants or DEFAULT_CONSTANTS
    moment = now or datetime.now(UTC)
    return {
        constants.COMMIT_PLACEHOLDER: commit,
        constants.TIMESTAMP_PLACEHOLDER: format_timestamp(moment),
    }


@dataclass(frozen=True)
class ManifestTemplate:
    """Raw manifest text read from disk."""

    path: Path
    text: str

    @classmethod
    def load(cls, path: Path) -> ManifestTemplate:
        """Read a template from disk.

        Raises:
            ManifestNotFoundError: If the file does not exist
            ReadError: If the file exists but cannot be read as UTF-8
        """
        if not path.exists():
            raise ManifestNotFoundError(
                f"Manifest template not found: {path}",
                details=(
                    "Run `"
                    f"{DEFAULT_CONSTANTS.SETUP_KUBERNETES_COMMAND}"
                    "` to create the deployment files."
                ),
            )
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Unable to read manifest template: {path}", details=str(e)) from e
        return cls(path=path, text=text)

    def placeholders(self) -> list[str]:
        """Distinct placeholder names in order of first appearance."""
        return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(self.text)))

    def render(self, substitutions: Mapping[str, str], *, strict: bool = False) -> str:
        """Substitute every occurrence of each ``${KEY}`` token.

        Args:
            substitutions: Placeholder name to value
            strict: Raise instead of passing unresolved tokens through

        Returns:
            The rendered manifest text

        Raises:
            UnresolvedPlaceholderError: If strict and any token has no value
        """
        unresolved = [name for name in self.placeholders() if name not in substitutions]
        if unresolved:
            if strict:
                raise UnresolvedPlaceholderError(unresolved)
            logger.warning(
                f"Passing unresolved placeholders through unchanged: {unresolved}"
            )

        # Single pass: substituted values are never re-scanned for tokens
        return PLACEHOLDER_PATTERN.sub(
            lambda match: substitutions.get(match.group(1), match.group(0)),
            self.text,
        )


def render_template(
    template_path: Path,
    substitutions: Mapping[str, str],
    *,
    strict: bool = False,
) -> str:
    """Load a template and render it in one step."""
    return ManifestTemplate.load(template_path).render(substitutions, strict=strict)
