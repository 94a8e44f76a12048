"""Manifest template engine."""

from .template import (
    ManifestTemplate,
    deployment_substitutions,
    format_timestamp,
    placeholder,
    render_template,
)

__all__ = [
    "ManifestTemplate",
    "deployment_substitutions",
    "format_timestamp",
    "placeholder",
    "render_template",
]
