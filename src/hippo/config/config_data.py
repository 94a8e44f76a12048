"""Typed model of hippo.yaml."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HippoModel(BaseModel):
    """Base model: camelCase keys in YAML, snake_case in Python, read-only."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class VersionControlConfig(HippoModel):
    """Remote repository coordinates and credentials."""

    provider: str = ""
    namespace: str = ""
    project: str = ""
    repository: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)


class DockerRegistryConfig(HippoModel):
    """Container registry the project pushes images to."""

    name: str = ""
    url: str = ""
    user: str = ""
    password: str = Field(default="", repr=False)


class ProjectConfiguration(HippoModel):
    """Persisted project configuration.

    Attributes:
        project_name: Name of the project, also used for derived resources
        language: Project language chosen at scaffold time
        kubernetes_contexts: Environment name to kubectl connection string,
            e.g. ``{"dev": "--context dev --namespace default"}``
        version_control: Repository settings
        docker_registry: Registry settings, absent until docker setup ran
    """

    project_name: str = Field(alias="projectName")
    language: str = ""
    kubernetes_contexts: dict[str, str] = Field(
        default_factory=dict, alias="kubernetesContexts"
    )
    version_control: VersionControlConfig = Field(
        default_factory=VersionControlConfig, alias="versionControl"
    )
    docker_registry: DockerRegistryConfig | None = Field(
        default=None, alias="dockerRegistry"
    )

    @field_validator("kubernetes_contexts", mode="before")
    @classmethod
    def blank_contexts_as_empty(cls, value: Any) -> Any:
        # `staging:` with no value loads as None; resolving it fails later
        if value is None:
            return {}
        if isinstance(value, dict):
            return {name: "" if conn is None else conn for name, conn in value.items()}
        return value
