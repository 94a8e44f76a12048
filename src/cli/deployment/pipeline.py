"""Ordered stage pipeline with first-failure short circuit.

A pipeline is a list of named stages. Each stage takes the value produced
by the previous one and returns the next. The driver stops at the first
``DeploymentError`` and reports which stage raised it; later stages never
run and nothing is rolled back.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from src.hippo.errors import DeploymentError


class DeployStage(Enum):
    """Stages of a deploy, named after the state reached on success."""

    MANIFEST_CHECKED = "manifest_checked"
    CONFIG_LOADED = "config_loaded"
    ENVIRONMENT_RESOLVED = "environment_resolved"
    REVISION_RESOLVED = "revision_resolved"
    TEMPLATE_RENDERED = "template_rendered"
    APPLIED = "applied"


@dataclass(frozen=True)
class Stage[S]:
    """A named step from one pipeline state to the next."""

    name: DeployStage
    run: Callable[[S], S]


@dataclass(frozen=True)
class PipelineSucceeded[S]:
    """Every stage ran; ``state`` is the final value."""

    state: S
    completed: tuple[DeployStage, ...]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class PipelineFailed[S]:
    """A stage raised; ``stage`` names it and ``error`` is what it raised.

    ``state`` is the last value produced before the failure.
    """

    stage: DeployStage
    error: DeploymentError
    state: S
    completed: tuple[DeployStage, ...]

    @property
    def ok(self) -> bool:
        return False


type PipelineResult[S] = PipelineSucceeded[S] | PipelineFailed[S]


def run_pipeline[S](stages: Sequence[Stage[S]], initial: S) -> PipelineResult[S]:
    """Run ``stages`` in order, halting on the first DeploymentError.

    Exceptions that are not DeploymentError propagate unchanged.
    """
    state = initial
    completed: list[DeployStage] = []
    for stage in stages:
        logger.debug(f"Running stage {stage.name.value}")
        try:
            state = stage.run(state)
        except DeploymentError as e:
            logger.debug(f"Stage {stage.name.value} failed: {e.message}")
            return PipelineFailed(
                stage=stage.name, error=e, state=state, completed=tuple(completed)
            )
        completed.append(stage.name)
    return PipelineSucceeded(state=state, completed=tuple(completed))
