"""Tests for the stage pipeline driver."""

from __future__ import annotations

import pytest

from src.cli.deployment.pipeline import (
    DeployStage,
    PipelineFailed,
    PipelineSucceeded,
    Stage,
    run_pipeline,
)
from src.hippo.errors import DeploymentError, NoCommitsError


def _append(tag: str):  # type: ignore[no-untyped-def]
    def run(state: tuple[str, ...]) -> tuple[str, ...]:
        return (*state, tag)

    return run


def _raise(error: Exception):  # type: ignore[no-untyped-def]
    def run(state: tuple[str, ...]) -> tuple[str, ...]:
        raise error

    return run


class TestRunPipeline:
    """run_pipeline sequencing and short circuit."""

    def test_all_stages_run_in_order(self) -> None:
        stages = [
            Stage(DeployStage.CONFIG_LOADED, _append("config")),
            Stage(DeployStage.ENVIRONMENT_RESOLVED, _append("env")),
            Stage(DeployStage.APPLIED, _append("apply")),
        ]

        result = run_pipeline(stages, ())

        assert isinstance(result, PipelineSucceeded)
        assert result.ok
        assert result.state == ("config", "env", "apply")
        assert result.completed == (
            DeployStage.CONFIG_LOADED,
            DeployStage.ENVIRONMENT_RESOLVED,
            DeployStage.APPLIED,
        )

    def test_first_failure_stops_pipeline(self) -> None:
        later = []
        error = NoCommitsError("no commits")
        stages = [
            Stage(DeployStage.CONFIG_LOADED, _append("config")),
            Stage(DeployStage.REVISION_RESOLVED, _raise(error)),
            Stage(DeployStage.APPLIED, lambda state: later.append(state) or state),
        ]

        result = run_pipeline(stages, ())

        assert isinstance(result, PipelineFailed)
        assert not result.ok
        assert result.stage is DeployStage.REVISION_RESOLVED
        assert result.error is error
        assert result.state == ("config",)
        assert result.completed == (DeployStage.CONFIG_LOADED,)
        assert later == []

    def test_unexpected_exceptions_propagate(self) -> None:
        stages = [Stage(DeployStage.CONFIG_LOADED, _raise(RuntimeError("bug")))]

        with pytest.raises(RuntimeError):
            run_pipeline(stages, ())

    def test_empty_pipeline_succeeds(self) -> None:
        result = run_pipeline([], ("start",))

        assert isinstance(result, PipelineSucceeded)
        assert result.state == ("start",)

    def test_base_deployment_error_is_caught(self) -> None:
        stages = [Stage(DeployStage.APPLIED, _raise(DeploymentError("boom", "hint")))]

        result = run_pipeline(stages, ())

        assert isinstance(result, PipelineFailed)
        assert result.error.details == "hint"
