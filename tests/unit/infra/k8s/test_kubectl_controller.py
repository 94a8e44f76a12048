"""Unit tests for the kubectl controller and connection string parsing."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from src.infra.k8s import KubectlController, KubeTarget, run_sync


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    result = MagicMock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestKubeTarget:
    """Parsing connection strings from hippo.yaml."""

    def test_parse_context_and_namespace(self) -> None:
        target = KubeTarget.parse("--context dev --namespace default")

        assert target.context == "dev"
        assert target.namespace == "default"
        assert target.to_args() == ["--context", "dev", "--namespace", "default"]

    def test_parse_inline_and_short_forms(self) -> None:
        target = KubeTarget.parse("--context=docker-for-desktop -n team-a")

        assert target.context == "docker-for-desktop"
        assert target.namespace == "team-a"

    def test_extra_flags_are_preserved(self) -> None:
        target = KubeTarget.parse("--context dev --kubeconfig /tmp/kc --namespace ns")

        assert target.extra_args == ("--kubeconfig", "/tmp/kc")
        assert target.to_args() == [
            "--context",
            "dev",
            "--namespace",
            "ns",
            "--kubeconfig",
            "/tmp/kc",
        ]

    @pytest.mark.parametrize("connection", ["--context", "--context dev --namespace", "'--context"])
    def test_malformed_connection(self, connection: str) -> None:
        with pytest.raises(ValueError):
            KubeTarget.parse(connection)


class TestKubectlController:
    """Commands issued by KubectlController."""

    @pytest.fixture
    def controller(self) -> KubectlController:
        return KubectlController()

    @pytest.fixture
    def target(self) -> KubeTarget:
        return KubeTarget.parse("--context dev --namespace default")

    def test_apply_pipes_manifest_on_stdin(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", return_value=_completed(stdout="deployment.apps/acme configured")) as run:
            result = run_sync(controller.apply_manifest_text(target, "kind: Deployment"))

        assert result.success
        cmd = run.call_args[0][0]
        assert cmd == [
            "kubectl",
            "--context",
            "dev",
            "--namespace",
            "default",
            "apply",
            "-f",
            "-",
        ]
        assert run.call_args.kwargs["input"] == "kind: Deployment"

    def test_manifest_is_sent_as_utf8(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", return_value=_completed()) as run:
            run_sync(controller.apply_manifest_text(target, "description: caf\u00e9 \u2713"))

        assert run.call_args.kwargs["encoding"] == "utf-8"
        assert run.call_args.kwargs["input"] == "description: caf\u00e9 \u2713"

    def test_create_secret_uses_literals(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", return_value=_completed()) as run:
            run_sync(
                controller.create_secret(
                    target, "acme", {"POSTGRES_USER": "acme", "POSTGRES_DB": "acme"}
                )
            )

        cmd = run.call_args[0][0]
        assert cmd[5:9] == ["create", "secret", "generic", "acme"]
        assert "--from-literal=POSTGRES_USER=acme" in cmd
        assert "--from-literal=POSTGRES_DB=acme" in cmd

    def test_delete_secret_ignores_missing(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", return_value=_completed()) as run:
            run_sync(controller.delete_secret(target, "acme"))

        cmd = run.call_args[0][0]
        assert cmd[-4:] == ["delete", "secret", "acme", "--ignore-not-found"]

    def test_failed_command_reports_stderr(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", return_value=_completed(1, stderr="error: forbidden")):
            result = run_sync(controller.apply_manifest_text(target, "x"))

        assert not result.success
        assert result.returncode == 1
        assert result.stderr == "error: forbidden"

    def test_missing_kubectl_is_a_failed_result(
        self, controller: KubectlController, target: KubeTarget
    ) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError):
            result = run_sync(controller.apply_manifest_text(target, "x"))

        assert not result.success
        assert result.returncode == 127
        assert "not found" in result.stderr
