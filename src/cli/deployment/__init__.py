"""Deployment orchestration for hippo projects."""

from .deployer import DeploymentContext, DeployResult, KubeDeployer
from .pipeline import DeployStage, PipelineFailed, PipelineSucceeded
from .secret_manager import SecretManager, SecretRecord

__all__ = [
    "DeployResult",
    "DeployStage",
    "DeploymentContext",
    "KubeDeployer",
    "PipelineFailed",
    "PipelineSucceeded",
    "SecretManager",
    "SecretRecord",
]
