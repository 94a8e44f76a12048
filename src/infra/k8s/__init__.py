"""Kubernetes infrastructure abstraction layer.

This module provides a clean abstraction over the cluster operations the
deploy pipeline needs: applying manifest text and managing secrets.

Example:
    from src.infra.k8s import ClusterGateway, KubectlController

    gateway = ClusterGateway(KubectlController())
    gateway.apply("--context dev --namespace default", manifest_text)
"""

from .controller import CommandResult, KubernetesController, KubeTarget
from .gateway import ClusterGateway
from .helpers import get_cluster_gateway, get_k8s_controller
from .kubectl_controller import KubectlController
from .utils import run_sync

__all__ = [
    # Controller classes
    "KubernetesController",
    "KubectlController",
    "ClusterGateway",
    # Data classes
    "CommandResult",
    "KubeTarget",
    # Utilities
    "get_cluster_gateway",
    "get_k8s_controller",
    "run_sync",
]
