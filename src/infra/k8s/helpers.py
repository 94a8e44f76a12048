from __future__ import annotations

from cachetools.func import lru_cache  # type: ignore

from src.infra.k8s.controller import KubernetesController
from src.infra.k8s.gateway import ClusterGateway


@lru_cache(maxsize=1)
def get_k8s_controller() -> KubernetesController:
    """Get an instance of the KubernetesController.

    Returns:
        An instance of KubernetesController
    """
    from src.infra.k8s.kubectl_controller import KubectlController

    return KubectlController()


def get_cluster_gateway() -> ClusterGateway:
    """Get a synchronous gateway over the shared controller."""
    return ClusterGateway(get_k8s_controller())
