from .get_cluster_status_handler import GetClusterStatusHandler
from .update_cluster_endpoints_handler import UpdateClusterEndpointsHandler

__all__ = [
    "GetClusterStatusHandler",
    "UpdateClusterEndpointsHandler"
]
