from .get_cluster_status_service import GetClusterStatusService
from .update_cluster_endpoints_service import UpdateClusterEndpointsService

__all__ = [
    "GetClusterStatusService",
    "UpdateClusterEndpointsService"
]
