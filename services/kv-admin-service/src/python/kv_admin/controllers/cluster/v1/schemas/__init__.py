from .cluster_status_response import ClusterStatusResponse
from .get_cluster_status_request import GetClusterStatusRequest
from .update_cluster_endpoints_request import UpdateClusterEndpointsRequest

__all__ = [
    "ClusterStatusResponse",
    "GetClusterStatusRequest",
    "UpdateClusterEndpointsRequest"
]
