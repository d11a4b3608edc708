from injector import inject, singleton
from kv_admin.controllers.cluster.v1.schemas import UpdateClusterEndpointsRequest, ClusterStatusResponse
from kv_admin.services.cluster import UpdateClusterEndpointsService
from request_handler import RequestHandler

@singleton
class UpdateClusterEndpointsHandler(RequestHandler[UpdateClusterEndpointsRequest, ClusterStatusResponse]):

    @inject
    def __init__(self,
                 update_cluster_endpoints_service: UpdateClusterEndpointsService):
        super().__init__(success_message="Cluster endpoints updated successfully")
        self.__update_cluster_endpoints_service = update_cluster_endpoints_service

    def _on_validate(self, request: UpdateClusterEndpointsRequest):
        # Validate request
        pass

    def _on_invoke(self, request: UpdateClusterEndpointsRequest) -> ClusterStatusResponse:
        # Update endpoints
        cluster_status = self.__update_cluster_endpoints_service.update_cluster_endpoints(request.endpoints)

        # Return response
        return ClusterStatusResponse(
            cluster_status=cluster_status.cluster_status,
            connected=cluster_status.connected,
            endpoints=cluster_status.endpoints,
            driver=cluster_status.driver
        )
