from injector import inject, singleton
from kv_admin.controllers.cluster.v1.schemas import GetClusterStatusRequest, ClusterStatusResponse
from kv_admin.services.cluster import GetClusterStatusService
from request_handler import RequestHandler

@singleton
class GetClusterStatusHandler(RequestHandler[GetClusterStatusRequest, ClusterStatusResponse]):

    @inject
    def __init__(self,
                 get_cluster_status_service: GetClusterStatusService):
        super().__init__(success_message="Cluster info retrieved successfully")
        self.__get_cluster_status_service = get_cluster_status_service

    def _on_validate(self, request: GetClusterStatusRequest):
        # Validate request
        pass

    def _on_invoke(self, request: GetClusterStatusRequest) -> ClusterStatusResponse:
        # Get cluster status
        cluster_status = self.__get_cluster_status_service.get_cluster_status()

        # Return response
        return ClusterStatusResponse(
            cluster_status=cluster_status.cluster_status,
            connected=cluster_status.connected,
            endpoints=cluster_status.endpoints,
            driver=cluster_status.driver
        )
