import logging
from injector import inject, singleton
from kv_admin.clients import ClientManager
from kv_admin.models import ClusterStatus
from kv_admin.utils import EndpointsUtil
from .get_cluster_status_service import GetClusterStatusService

@singleton
class UpdateClusterEndpointsService:

    @inject
    def __init__(self,
                 client_manager: ClientManager,
                 get_cluster_status_service: GetClusterStatusService):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__client_manager = client_manager
        self.__get_cluster_status_service = get_cluster_status_service

    def update_cluster_endpoints(self, endpoints_csv: str) -> ClusterStatus:
        # Parse endpoints
        endpoints: list[str] = EndpointsUtil.parse(endpoints_csv)

        # Reconnect, the previous clients stay in effect on failure
        self.__logger.info(f"Updating cluster endpoints to {endpoints}")
        self.__client_manager.reconfigure(endpoints)

        return self.__get_cluster_status_service.get_cluster_status()
