from injector import inject, singleton
from kv_admin.clients import ClientManager
from kv_admin.models import ClusterStatus

@singleton
class GetClusterStatusService:

    @inject
    def __init__(self, client_manager: ClientManager):
        self.__client_manager = client_manager

    def get_cluster_status(self) -> ClusterStatus:
        connected: bool = self.__client_manager.is_connected()
        return ClusterStatus(
            cluster_status="connected" if connected else "disconnected",
            connected=connected,
            endpoints=self.__client_manager.get_endpoints(),
            driver=self.__client_manager.driver_name
        )
