import threading
from injector import inject, singleton
from kv_admin.configs import KvAdminConfig

@singleton
class EndpointRegistry:
    """Cluster endpoints currently in effect. Only changed by a successful reconfiguration."""

    @inject
    def __init__(self, config: KvAdminConfig):
        self.__lock = threading.Lock()
        self.__endpoints: list[str] = list(config.cluster_endpoints)

    def get_endpoints(self) -> list[str]:
        with self.__lock:
            return list(self.__endpoints)

    def set_endpoints(self, endpoints: list[str]) -> None:
        with self.__lock:
            self.__endpoints = list(endpoints)
