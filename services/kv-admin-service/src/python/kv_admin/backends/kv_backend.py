from abc import ABC, abstractmethod
from .raw_kv_client import RawKvClient
from .txn_kv_client import TxnKvClient

class KvBackend(ABC):
    """Driver that opens clients against a set of cluster endpoints.

    Both ``open_*`` calls may block while connecting and raise
    ``BackendConnectError`` on failure. The raw and transactional keyspaces of
    one cluster are disjoint.
    """

    @property
    @abstractmethod
    def driver_name(self) -> str:
        pass

    @abstractmethod
    def open_raw_client(self, endpoints: list[str]) -> RawKvClient:
        pass

    @abstractmethod
    def open_txn_client(self, endpoints: list[str]) -> TxnKvClient:
        pass
