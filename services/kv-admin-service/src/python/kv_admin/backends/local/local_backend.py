import logging
import re
import threading
from pathlib import Path
from typing import Callable
from kv_admin.backends.exceptions import BackendConnectError
from kv_admin.backends.kv_backend import KvBackend
from kv_admin.backends.raw_kv_client import RawKvClient
from kv_admin.backends.txn_kv_client import TxnKvClient
from .local_cluster import LocalCluster
from .local_raw_kv_client import LocalRawKvClient
from .local_store import LocalStore
from .local_txn_kv_client import LocalTxnKvClient
from .memory_store import MemoryStore
from .rocksdb_store import RocksDbStore

UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")

class LocalBackend(KvBackend):
    """Driver that keeps the whole cluster inside the service process.

    Clusters are keyed by their first endpoint, so reconfiguring to the same
    endpoints reopens the same data while different endpoints give a separate
    cluster. A cluster is shared by all clients opened against it and reference
    counted. When the last client closes, a persistent store is closed and
    evicted; an in-memory store is retained so its data outlives reconfiguration.
    """

    def __init__(self,
                 driver_name: str,
                 store_factory: Callable[[str], LocalStore],
                 retain_clusters: bool = False):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__driver_name = driver_name
        self.__store_factory = store_factory
        self.__retain_clusters = retain_clusters
        self.__lock = threading.Lock()
        self.__clusters: dict[str, LocalCluster] = {}

    @classmethod
    def memory(cls) -> "LocalBackend":
        return cls("memory", lambda name: MemoryStore(), retain_clusters=True)

    @classmethod
    def rocksdb(cls, data_dir: str, create_if_missing: bool = True) -> "LocalBackend":
        return cls("rocksdb", lambda name: RocksDbStore(str(Path(data_dir) / name), create_if_missing))

    @property
    def driver_name(self) -> str:
        return self.__driver_name

    def open_raw_client(self, endpoints: list[str]) -> RawKvClient:
        cluster: LocalCluster = self.__acquire(endpoints)
        return LocalRawKvClient(cluster, lambda: self.__release(cluster))

    def open_txn_client(self, endpoints: list[str]) -> TxnKvClient:
        cluster: LocalCluster = self.__acquire(endpoints)
        return LocalTxnKvClient(cluster, lambda: self.__release(cluster))

    def __acquire(self, endpoints: list[str]) -> LocalCluster:
        if not endpoints:
            raise BackendConnectError(endpoints, "no endpoints provided")

        name: str = UNSAFE_NAME_CHARS.sub("_", endpoints[0])
        with self.__lock:
            cluster = self.__clusters.get(name)
            if cluster is None:
                try:
                    store: LocalStore = self.__store_factory(name)
                except Exception as e:
                    raise BackendConnectError(endpoints, str(e)) from e
                cluster = LocalCluster(name, store)
                self.__clusters[name] = cluster
                self.__logger.info(f"Opened {self.__driver_name} cluster {name}")
            cluster.references += 1
            return cluster

    def __release(self, cluster: LocalCluster) -> None:
        with self.__lock:
            cluster.references -= 1
            if cluster.references > 0 or self.__retain_clusters:
                return
            # Closed under the lock so a reopen never races the old handle
            self.__clusters.pop(cluster.name, None)
            cluster.close()
