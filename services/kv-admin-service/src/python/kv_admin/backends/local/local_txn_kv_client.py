from typing import Callable
from kv_admin.backends.exceptions import ClientClosedError
from kv_admin.backends.kv_transaction import KvTransaction
from kv_admin.backends.txn_kv_client import TxnKvClient
from .local_cluster import LocalCluster
from .local_transaction import LocalTransaction

class LocalTxnKvClient(TxnKvClient):

    def __init__(self, cluster: LocalCluster, on_close: Callable[[], None]):
        self.__cluster = cluster
        self.__on_close = on_close
        self.__closed = False

    def begin(self) -> KvTransaction:
        if self.__closed:
            raise ClientClosedError("txn")
        return LocalTransaction(self.__cluster)

    def close(self) -> None:
        if self.__closed:
            return
        self.__closed = True
        self.__on_close()
