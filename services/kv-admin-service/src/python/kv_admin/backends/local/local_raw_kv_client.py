from typing import Callable, Optional
from kv_admin.backends.exceptions import ClientClosedError
from kv_admin.backends.raw_kv_client import RawKvClient
from .keyspace import RAW_KEYSPACE
from .local_cluster import LocalCluster

class LocalRawKvClient(RawKvClient):

    def __init__(self, cluster: LocalCluster, on_close: Callable[[], None]):
        self.__cluster = cluster
        self.__on_close = on_close
        self.__closed = False

    def get(self, key: bytes) -> Optional[bytes]:
        self.__ensure_open()
        return self.__cluster.store.get(RAW_KEYSPACE.wrap(key))

    def put(self, key: bytes, value: bytes) -> None:
        self.__ensure_open()
        self.__cluster.store.put(RAW_KEYSPACE.wrap(key), value)

    def delete(self, key: bytes) -> None:
        self.__ensure_open()
        self.__cluster.store.delete(RAW_KEYSPACE.wrap(key))

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        self.__ensure_open()
        actual_start, actual_end = RAW_KEYSPACE.wrap_range(start, end)
        return [
            (RAW_KEYSPACE.unwrap(key), value)
            for key, value in self.__cluster.store.scan(actual_start, actual_end, limit)
        ]

    def close(self) -> None:
        if self.__closed:
            return
        self.__closed = True
        self.__on_close()

    def __ensure_open(self) -> None:
        if self.__closed:
            raise ClientClosedError("rawkv")
