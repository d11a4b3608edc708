from typing import Optional
from kv_admin.backends.exceptions import TransactionClosedError
from kv_admin.backends.kv_transaction import KvTransaction
from .keyspace import TXN_KEYSPACE
from .local_cluster import LocalCluster

class LocalTransaction(KvTransaction):
    """Staged writes over the shared store; nothing reaches the store before commit."""

    def __init__(self, cluster: LocalCluster):
        self.__cluster = cluster
        self.__start_version: int = cluster.current_version()
        self.__writes: dict[bytes, Optional[bytes]] = {}
        self.__state: str = "active"

    def get(self, key: bytes) -> Optional[bytes]:
        self.__ensure_active()
        if key in self.__writes:
            return self.__writes[key]
        return self.__cluster.store.get(TXN_KEYSPACE.wrap(key))

    def set(self, key: bytes, value: bytes) -> None:
        self.__ensure_active()
        self.__writes[key] = value

    def delete(self, key: bytes) -> None:
        self.__ensure_active()
        self.__writes[key] = None

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        self.__ensure_active()
        # Over-fetch by the number of staged writes, since staged deletes may hide stored keys
        actual_start, actual_end = TXN_KEYSPACE.wrap_range(start, end)
        stored = self.__cluster.store.scan(actual_start, actual_end, limit + len(self.__writes))
        merged: dict[bytes, bytes] = {TXN_KEYSPACE.unwrap(key): value for key, value in stored}
        for key, value in self.__writes.items():
            if key < start or (end is not None and key >= end):
                continue
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = value
        return sorted(merged.items())[:limit]

    def commit(self) -> None:
        self.__ensure_active()
        writes, self.__writes = self.__writes, {}
        # A failed commit leaves the transaction rolled back
        self.__state = "rolled back"
        if writes:
            self.__cluster.commit(self.__start_version, writes)
        self.__state = "committed"

    def rollback(self) -> None:
        if self.__state != "active":
            return
        self.__state = "rolled back"
        self.__writes = {}

    def __ensure_active(self) -> None:
        if self.__state != "active":
            raise TransactionClosedError(self.__state)
