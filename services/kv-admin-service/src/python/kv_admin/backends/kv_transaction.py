from abc import ABC, abstractmethod
from typing import Iterator, Optional
from kv_admin.constants import TXN_ITER_BATCH_SIZE

class KvTransaction(ABC):
    """One optimistic transaction over the transactional keyspace.

    Reads observe the writes staged earlier in the same transaction. Nothing is
    visible to other transactions before ``commit``. A transaction ends with
    exactly one ``commit`` or ``rollback``; ``rollback`` of an ended transaction
    is a no-op.
    """

    @abstractmethod
    def get(self, key: bytes) -> Optional[bytes]:
        pass

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> None:
        pass

    @abstractmethod
    def delete(self, key: bytes) -> None:
        pass

    @abstractmethod
    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass

    def iterate(self, start: bytes, end: Optional[bytes]) -> Iterator[tuple[bytes, bytes]]:
        # Forward iterator, fetched lazily in bounded scans
        cursor: bytes = start
        while True:
            batch: list[tuple[bytes, bytes]] = self.scan(cursor, end, TXN_ITER_BATCH_SIZE)
            yield from batch
            if len(batch) < TXN_ITER_BATCH_SIZE:
                return
            cursor = batch[-1][0] + b"\x00"
