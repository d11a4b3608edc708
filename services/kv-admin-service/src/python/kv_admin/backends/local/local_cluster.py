import logging
import threading
from typing import Optional
from kv_admin.backends.exceptions import TransactionConflictError
from .keyspace import TXN_KEYSPACE
from .local_store import LocalStore

class LocalCluster:
    """Shared state of one local cluster.

    Every client opened against the same endpoints shares one cluster: the
    store plus the bookkeeping of optimistic transactions. Each commit gets a
    new version number, and the last committed version of every transactional
    key is remembered. A transaction that began before another one committed a
    key it also writes fails with ``TransactionConflictError``.
    """

    def __init__(self, name: str, store: LocalStore):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__commit_lock = threading.Lock()
        self.__version: int = 0
        self.__key_versions: dict[bytes, int] = {}
        self.name = name
        self.store = store
        self.references: int = 0

    def current_version(self) -> int:
        with self.__commit_lock:
            return self.__version

    def commit(self, start_version: int, writes: dict[bytes, Optional[bytes]]) -> int:
        """Validate and apply the staged writes of one transaction atomically.

        ``writes`` maps logical keys to staged values, None marking a delete.
        Returns the commit version.
        """
        with self.__commit_lock:
            # Check conflicts
            for key in writes:
                if self.__key_versions.get(key, 0) > start_version:
                    raise TransactionConflictError(key)

            # Apply writes
            puts: dict[bytes, bytes] = {}
            deletes: list[bytes] = []
            for key, value in writes.items():
                if value is None:
                    deletes.append(TXN_KEYSPACE.wrap(key))
                else:
                    puts[TXN_KEYSPACE.wrap(key)] = value
            self.store.write(puts, deletes)

            # Record versions
            self.__version += 1
            for key in writes:
                self.__key_versions[key] = self.__version
            return self.__version

    def close(self) -> None:
        self.__logger.info(f"Closing local cluster {self.name}")
        self.store.close()
