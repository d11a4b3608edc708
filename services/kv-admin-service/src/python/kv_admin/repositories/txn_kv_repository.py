import logging
from contextlib import contextmanager
from itertools import islice
from typing import Iterator, Optional
from injector import inject, singleton
from managed_exceptions import BackendOperationException, ManagedException, ScanFailedException, TransactionFailedException
from kv_admin.backends import KvTransaction
from kv_admin.clients import ClientManager
from kv_admin.models import KeyRange, KvEntry, KvMode
from .base_kv_repository import BaseKvRepository
from .key_namespacer import KeyNamespacer

class TxnSession:
    """Namespaced view of one open transaction.

    Backend errors are raised as they are; the caller decides what a failure
    means for its unit of work.
    """

    def __init__(self, transaction: KvTransaction, key_namespacer: KeyNamespacer):
        self.__transaction = transaction
        self.__key_namespacer = key_namespacer
        self.committed: bool = False

    def get(self, key: bytes) -> Optional[bytes]:
        return self.__transaction.get(self.__key_namespacer.wrap(key))

    def set(self, key: bytes, value: bytes) -> None:
        self.__transaction.set(self.__key_namespacer.wrap(key), value)

    def delete(self, key: bytes) -> None:
        self.__transaction.delete(self.__key_namespacer.wrap(key))

    def iterate(self, key_range: KeyRange) -> Iterator[KvEntry]:
        for key, value in self.__transaction.iterate(key_range.start, key_range.end):
            if self.__key_namespacer.is_managed(key):
                yield KvEntry(key=self.__key_namespacer.unwrap(key), value=value)

    def commit(self) -> None:
        self.__transaction.commit()
        self.committed = True

    def rollback(self) -> None:
        self.__transaction.rollback()


@singleton
class TxnKvRepository(BaseKvRepository):

    @inject
    def __init__(self,
                 client_manager: ClientManager,
                 key_namespacer: KeyNamespacer):
        super().__init__(KvMode.TXN, key_namespacer)
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__client_manager = client_manager

    @contextmanager
    def transaction(self) -> Iterator[TxnSession]:
        """Lease the transactional client and open one transaction on it.

        The transaction is rolled back on exit unless the body committed it.
        """
        with self.__client_manager.txn_client() as client:
            try:
                session = TxnSession(client.begin(), self._key_namespacer)
            except Exception as e:
                raise TransactionFailedException("Failed to begin transaction") from e
            try:
                yield session
            finally:
                if not session.committed:
                    self.__rollback(session)

    def read(self, key: bytes) -> Optional[bytes]:
        with self._track("get"):
            try:
                with self.transaction() as session:
                    return session.get(key)
            except ManagedException:
                raise
            except Exception as e:
                raise BackendOperationException(self.mode, "get") from e

    def upsert(self, key: bytes, value: bytes) -> None:
        with self._track("put"):
            try:
                with self.transaction() as session:
                    session.set(key, value)
                    session.commit()
            except ManagedException:
                raise
            except Exception as e:
                raise BackendOperationException(self.mode, "put") from e

    def insert(self, key: bytes, value: bytes) -> bool:
        # Create only when absent, checked and written in one transaction
        with self._track("insert"):
            try:
                with self.transaction() as session:
                    if session.get(key) is not None:
                        return False
                    session.set(key, value)
                    session.commit()
                    return True
            except ManagedException:
                raise
            except Exception as e:
                raise BackendOperationException(self.mode, "create") from e

    def update(self, key: bytes, value: bytes) -> bool:
        with self._track("update"):
            try:
                with self.transaction() as session:
                    if session.get(key) is None:
                        return False
                    session.set(key, value)
                    session.commit()
                    return True
            except ManagedException:
                raise
            except Exception as e:
                raise BackendOperationException(self.mode, "update") from e

    def delete(self, key: bytes) -> bool:
        with self._track("delete"):
            try:
                with self.transaction() as session:
                    if session.get(key) is None:
                        return False
                    session.delete(key)
                    session.commit()
                    return True
            except ManagedException:
                raise
            except Exception as e:
                raise BackendOperationException(self.mode, "delete") from e

    def scan(self, key_range: KeyRange, limit: int) -> list[KvEntry]:
        # Read-only transaction, never committed
        with self._track("scan"):
            try:
                with self.transaction() as session:
                    return list(islice(session.iterate(key_range), limit))
            except ManagedException:
                raise
            except Exception as e:
                raise ScanFailedException(self.mode) from e

    def delete_chunk(self, key_range: KeyRange, limit: int) -> int:
        """Delete up to ``limit`` keys of the range in one committed transaction.

        Backend errors are raised as they are.
        """
        with self._track("delete_chunk"), self.transaction() as session:
            entries: list[KvEntry] = list(islice(session.iterate(key_range), limit))
            for entry in entries:
                session.delete(entry.key)
            session.commit()
            return len(entries)

    def __rollback(self, session: TxnSession) -> None:
        try:
            session.rollback()
        except Exception:
            self.__logger.warning("Failed to roll back transaction", exc_info=True)
