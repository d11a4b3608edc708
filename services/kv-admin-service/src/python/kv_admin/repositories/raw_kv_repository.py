from typing import Optional
from injector import inject, singleton
from managed_exceptions import BackendOperationException, ScanFailedException
from kv_admin.clients import ClientManager
from kv_admin.models import KeyRange, KvEntry, KvMode
from kv_admin.utils import BytesUtil
from .base_kv_repository import BaseKvRepository
from .key_namespacer import KeyNamespacer

@singleton
class RawKvRepository(BaseKvRepository):

    @inject
    def __init__(self,
                 client_manager: ClientManager,
                 key_namespacer: KeyNamespacer):
        super().__init__(KvMode.RAW, key_namespacer)
        self.__client_manager = client_manager

    def read(self, key: bytes) -> Optional[bytes]:
        with self._track("get"), self.__client_manager.raw_client() as client:
            try:
                return client.get(self._key_namespacer.wrap(key))
            except Exception as e:
                raise BackendOperationException(self.mode, "get") from e

    def upsert(self, key: bytes, value: bytes) -> None:
        with self._track("put"), self.__client_manager.raw_client() as client:
            try:
                client.put(self._key_namespacer.wrap(key), value)
            except Exception as e:
                raise BackendOperationException(self.mode, "put") from e

    def delete(self, key: bytes) -> None:
        with self._track("delete"), self.__client_manager.raw_client() as client:
            try:
                client.delete(self._key_namespacer.wrap(key))
            except Exception as e:
                raise BackendOperationException(self.mode, "delete") from e

    def scan(self, key_range: KeyRange, limit: int) -> list[KvEntry]:
        with self._track("scan"), self.__client_manager.raw_client() as client:
            try:
                pairs = client.scan(key_range.start, key_range.end, limit)
            except Exception as e:
                raise ScanFailedException(self.mode) from e
            return self._to_entries(pairs)

    def scan_after(self, key_range: KeyRange, last_key: Optional[bytes], limit: int) -> list[KvEntry]:
        # Resumes a scan strictly after the logical key returned last
        if last_key is None:
            return self.scan(key_range, limit)
        cursor: bytes = BytesUtil.next_key(self._key_namespacer.wrap(last_key))
        return self.scan(KeyRange(start=cursor, end=key_range.end), limit)
