from injector import inject, singleton
from kv_admin.models import KeyRange, KvEntry, KvMode
from kv_admin.repositories import KeyNamespacer, RawKvRepository, TxnKvRepository

@singleton
class RangeScanner:
    """Bounded ordered scans over either access mode."""

    @inject
    def __init__(self,
                 key_namespacer: KeyNamespacer,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__key_namespacer = key_namespacer
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def prefix_range(self, prefix: bytes) -> KeyRange:
        return self.__key_namespacer.prefix_range(prefix)

    def scan(self, mode: KvMode, key_range: KeyRange, limit: int) -> list[KvEntry]:
        if limit <= 0:
            return []
        if mode == KvMode.TXN:
            return self.__txn_kv_repository.scan(key_range, limit)
        return self.__raw_kv_repository.scan(key_range, limit)

    def scan_prefix(self, mode: KvMode, prefix: bytes, limit: int) -> list[KvEntry]:
        return self.scan(mode, self.prefix_range(prefix), limit)
