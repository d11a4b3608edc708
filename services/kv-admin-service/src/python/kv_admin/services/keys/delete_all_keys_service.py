import logging
from typing import Iterator, Optional
from injector import inject, singleton
from managed_exceptions import ClientUnavailableException, SweepFailedException
from kv_admin.constants import RAW_SWEEP_BATCH_SIZE, TXN_SWEEP_BATCH_SIZE
from kv_admin.models import KeyRange, KvEntry, KvMode
from kv_admin.repositories import KeyNamespacer, RawKvRepository, TxnKvRepository

@singleton
class DeleteAllKeysService:
    """Deletes every managed key of one mode in bounded chunks.

    The sweep is not atomic: each chunk is durable on its own, so a failure
    part-way leaves the keys of earlier chunks deleted.
    """

    @inject
    def __init__(self,
                 key_namespacer: KeyNamespacer,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__key_namespacer = key_namespacer
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def delete_all_keys(self, mode: KvMode) -> int:
        key_range: KeyRange = self.__key_namespacer.prefix_range(b"")
        chunks: Iterator[int] = self.__sweep_txn(key_range) if mode == KvMode.TXN else self.__sweep_raw(key_range)

        deleted_count: int = 0
        try:
            for chunk_count in chunks:
                deleted_count += chunk_count
        except ClientUnavailableException as e:
            if deleted_count == 0:
                raise
            raise SweepFailedException(mode, deleted_count, f"Failed to delete all keys from {mode}") from e
        except Exception as e:
            self.__logger.error(f"Sweep of {mode} failed after deleting {deleted_count} keys")
            raise SweepFailedException(mode, deleted_count, f"Failed to delete all keys from {mode}") from e

        self.__logger.info(f"Deleted {deleted_count} keys from {mode}")
        return deleted_count

    def __sweep_raw(self, key_range: KeyRange) -> Iterator[int]:
        # Resume each scan right after the last key seen, until a scan comes back empty
        last_key: Optional[bytes] = None
        while True:
            entries: list[KvEntry] = self.__raw_kv_repository.scan_after(key_range, last_key, RAW_SWEEP_BATCH_SIZE)
            if not entries:
                return
            for entry in entries:
                self.__raw_kv_repository.delete(entry.key)
                yield 1
            last_key = entries[-1].key

    def __sweep_txn(self, key_range: KeyRange) -> Iterator[int]:
        # One committed transaction per chunk, a short chunk means the range is drained
        while True:
            chunk_count: int = self.__txn_kv_repository.delete_chunk(key_range, TXN_SWEEP_BATCH_SIZE)
            yield chunk_count
            if chunk_count < TXN_SWEEP_BATCH_SIZE:
                return
