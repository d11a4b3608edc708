from injector import inject, singleton
from managed_exceptions import KeyNotFoundException
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.utils import BytesUtil

@singleton
class UpdateKeyService:

    @inject
    def __init__(self,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def update_key(self, mode: KvMode, key: bytes, value: bytes) -> None:
        if mode == KvMode.TXN:
            updated: bool = self.__txn_kv_repository.update(key, value)
        else:
            updated: bool = self.__raw_kv_repository.read(key) is not None
            if updated:
                self.__raw_kv_repository.upsert(key, value)

        if not updated:
            raise KeyNotFoundException(BytesUtil.to_str(key))
