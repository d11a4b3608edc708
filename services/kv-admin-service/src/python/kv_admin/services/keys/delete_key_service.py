from injector import inject, singleton
from managed_exceptions import KeyNotFoundException
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.utils import BytesUtil

@singleton
class DeleteKeyService:

    @inject
    def __init__(self,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def delete_key(self, mode: KvMode, key: bytes) -> None:
        if not self.try_delete_key(mode, key):
            raise KeyNotFoundException(BytesUtil.to_str(key))

    def try_delete_key(self, mode: KvMode, key: bytes) -> bool:
        if mode == KvMode.TXN:
            return self.__txn_kv_repository.delete(key)

        if self.__raw_kv_repository.read(key) is None:
            return False
        self.__raw_kv_repository.delete(key)
        return True
