from typing import Optional
from injector import inject, singleton
from managed_exceptions import KeyNotFoundException
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.utils import BytesUtil

@singleton
class GetKeyService:

    @inject
    def __init__(self,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def get_key(self, mode: KvMode, key: bytes) -> bytes:
        # Read value
        if mode == KvMode.TXN:
            value: Optional[bytes] = self.__txn_kv_repository.read(key)
        else:
            value: Optional[bytes] = self.__raw_kv_repository.read(key)

        if value is None:
            raise KeyNotFoundException(BytesUtil.to_str(key))
        return value
