from injector import inject, singleton
from managed_exceptions import KeyAlreadyExistsException
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.utils import BytesUtil

@singleton
class CreateKeyService:

    @inject
    def __init__(self,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def create_key(self, mode: KvMode, key: bytes, value: bytes) -> None:
        if mode == KvMode.TXN:
            # Existence check and write share one transaction
            if not self.__txn_kv_repository.insert(key, value):
                raise KeyAlreadyExistsException(BytesUtil.to_str(key))
            return

        # Raw mode has no atomic check-and-set, a concurrent writer may slip in between
        if self.__raw_kv_repository.read(key) is not None:
            raise KeyAlreadyExistsException(BytesUtil.to_str(key))
        self.__raw_kv_repository.upsert(key, value)
